"""Price calculator - bundle substitution, add-ons and discounts.

The calculator:
- Depends only on the PriceTable interface
- Never rejects a selection; add-ons without their base service are free
- Applies at most one discount, the largest available
- Reports discount ties through the discount_tie_detected signal
"""

import logging
from typing import Iterable

from wedding_pricing.domain import (
    Money,
    PriceLookupError,
    PriceResult,
    Selection,
    ServiceType,
    ServiceYear,
)
from wedding_pricing.signals import discount_tie_detected
from wedding_pricing.stores import PRICE_TABLE, WEDDING_SESSION_FLAT_DISCOUNT, PriceTable

logger = logging.getLogger(__name__)


class PriceCalculator:
    """Computes the base and final price of a selection for one year."""

    def __init__(
        self,
        selected_services: Iterable[ServiceType],
        selected_year: ServiceYear,
        table: PriceTable | None = None,
    ) -> None:
        self._selected: Selection = frozenset(_as_services(selected_services, selected_year))
        self._year = selected_year
        self._table = table if table is not None else PRICE_TABLE
        if selected_year not in self._table.years():
            raise PriceLookupError(selected_year)

    def calculate_base_price(self) -> Money:
        """Return the price before discounts."""
        base_price = Money.zero()

        if self._is_package_selected(ServiceType.PHOTOGRAPHY, ServiceType.VIDEO_RECORDING):
            base_price += self._table.bundle_price(self._year)
        else:
            if self._has(ServiceType.PHOTOGRAPHY):
                base_price += self._price_of(ServiceType.PHOTOGRAPHY)
            if self._has(ServiceType.VIDEO_RECORDING):
                base_price += self._price_of(ServiceType.VIDEO_RECORDING)

        if self._has(ServiceType.WEDDING_SESSION):
            base_price += self._price_of(ServiceType.WEDDING_SESSION)

        if self._has(ServiceType.BLURAY_PACKAGE) and self._has(ServiceType.VIDEO_RECORDING):
            base_price += self._price_of(ServiceType.BLURAY_PACKAGE)

        if self._has(ServiceType.TWO_DAY_EVENT) and self._has_photo_or_video():
            base_price += self._price_of(ServiceType.TWO_DAY_EVENT)

        return base_price

    def get_potential_discounts(self) -> list[Money]:
        """Return every discount the selection qualifies for."""
        discounts: list[Money] = []

        if self._has(ServiceType.WEDDING_SESSION):
            if self._year == self._table.latest_year() and self._has(ServiceType.PHOTOGRAPHY):
                discounts.append(self._price_of(ServiceType.WEDDING_SESSION))
            elif self._has_photo_or_video():
                discounts.append(WEDDING_SESSION_FLAT_DISCOUNT)

        return discounts

    def calculate(self) -> PriceResult:
        """Return base and final price, applying only the largest discount."""
        base_price = self.calculate_base_price()
        potential_discounts = self.get_potential_discounts()

        max_discount = max(potential_discounts, default=Money.zero())
        final_price = base_price - max_discount

        if not max_discount.is_zero() and potential_discounts.count(max_discount) > 1:
            self._report_tie(max_discount, potential_discounts)

        logger.debug(
            "Priced %d services for %s: base=%s final=%s",
            len(self._selected),
            int(self._year),
            base_price,
            final_price,
        )
        return PriceResult(base_price=base_price, final_price=final_price)

    def _report_tie(self, discount: Money, candidates: list[Money]) -> None:
        discount_tie_detected.send_robust(
            sender=type(self),
            year=self._year,
            discount=discount,
            candidates=tuple(candidates),
        )

    def _price_of(self, service: ServiceType) -> Money:
        return self._table.service_price(self._year, service)

    def _has(self, service: ServiceType) -> bool:
        return service in self._selected

    def _has_photo_or_video(self) -> bool:
        return self._has(ServiceType.PHOTOGRAPHY) or self._has(ServiceType.VIDEO_RECORDING)

    def _is_package_selected(self, *services: ServiceType) -> bool:
        return all(self._has(service) for service in services)


def _as_services(services: Iterable[ServiceType], year: ServiceYear) -> Iterable[ServiceType]:
    for service in services:
        try:
            yield ServiceType(service)
        except ValueError:
            raise PriceLookupError(year, service) from None


def calculate_price(
    selected_services: Iterable[ServiceType],
    selected_year: ServiceYear,
) -> PriceResult:
    """Price a selection against the built-in price table."""
    return PriceCalculator(selected_services, selected_year).calculate()
