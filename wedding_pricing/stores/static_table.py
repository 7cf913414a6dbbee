"""In-memory implementation of the PriceTable.

The built-in price list is module-level constant data wrapped in read-only views.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from wedding_pricing.domain import Money, PriceLookupError, ServiceType, ServiceYear
from wedding_pricing.stores.interfaces import PriceTable

WEDDING_SESSION_FLAT_DISCOUNT = Money(Decimal("300"))


def _prices(
    photography: int,
    video_recording: int,
    bluray_package: int,
    two_day_event: int,
    wedding_session: int,
) -> Mapping[ServiceType, Money]:
    return MappingProxyType(
        {
            ServiceType.PHOTOGRAPHY: Money(photography),
            ServiceType.VIDEO_RECORDING: Money(video_recording),
            ServiceType.BLURAY_PACKAGE: Money(bluray_package),
            ServiceType.TWO_DAY_EVENT: Money(two_day_event),
            ServiceType.WEDDING_SESSION: Money(wedding_session),
        }
    )


SERVICE_PRICES: Mapping[ServiceYear, Mapping[ServiceType, Money]] = MappingProxyType(
    {
        ServiceYear.Y2020: _prices(1700, 1700, 300, 400, 600),
        ServiceYear.Y2021: _prices(1800, 1800, 300, 400, 600),
        ServiceYear.Y2022: _prices(1900, 1900, 300, 400, 600),
    }
)

BUNDLE_PRICES: Mapping[ServiceYear, Money] = MappingProxyType(
    {
        ServiceYear.Y2020: Money(2200),
        ServiceYear.Y2021: Money(2300),
        ServiceYear.Y2022: Money(2500),
    }
)


class StaticPriceTable(PriceTable):
    """Price table backed by constant mappings."""

    def __init__(
        self,
        service_prices: Mapping[ServiceYear, Mapping[ServiceType, Money]] = SERVICE_PRICES,
        bundle_prices: Mapping[ServiceYear, Money] = BUNDLE_PRICES,
    ) -> None:
        if set(service_prices) != set(bundle_prices):
            raise ValueError("Service and bundle prices must cover the same years")
        for year, prices in service_prices.items():
            missing = set(ServiceType) - set(prices)
            if missing:
                raise ValueError(f"Price list for {int(year)} is missing {sorted(s.value for s in missing)}")
        self._service_prices = service_prices
        self._bundle_prices = bundle_prices

    def service_price(self, year: ServiceYear, service: ServiceType) -> Money:
        prices = self._service_prices.get(_as_year(year))
        if prices is None:
            raise PriceLookupError(year, service)
        try:
            return prices[ServiceType(service)]
        except (KeyError, ValueError):
            raise PriceLookupError(year, service) from None

    def bundle_price(self, year: ServiceYear) -> Money:
        try:
            return self._bundle_prices[_as_year(year)]
        except KeyError:
            raise PriceLookupError(year) from None

    def years(self) -> tuple[ServiceYear, ...]:
        return tuple(sorted(self._bundle_prices))


def _as_year(year) -> ServiceYear | None:
    try:
        return ServiceYear(year)
    except ValueError:
        return None


PRICE_TABLE = StaticPriceTable()
