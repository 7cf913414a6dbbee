"""Store interfaces (repository pattern).

Price tables must be swappable and return domain money values.
"""

from abc import ABC, abstractmethod

from wedding_pricing.domain import Money, ServiceType, ServiceYear


class PriceTable(ABC):
    """Interface for read-only price lookups."""

    @abstractmethod
    def service_price(self, year: ServiceYear, service: ServiceType) -> Money:
        """Return the list price of a single service in a year.

        Raises:
            PriceLookupError: If the year or service is not listed.
        """
        ...

    @abstractmethod
    def bundle_price(self, year: ServiceYear) -> Money:
        """Return the combined Photography and VideoRecording price for a year.

        Raises:
            PriceLookupError: If the year is not listed.
        """
        ...

    @abstractmethod
    def years(self) -> tuple[ServiceYear, ...]:
        """Return the listed years in ascending order."""
        ...

    def latest_year(self) -> ServiceYear:
        """Return the most recent listed year."""
        return self.years()[-1]
