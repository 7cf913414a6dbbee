"""Domain models passed between the reducer, the calculator and their callers.

These are pure domain objects with no payload parsing rules.
Payload serializers live in wedding_pricing/handlers/serializers.py.
"""

from dataclasses import dataclass
from typing import Self, TypeAlias

from wedding_pricing.domain.value_objects import ActionType, Money, ServiceType

Selection: TypeAlias = frozenset[ServiceType]


@dataclass(frozen=True)
class SelectionAction:
    """A request to add or remove one service from a selection."""

    type: ActionType | str
    service: ServiceType

    @classmethod
    def select(cls, service: ServiceType) -> Self:
        return cls(type=ActionType.SELECT, service=service)

    @classmethod
    def deselect(cls, service: ServiceType) -> Self:
        return cls(type=ActionType.DESELECT, service=service)


@dataclass(frozen=True)
class PriceResult:
    """Price of a selection before and after the best discount."""

    base_price: Money
    final_price: Money

    def __post_init__(self) -> None:
        if self.final_price > self.base_price:
            raise ValueError("Final price cannot exceed base price")

    @property
    def discount(self) -> Money:
        return self.base_price - self.final_price
