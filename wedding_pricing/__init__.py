"""Wedding Pricing - photo and video package prices with selection rules."""

__version__ = "0.1.0"

from wedding_pricing.domain import (
    ActionType,
    DomainError,
    ErrorCode,
    InvalidActionError,
    Money,
    PriceLookupError,
    PriceResult,
    Selection,
    SelectionAction,
    ServiceType,
    ServiceYear,
    UnknownServiceError,
)
from wedding_pricing.services import (
    PriceCalculator,
    calculate_price,
    transition,
    update_selected_services,
)
from wedding_pricing.signals import discount_tie_detected
from wedding_pricing.stores import PRICE_TABLE, PriceTable, StaticPriceTable

compute_price = calculate_price

__all__ = [
    "ActionType",
    "Money",
    "ServiceType",
    "ServiceYear",
    "Selection",
    "SelectionAction",
    "PriceResult",
    "ErrorCode",
    "DomainError",
    "PriceLookupError",
    "InvalidActionError",
    "UnknownServiceError",
    "PriceTable",
    "StaticPriceTable",
    "PRICE_TABLE",
    "PriceCalculator",
    "calculate_price",
    "compute_price",
    "transition",
    "update_selected_services",
    "discount_tie_detected",
]
