from wedding_pricing.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidActionError,
    PriceLookupError,
    UnknownServiceError,
)
from wedding_pricing.domain.models import PriceResult, Selection, SelectionAction
from wedding_pricing.domain.value_objects import ActionType, Money, ServiceType, ServiceYear

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
]
