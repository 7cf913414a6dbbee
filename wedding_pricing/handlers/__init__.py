from wedding_pricing.handlers.serializers import (
    PriceQuoteSerializer,
    PriceResultSerializer,
    SelectionActionSerializer,
)

__all__ = [
    "SelectionActionSerializer",
    "PriceQuoteSerializer",
    "PriceResultSerializer",
]
