from wedding_pricing.stores.interfaces import PriceTable
from wedding_pricing.stores.static_table import (
    PRICE_TABLE,
    WEDDING_SESSION_FLAT_DISCOUNT,
    StaticPriceTable,
)

__all__ = [
    "PriceTable",
    "StaticPriceTable",
    "PRICE_TABLE",
    "WEDDING_SESSION_FLAT_DISCOUNT",
]
