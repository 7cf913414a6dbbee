from wedding_pricing.services.price_calculator import PriceCalculator, calculate_price
from wedding_pricing.services.selection_reducer import transition, update_selected_services

__all__ = [
    "PriceCalculator",
    "calculate_price",
    "transition",
    "update_selected_services",
]
