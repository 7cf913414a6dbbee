"""Django signals for pricing diagnostics.

discount_tie_detected is sent when more than one discount shares the highest
amount. Only one of them is applied; receivers are informed, never consulted.
"""

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# Sent with sender=PriceCalculator and kwargs: year, discount, candidates.
discount_tie_detected = Signal()


@receiver(discount_tie_detected)
def log_discount_tie(sender, year, discount, candidates, **kwargs):
    """Warn that equally large discounts were collapsed into one."""
    logger.warning(
        "The greatest discount was applied. Other discounts were ignored "
        "(year=%s, applied=%s, candidates=%d)",
        int(year),
        discount,
        len(candidates),
    )
