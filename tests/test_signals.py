"""Tests for the discount tie diagnostic receiver.

Run with: pytest tests/test_signals.py -v
"""

import logging

from wedding_pricing.domain import Money, ServiceYear
from wedding_pricing.services import PriceCalculator
from wedding_pricing.signals import discount_tie_detected


class TestLogDiscountTie:
    """Tests for the logging receiver."""

    def test_tie_logged_as_warning(self, caplog):
        """A discount tie produces one warning."""
        with caplog.at_level(logging.WARNING, logger="wedding_pricing.signals"):
            discount_tie_detected.send(
                sender=PriceCalculator,
                year=ServiceYear.Y2021,
                discount=Money(300),
                candidates=(Money(300), Money(300)),
            )
        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert "The greatest discount was applied" in record.getMessage()
        assert "year=2021" in record.getMessage()
        assert "applied=300.00" in record.getMessage()
