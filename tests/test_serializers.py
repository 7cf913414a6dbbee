"""Tests for payload serializers.

Run with: pytest tests/test_serializers.py -v
"""

import pytest

from wedding_pricing import InvalidActionError, transition
from wedding_pricing.domain import PriceResult, Money, ServiceType, ServiceYear
from wedding_pricing.handlers import (
    PriceQuoteSerializer,
    PriceResultSerializer,
    SelectionActionSerializer,
)


class TestSelectionActionSerializer:
    """Tests for SelectionActionSerializer."""

    def test_valid_action(self):
        """A Select payload becomes a SelectionAction."""
        serializer = SelectionActionSerializer(data={"type": "Select", "service": "VideoRecording"})
        assert serializer.is_valid(), serializer.errors
        action = serializer.to_action()
        assert transition([], action) == {ServiceType.VIDEO_RECORDING}

    def test_unknown_service_rejected(self):
        """An unknown service name fails validation."""
        serializer = SelectionActionSerializer(data={"type": "Select", "service": "Drone"})
        assert not serializer.is_valid()
        assert "service" in serializer.errors

    def test_unknown_type_left_to_reducer(self):
        """Unknown action types validate but are rejected by the reducer."""
        serializer = SelectionActionSerializer(data={"type": "Toggle", "service": "Photography"})
        assert serializer.is_valid(), serializer.errors
        with pytest.raises(InvalidActionError):
            transition([], serializer.to_action())


class TestPriceQuoteSerializer:
    """Tests for PriceQuoteSerializer."""

    def test_valid_quote(self):
        """Services and year are parsed into domain values."""
        serializer = PriceQuoteSerializer(
            data={"services": ["Photography", "WeddingSession", "Photography"], "year": 2022}
        )
        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data["services"] == {
            ServiceType.PHOTOGRAPHY,
            ServiceType.WEDDING_SESSION,
        }
        assert serializer.validated_data["year"] is ServiceYear.Y2022
        result = serializer.to_result()
        assert result.final_price == Money(1900)

    def test_unsupported_year_rejected(self):
        """A year outside the price list fails validation."""
        serializer = PriceQuoteSerializer(data={"services": [], "year": 2019})
        assert not serializer.is_valid()
        assert "year" in serializer.errors

    def test_unknown_service_rejected(self):
        """Unknown services fail validation."""
        serializer = PriceQuoteSerializer(data={"services": ["Drone"], "year": 2020})
        assert not serializer.is_valid()
        assert "services" in serializer.errors


class TestPriceResultSerializer:
    """Tests for PriceResultSerializer."""

    def test_renders_two_decimal_strings(self):
        """Prices render as two-decimal strings with the discount."""
        result = PriceResult(base_price=Money(2500), final_price=Money(1900))
        assert PriceResultSerializer(result).data == {
            "base_price": "2500.00",
            "final_price": "1900.00",
            "discount": "600.00",
        }
