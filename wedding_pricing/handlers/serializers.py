"""Serializers for translating plain payloads to and from domain models.

Payloads use the public service names ("Photography", "VideoRecording", ...)
and plain integer years. Unknown action types pass validation on purpose so
the reducer can reject them with InvalidActionError.
"""

from rest_framework import serializers

from wedding_pricing.domain import (
    PriceResult,
    Selection,
    SelectionAction,
    ServiceType,
    ServiceYear,
)
from wedding_pricing.services import calculate_price

SERVICE_CHOICES = [service.value for service in ServiceType]
YEAR_CHOICES = [int(year) for year in ServiceYear]


class SelectionActionSerializer(serializers.Serializer):
    """Serializer for a Select or Deselect action."""

    type = serializers.CharField()
    service = serializers.ChoiceField(choices=SERVICE_CHOICES)

    def to_action(self) -> SelectionAction:
        data = self.validated_data
        return SelectionAction(type=data["type"], service=ServiceType(data["service"]))


class PriceQuoteSerializer(serializers.Serializer):
    """Serializer for a price request: selected services and a year."""

    services = serializers.ListField(
        child=serializers.ChoiceField(choices=SERVICE_CHOICES),
        allow_empty=True,
    )
    year = serializers.ChoiceField(choices=YEAR_CHOICES)

    def validate_services(self, value: list[str]) -> Selection:
        return frozenset(ServiceType(service) for service in value)

    def validate_year(self, value) -> ServiceYear:
        return ServiceYear(int(value))

    def to_result(self) -> PriceResult:
        data = self.validated_data
        return calculate_price(data["services"], data["year"])


class PriceResultSerializer(serializers.Serializer):
    """Serializer for PriceResult domain model."""

    base_price = serializers.SerializerMethodField()
    final_price = serializers.SerializerMethodField()
    discount = serializers.SerializerMethodField()

    def get_base_price(self, obj: PriceResult) -> str:
        return str(obj.base_price)

    def get_final_price(self, obj: PriceResult) -> str:
        return str(obj.final_price)

    def get_discount(self, obj: PriceResult) -> str:
        return str(obj.discount)
