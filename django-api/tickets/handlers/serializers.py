"""Serializers for parsing purchase requests and rendering purchase results.

Only input format is checked here. Business rules belong to the service.
"""

from rest_framework import serializers

from tickets.domain import TicketRequest
from tickets.domain.value_objects import PurchaseSummary


class TicketRequestSerializer(serializers.Serializer):
    """One ``{"category": ..., "count": ...}`` item."""

    category = serializers.CharField()
    count = serializers.IntegerField()


class PurchaseRequestSerializer(serializers.Serializer):
    """Body of POST /api/accounts/{account_id}/purchases"""

    tickets = TicketRequestSerializer(many=True, allow_empty=True)

    def to_domain(self) -> list[TicketRequest]:
        # Domain construction raises InvalidCategoryError / InvalidCountError
        return [
            TicketRequest.from_string(item["category"], item["count"])
            for item in self.validated_data["tickets"]
        ]


class PurchaseSummarySerializer(serializers.Serializer):
    """Serializer for PurchaseSummary domain model."""

    account_id = serializers.IntegerField()
    total_cost = serializers.IntegerField()
    total_seats = serializers.IntegerField()
    tickets = serializers.SerializerMethodField()

    def get_tickets(self, summary: PurchaseSummary) -> dict[str, int]:
        return summary.counts.as_dict()
