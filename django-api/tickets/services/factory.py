"""Builds the purchase service from Django settings."""

from django.conf import settings

from tickets.domain import MAX_TICKETS_PER_PURCHASE, PriceTable, RuleEngine
from tickets.services.purchase_service import TicketPurchaseService
from tickets.stores.memory_store import InMemoryPaymentGateway, InMemorySeatReservationGateway


def build_purchase_service() -> TicketPurchaseService:
    """Wire a service with the configured prices and ticket limit.

    Settings are read on every call so overrides apply without a restart.
    """
    config = getattr(settings, "TICKETING", {})
    return TicketPurchaseService(
        payments=InMemoryPaymentGateway(),
        reservations=InMemorySeatReservationGateway(),
        rules=RuleEngine(max_tickets=config.get("MAX_TICKETS_PER_PURCHASE", MAX_TICKETS_PER_PURCHASE)),
        prices=PriceTable.from_mapping(config.get("PRICES", {})),
    )
