from tickets.domain.aggregation import aggregate
from tickets.domain.pricing import DEFAULT_PRICES, PriceTable, compute_cost, compute_seats
from tickets.domain.rules import MAX_TICKETS_PER_PURCHASE, RuleEngine
from tickets.domain.value_objects import (
    AggregatedCounts,
    PurchaseSummary,
    TicketCategory,
    TicketRequest,
)

__all__ = [
    "TicketCategory",
    "TicketRequest",
    "AggregatedCounts",
    "PurchaseSummary",
    "PriceTable",
    "DEFAULT_PRICES",
    "MAX_TICKETS_PER_PURCHASE",
    "RuleEngine",
    "aggregate",
    "compute_cost",
    "compute_seats",
]
