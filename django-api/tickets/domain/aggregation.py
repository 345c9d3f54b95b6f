"""Summing ticket requests into per-category totals."""

from collections import Counter
from collections.abc import Iterable

from tickets.domain.value_objects import AggregatedCounts, TicketCategory, TicketRequest


def aggregate(requests: Iterable[TicketRequest]) -> AggregatedCounts:
    """Sum request counts per category.

    Requests sharing a category accumulate. An empty input gives all-zero
    totals; rejecting emptiness is the rule engine's job.
    """
    totals: Counter[TicketCategory] = Counter()
    for request in requests:
        totals[request.category] += request.count

    return AggregatedCounts(
        adult=totals[TicketCategory.ADULT],
        child=totals[TicketCategory.CHILD],
        infant=totals[TicketCategory.INFANT],
    )
