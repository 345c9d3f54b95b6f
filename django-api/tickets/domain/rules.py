"""Business rules applied before a purchase is committed.

Rules run in a fixed order and stop at the first violation, so when several
rules are broken at once only the earliest one is reported:

1. account id is a positive integer
2. the request list is non-empty and holds only TicketRequest instances
3. no more than ``max_tickets`` tickets in total
4. child or infant tickets need at least one adult
5. at least as many adults as infants

Rules 1-2 look at the raw input; rules 3-5 look at the aggregated counts.
"""

from collections.abc import Sequence
from functools import partial

from tickets.domain.aggregation import aggregate
from tickets.domain.errors import (
    AdultCountBelowInfantCountError,
    AdultRequiredError,
    EmptyOrMalformedRequestListError,
    InvalidAccountIdError,
    MaxTicketsExceededError,
)
from tickets.domain.value_objects import AggregatedCounts, TicketRequest, is_positive_int

MAX_TICKETS_PER_PURCHASE = 20


def check_account_id(account_id: object) -> None:
    if not is_positive_int(account_id):
        raise InvalidAccountIdError()


def check_request_list(requests: object) -> None:
    # strings are sequences too, but never a list of requests
    if isinstance(requests, (str, bytes)) or not isinstance(requests, Sequence):
        raise EmptyOrMalformedRequestListError.malformed()
    if len(requests) == 0:
        raise EmptyOrMalformedRequestListError.empty()
    if not all(isinstance(request, TicketRequest) for request in requests):
        raise EmptyOrMalformedRequestListError.malformed()


def check_max_tickets(counts: AggregatedCounts, max_tickets: int = MAX_TICKETS_PER_PURCHASE) -> None:
    if counts.total > max_tickets:
        raise MaxTicketsExceededError(max_tickets)


def check_adult_present(counts: AggregatedCounts) -> None:
    if counts.child + counts.infant > 0 and counts.adult == 0:
        raise AdultRequiredError()


def check_infant_ratio(counts: AggregatedCounts) -> None:
    if counts.adult < counts.infant:
        raise AdultCountBelowInfantCountError()


class RuleEngine:
    """Ordered, fail-fast business rule checks."""

    def __init__(self, max_tickets: int = MAX_TICKETS_PER_PURCHASE) -> None:
        self._count_rules = (
            partial(check_max_tickets, max_tickets=max_tickets),
            check_adult_present,
            check_infant_ratio,
        )

    def check_request(self, account_id: object, requests: object) -> None:
        """Run the rules over the raw input.

        Raises:
            InvalidAccountIdError: If the account id is not a positive integer.
            EmptyOrMalformedRequestListError: If the list is empty or holds
                anything other than TicketRequest instances.
        """
        check_account_id(account_id)
        check_request_list(requests)

    def check_counts(self, counts: AggregatedCounts) -> None:
        """Run the rules over aggregated counts, in order."""
        for rule in self._count_rules:
            rule(counts)

    def evaluate(self, account_id: object, requests: Sequence[TicketRequest]) -> AggregatedCounts:
        """Run every rule and return the aggregated counts they were checked against."""
        self.check_request(account_id, requests)
        counts = aggregate(requests)
        self.check_counts(counts)
        return counts
