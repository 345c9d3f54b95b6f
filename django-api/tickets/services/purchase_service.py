"""Ticket purchase service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Sequence

from tickets.domain import (
    DEFAULT_PRICES,
    PriceTable,
    PurchaseSummary,
    RuleEngine,
    TicketRequest,
    compute_cost,
    compute_seats,
)
from tickets.domain.errors import ValidationError
from tickets.stores.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class TicketPurchaseService:
    """Service for validating and fulfilling ticket purchases."""

    def __init__(
        self,
        payments: PaymentGateway,
        reservations: SeatReservationGateway,
        rules: RuleEngine | None = None,
        prices: PriceTable = DEFAULT_PRICES,
    ) -> None:
        self._payments = payments
        self._reservations = reservations
        self._rules = rules or RuleEngine()
        self._prices = prices

    def purchase(self, account_id: int, requests: Sequence[TicketRequest]) -> PurchaseSummary:
        """Validate a purchase, then charge the account and reserve seats.

        Neither collaborator is called unless every check passes. Failures
        from the collaborators themselves propagate unchanged; a reservation
        failure after a successful charge is not compensated.

        Raises:
            ValidationError: The first business rule the purchase breaks.
        """
        try:
            counts = self._rules.evaluate(account_id, requests)
            cost = compute_cost(counts, self._prices)
            seats = compute_seats(counts)
        except ValidationError as exc:
            logger.info("Rejected purchase for account %r: %s", account_id, exc.code.value)
            raise

        self._payments.charge(account_id, cost)
        try:
            self._reservations.reserve(account_id, seats)
        except Exception:
            logger.exception(
                "Seat reservation failed after charging account %s amount %s",
                account_id,
                cost,
            )
            raise

        logger.info("Account %s purchased %s seats for %s", account_id, seats, cost)
        return PurchaseSummary(
            account_id=account_id,
            counts=counts,
            total_cost=cost,
            total_seats=seats,
        )
