"""In-memory collaborators.

They record every call in order and never fail. Used as the default wiring
and as test doubles; nothing here is persisted.
"""

import logging
from dataclasses import dataclass

from tickets.stores.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Charge:
    account_id: int
    amount: int


@dataclass(frozen=True)
class Reservation:
    account_id: int
    seat_count: int


class InMemoryPaymentGateway(PaymentGateway):
    """Payment gateway that only records charges."""

    def __init__(self) -> None:
        self.charges: list[Charge] = []

    def charge(self, account_id: int, amount: int) -> None:
        logger.debug("Charging account %s amount %s", account_id, amount)
        self.charges.append(Charge(account_id=account_id, amount=amount))


class InMemorySeatReservationGateway(SeatReservationGateway):
    """Seat reservation gateway that only records reservations."""

    def __init__(self) -> None:
        self.reservations: list[Reservation] = []

    def reserve(self, account_id: int, seat_count: int) -> None:
        logger.debug("Reserving %s seats for account %s", seat_count, account_id)
        self.reservations.append(Reservation(account_id=account_id, seat_count=seat_count))
