"""Collaborator interfaces (ports).

The purchase service charges and reserves through these. Implementations
must be swappable; the service never inspects what they return.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def charge(self, account_id: int, amount: int) -> None:
        """Charge ``amount`` to the account."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats for an account."""

    @abstractmethod
    def reserve(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account."""
        ...
