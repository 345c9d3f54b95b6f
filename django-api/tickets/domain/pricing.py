"""Cost and seat derivation from aggregated counts."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Self

from tickets.domain.errors import NoPayableTicketsError, NoSeatsRequiredError
from tickets.domain.value_objects import AggregatedCounts, TicketCategory


@dataclass(frozen=True)
class PriceTable:
    """Price per ticket category, in whole currency units."""

    adult: int = 20
    child: int = 10
    infant: int = 0

    def __post_init__(self) -> None:
        for category in TicketCategory:
            price = self.price_of(category)
            if not isinstance(price, int) or isinstance(price, bool):
                raise ValueError(f"{category.value} price must be an integer")
            if price < 0:
                raise ValueError(f"{category.value} price cannot be negative")
        if self.infant != 0:
            raise ValueError("Infants are not charged; INFANT price must be 0")

    @classmethod
    def from_mapping(cls, prices: Mapping[str, int]) -> Self:
        """Build from a ``{"ADULT": 20, ...}`` mapping; missing keys keep defaults."""
        known = {category.value for category in TicketCategory}
        unknown = set(prices) - known
        if unknown:
            raise ValueError(f"Unknown ticket categories in price table: {sorted(unknown)}")
        return cls(**{name.lower(): price for name, price in prices.items()})

    def price_of(self, category: TicketCategory) -> int:
        return getattr(self, category.name.lower())


DEFAULT_PRICES = PriceTable()


def compute_cost(counts: AggregatedCounts, prices: PriceTable = DEFAULT_PRICES) -> int:
    """Total cost of the purchase.

    Raises:
        NoPayableTicketsError: If nothing in the purchase costs money.
    """
    # infants are never charged
    cost = counts.adult * prices.adult + counts.child * prices.child
    if cost == 0:
        raise NoPayableTicketsError()
    return cost


def compute_seats(counts: AggregatedCounts) -> int:
    """Seats to reserve. Infants are not seated.

    Raises:
        NoSeatsRequiredError: If no ticket in the purchase needs a seat.
    """
    seats = counts.seated
    if seats == 0:
        raise NoSeatsRequiredError()
    return seats
