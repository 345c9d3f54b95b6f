"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from tickets.domain.errors import InvalidCategoryError, InvalidCountError


class TicketCategory(Enum):
    """Closed set of ticket categories sold by the venue."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value.strip().upper())
        except (AttributeError, ValueError):
            raise InvalidCategoryError() from None


def is_positive_int(value: object) -> bool:
    # bool is a subclass of int but never a valid count or id
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class TicketRequest:
    """A number of tickets of one category."""

    category: TicketCategory
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.category, TicketCategory):
            raise InvalidCategoryError()
        if not is_positive_int(self.count):
            raise InvalidCountError()

    @classmethod
    def from_string(cls, category: str, count: int) -> Self:
        return cls(category=TicketCategory.from_string(category), count=count)


@dataclass(frozen=True)
class AggregatedCounts:
    """Per-category ticket totals for a single purchase."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant

    @property
    def seated(self) -> int:
        """Tickets that occupy a seat. Infants sit on an adult's lap."""
        return self.adult + self.child

    def for_category(self, category: TicketCategory) -> int:
        return getattr(self, category.name.lower())

    def as_dict(self) -> dict[str, int]:
        return {category.value: self.for_category(category) for category in TicketCategory}


@dataclass(frozen=True)
class PurchaseSummary:
    """What a successful purchase charged and reserved."""

    account_id: int
    counts: AggregatedCounts
    total_cost: int
    total_seats: int
