"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import dataclasses
import itertools

import pytest

from tickets.domain import (
    AggregatedCounts,
    PriceTable,
    TicketCategory,
    TicketRequest,
    aggregate,
    compute_cost,
    compute_seats,
)
from tickets.domain.errors import (
    ErrorCode,
    InvalidCategoryError,
    InvalidCountError,
    NoPayableTicketsError,
    NoSeatsRequiredError,
    ValidationError,
)

ADULT = TicketCategory.ADULT
CHILD = TicketCategory.CHILD
INFANT = TicketCategory.INFANT


class TestTicketRequest:
    """Tests for TicketRequest value object."""

    def test_exposes_category_and_count(self):
        """TicketRequest keeps the category and count it was built with."""
        request = TicketRequest(CHILD, 6)
        assert request.category is CHILD
        assert request.count == 6

    def test_is_immutable(self):
        """TicketRequest cannot be changed after construction."""
        request = TicketRequest(CHILD, 6)
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.count = 7

    def test_equality_is_by_value(self):
        """Two requests with the same fields are equal and hash alike."""
        assert TicketRequest(ADULT, 2) == TicketRequest(ADULT, 2)
        assert len({TicketRequest(ADULT, 2), TicketRequest(ADULT, 2)}) == 1
        assert TicketRequest(ADULT, 2) != TicketRequest(CHILD, 2)

    @pytest.mark.parametrize("category", ["ADULT", "SENIOR", None, 1])
    def test_rejects_category_outside_enum(self, category):
        """Only TicketCategory members are accepted."""
        with pytest.raises(InvalidCategoryError) as exc_info:
            TicketRequest(category, 1)
        assert exc_info.value.code is ErrorCode.INVALID_CATEGORY

    @pytest.mark.parametrize("count", [0, -1, 1.5, "2", None, True])
    def test_rejects_non_positive_integer_count(self, count):
        """Counts must be positive integers, so all-zero requests cannot exist."""
        with pytest.raises(InvalidCountError) as exc_info:
            TicketRequest(ADULT, count)
        assert exc_info.value.code is ErrorCode.INVALID_COUNT

    def test_category_is_checked_before_count(self):
        """A request that is wrong on both counts reports the category."""
        with pytest.raises(InvalidCategoryError):
            TicketRequest("DOG", 0)

    def test_from_string_parses_category_name(self):
        """from_string accepts category names in any case."""
        assert TicketRequest.from_string("infant", 1) == TicketRequest(INFANT, 1)
        assert TicketRequest.from_string(" Adult ", 3) == TicketRequest(ADULT, 3)

    def test_from_string_rejects_unknown_name(self):
        """from_string raises InvalidCategoryError for names outside the enum."""
        with pytest.raises(InvalidCategoryError):
            TicketRequest.from_string("STUDENT", 1)

    def test_construction_errors_are_validation_errors(self):
        """Construction errors belong to the same family as rule violations."""
        with pytest.raises(ValidationError):
            TicketRequest(ADULT, 0)


class TestAggregate:
    """Tests for request aggregation."""

    def test_requests_of_same_category_accumulate(self):
        """Counts for a repeated category are summed, not overwritten."""
        counts = aggregate([TicketRequest(ADULT, 2), TicketRequest(ADULT, 3), TicketRequest(CHILD, 1)])
        assert counts == AggregatedCounts(adult=5, child=1, infant=0)

    def test_empty_input_gives_zero_totals(self):
        """Aggregating nothing yields all zeros."""
        counts = aggregate([])
        assert counts == AggregatedCounts(adult=0, child=0, infant=0)
        assert counts.total == 0

    def test_result_does_not_depend_on_order(self):
        """Every permutation of the input aggregates to the same counts."""
        requests = [
            TicketRequest(ADULT, 2),
            TicketRequest(CHILD, 3),
            TicketRequest(INFANT, 1),
            TicketRequest(ADULT, 1),
        ]
        results = {aggregate(list(order)) for order in itertools.permutations(requests)}
        assert results == {AggregatedCounts(adult=3, child=3, infant=1)}

    def test_accepts_any_iterable(self):
        """Aggregation works over generators as well as lists."""
        counts = aggregate(TicketRequest(INFANT, n) for n in (1, 2))
        assert counts.infant == 3


class TestAggregatedCounts:
    """Tests for AggregatedCounts derived values."""

    def test_total_and_seated(self):
        """total counts everyone; seated leaves infants out."""
        counts = AggregatedCounts(adult=2, child=3, infant=1)
        assert counts.total == 6
        assert counts.seated == 5

    def test_for_category_and_as_dict(self):
        """Counts can be read per category."""
        counts = AggregatedCounts(adult=2, child=3, infant=1)
        assert counts.for_category(CHILD) == 3
        assert counts.as_dict() == {"ADULT": 2, "CHILD": 3, "INFANT": 1}


class TestPriceTable:
    """Tests for PriceTable value object."""

    def test_defaults(self):
        """Adults cost 20, children 10, infants nothing."""
        prices = PriceTable()
        assert prices.price_of(ADULT) == 20
        assert prices.price_of(CHILD) == 10
        assert prices.price_of(INFANT) == 0

    def test_rejects_negative_price(self):
        """PriceTable raises ValueError for a negative price."""
        with pytest.raises(ValueError):
            PriceTable(child=-1)

    def test_rejects_non_zero_infant_price(self):
        """Infants are never charged, so their price can only be zero."""
        with pytest.raises(ValueError):
            PriceTable(infant=5)
        with pytest.raises(ValueError):
            PriceTable.from_mapping({"INFANT": 5})

    def test_from_mapping_keeps_missing_defaults(self):
        """Categories left out of the mapping keep their default price."""
        prices = PriceTable.from_mapping({"ADULT": 25})
        assert prices == PriceTable(adult=25, child=10, infant=0)

    def test_from_mapping_rejects_unknown_category(self):
        """Unknown category names are a configuration error."""
        with pytest.raises(ValueError):
            PriceTable.from_mapping({"SENIOR": 5})


class TestComputeCost:
    """Tests for cost derivation."""

    def test_adults_and_children_are_charged(self):
        """Cost is 20 per adult plus 10 per child; infants are free."""
        assert compute_cost(AggregatedCounts(adult=2, child=3, infant=1)) == 70

    def test_uses_given_price_table(self):
        """A custom price table overrides the defaults."""
        prices = PriceTable(adult=30, child=15, infant=0)
        assert compute_cost(AggregatedCounts(adult=1, child=2), prices) == 60

    def test_infants_add_nothing_to_cost(self):
        """Cost is adults and children only, whatever the infant count."""
        prices = PriceTable(adult=30, child=15)
        with_infants = AggregatedCounts(adult=3, child=1, infant=3)
        without_infants = AggregatedCounts(adult=3, child=1)
        assert compute_cost(with_infants, prices) == compute_cost(without_infants, prices) == 105

    @pytest.mark.parametrize(
        "counts",
        [AggregatedCounts(), AggregatedCounts(infant=3)],
    )
    def test_zero_cost_is_rejected(self, counts):
        """A purchase with nothing payable raises NoPayableTicketsError."""
        with pytest.raises(NoPayableTicketsError) as exc_info:
            compute_cost(counts)
        assert exc_info.value.code is ErrorCode.NO_PAYABLE_TICKETS


class TestComputeSeats:
    """Tests for seat derivation."""

    def test_infants_take_no_seat(self):
        """Seats are adults plus children."""
        assert compute_seats(AggregatedCounts(adult=2, child=3, infant=2)) == 5

    @pytest.mark.parametrize(
        "counts",
        [AggregatedCounts(), AggregatedCounts(infant=3)],
    )
    def test_zero_seats_is_rejected(self, counts):
        """A purchase with no seated tickets raises NoSeatsRequiredError."""
        with pytest.raises(NoSeatsRequiredError) as exc_info:
            compute_seats(counts)
        assert exc_info.value.code is ErrorCode.NO_SEATS_REQUIRED
