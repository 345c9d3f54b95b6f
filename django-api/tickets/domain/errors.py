"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_CATEGORY = "INVALID_CATEGORY"
    INVALID_COUNT = "INVALID_COUNT"
    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    EMPTY_OR_MALFORMED_REQUEST_LIST = "EMPTY_OR_MALFORMED_REQUEST_LIST"
    MAX_TICKETS_EXCEEDED = "MAX_TICKETS_EXCEEDED"
    ADULT_REQUIRED_FOR_CHILD_OR_INFANT = "ADULT_REQUIRED_FOR_CHILD_OR_INFANT"
    ADULT_COUNT_BELOW_INFANT_COUNT = "ADULT_COUNT_BELOW_INFANT_COUNT"
    NO_PAYABLE_TICKETS = "NO_PAYABLE_TICKETS"
    NO_SEATS_REQUIRED = "NO_SEATS_REQUIRED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """A purchase request broke a business rule. Terminal for the call."""


class InvalidCategoryError(ValidationError):
    """Raised when a ticket request names an unknown category."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CATEGORY,
            message="Ticket category must be one of ADULT, CHILD or INFANT.",
        )


class InvalidCountError(ValidationError):
    """Raised when a ticket request count is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_COUNT,
            message="Number of tickets must be a positive integer.",
        )


class InvalidAccountIdError(ValidationError):
    """Raised when the account ID is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Invalid account ID. Account ID must be a positive integer.",
        )


class EmptyOrMalformedRequestListError(ValidationError):
    """Raised when no ticket requests are given or one is not a TicketRequest."""

    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_OR_MALFORMED_REQUEST_LIST,
            message=message,
        )

    @classmethod
    def empty(cls) -> "EmptyOrMalformedRequestListError":
        return cls("No tickets provided. Please provide at least one ticket request.")

    @classmethod
    def malformed(cls) -> "EmptyOrMalformedRequestListError":
        return cls("Invalid ticket requests. Every item must be a TicketRequest.")


class MaxTicketsExceededError(ValidationError):
    """Raised when a purchase asks for more tickets than allowed."""

    def __init__(self, max_tickets: int) -> None:
        super().__init__(
            code=ErrorCode.MAX_TICKETS_EXCEEDED,
            message=f"Number of tickets cannot exceed {max_tickets}.",
        )


class AdultRequiredError(ValidationError):
    """Raised when child or infant tickets are bought without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_REQUIRED_FOR_CHILD_OR_INFANT,
            message="There must be at least one adult for child or infant tickets.",
        )


class AdultCountBelowInfantCountError(ValidationError):
    """Raised when there are more infants than adults to hold them."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_COUNT_BELOW_INFANT_COUNT,
            message="Number of adults must be greater than or equal to the number of infants.",
        )


class NoPayableTicketsError(ValidationError):
    """Raised when the derived total cost is zero."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_PAYABLE_TICKETS,
            message="The purchase contains no payable tickets.",
        )


class NoSeatsRequiredError(ValidationError):
    """Raised when the derived seat count is zero."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_SEATS_REQUIRED,
            message="The purchase requires no seats.",
        )
