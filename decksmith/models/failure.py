"""
Error types for card and deck requests.

Catalog lookups, sort parsing and the deck store raise `KnownError`
subclasses when a request can't be served: an unknown card, a missing
deck, a bad sort option or a broken catalog file. `main.py` renders them
as an `ApiResponse` with the error's status code. Anything else becomes
an unknown failure with a 500.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"
    MISSING_REQUIRED = "missing_required"

    # Resource failures
    NOT_FOUND = "not_found"

    # Data integrity failures (catalog defects)
    VALIDATION_FAILED = "validation_failed"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Technical detail (identifiers, offending values)",
    )
    suggestion: str | None = Field(
        default=None,
        description="What the user can do about it",
    )


class ApiResponse(BaseModel, Generic[T]):
    """Unified response envelope."""

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    @classmethod
    def success(cls, data: T) -> "ApiResponse[T]":
        """Create a success response."""
        return cls(outcome=OutcomeType.SUCCESS, data=data)

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """
        Create a known failure response.

        Use when the system knows exactly why the operation failed.
        Example: Deck not found, unknown sort field.
        """
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @classmethod
    def unknown_failure(cls, detail: str | None = None) -> "ApiResponse[Any]":
        """
        Create an unknown failure response.

        The message is fixed; only the technical detail varies.
        """
        return cls(
            outcome=OutcomeType.UNKNOWN_FAILURE,
            failure=FailureDetail(
                kind=FailureKind.UNKNOWN,
                message="The card service hit an unexpected error while handling this request.",
                detail=detail,
                suggestion="Retry the request. If it keeps failing, check the service logs.",
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class InvalidSortFieldError(KnownError):
    """Raised when a sort is requested on a field or direction outside the allow-list."""

    def __init__(self, field: str, allowed: list[str]):
        self.field = field
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"Cannot sort cards by '{field}'.",
            detail=f"Allowed values: {', '.join(allowed)}",
            suggestion="Pick one of the allowed sort options.",
            status_code=400,
        )


class CatalogError(KnownError):
    """Raised when the card catalog file is malformed."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.VALIDATION_FAILED,
            message=message,
            detail=detail,
            suggestion="Fix the catalog file and restart the service.",
            status_code=500,
        )


class CardNotFoundError(KnownError):
    """Raised when a card reference is not in the catalog."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Card '{reference}' not found.",
            suggestion="Check the card reference.",
            status_code=404,
        )


class DeckNotFoundError(KnownError):
    """Raised when a deck id does not exist in the store."""

    def __init__(self, deck_id: str):
        self.deck_id = deck_id
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Deck '{deck_id}' not found.",
            suggestion="Select an existing deck or create a new one.",
            status_code=404,
        )
