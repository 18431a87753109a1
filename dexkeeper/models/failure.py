"""
Failure classification for user-visible outcomes.

Every failure the view can display is a KnownError subclass carrying a
FailureKind and a fixed, user-appropriate message. The view collapses any
of them into a single display string; `detail` keeps the technical cause
for logs and tests.

Failure kinds:
- EMPTY_QUERY: search submitted with blank input, no request made
- NOT_FOUND: creature lookup failed (absent or unreachable)
- COLLECTION_FULL: bounded collection at capacity, insert rejected
- DUPLICATE_ENTRY: identifier already present, insert rejected
- SERVICE_UNAVAILABLE: a non-search fetch (creature index) failed
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    EMPTY_QUERY = "empty_query"

    # Resource failures
    NOT_FOUND = "not_found"

    # Constraint violations
    COLLECTION_FULL = "collection_full"
    DUPLICATE_ENTRY = "duplicate_entry"

    # Service failures
    SERVICE_UNAVAILABLE = "service_unavailable"


class FailureDetail(BaseModel):
    """Detailed information about a failure, as shown to the view."""

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
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
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
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail for the view."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class EmptyQueryError(KnownError):
    """Raised when a search is submitted without a name or id."""

    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.EMPTY_QUERY,
            message="Please enter a Pokémon name or ID",
        )


class NotFoundError(KnownError):
    """
    Raised when the primary creature lookup fails.

    Covers both a genuine 404 and a transport failure; the message is the
    same, `detail` and `status_code` tell them apart.
    """

    def __init__(self, query: str, status_code: int | None = None, detail: str | None = None):
        self.query = query
        self.status_code = status_code
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f'Pokémon "{query}" not found.',
            detail=detail,
            suggestion="Check the spelling or try a national dex number.",
        )

    @property
    def is_transport_failure(self) -> bool:
        """True when no HTTP response was received at all."""
        return self.status_code is None


class CollectionFullError(KnownError):
    """Raised when inserting into a bounded collection that is at capacity."""

    def __init__(self, collection: str, limit: int, message: str):
        self.collection = collection
        self.limit = limit
        super().__init__(
            kind=FailureKind.COLLECTION_FULL,
            message=message,
            detail=f"{collection} holds at most {limit} entries",
        )


class DuplicateEntryError(KnownError):
    """Raised when inserting an identifier that is already present."""

    def __init__(self, collection: str, entry_id: int, message: str):
        self.collection = collection
        self.entry_id = entry_id
        super().__init__(
            kind=FailureKind.DUPLICATE_ENTRY,
            message=message,
            detail=f"id {entry_id} already in {collection}",
        )
