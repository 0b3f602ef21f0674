"""Custom exception hierarchy for the books API."""

from dataclasses import dataclass
from uuid import UUID

from starlette import status


@dataclass(frozen=True)
class FieldError:
    """A single field-level validation failure."""

    field: str
    rule: str
    message: str


class BooksApiError(Exception):
    """Base exception for all books API errors."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        errors: list[FieldError] | None = None,
    ) -> None:
        """Initialize exception with message, machine-readable code and status code."""
        self.message = message
        self.code = code
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(self.message)


class NotFoundError(BooksApiError):
    """Resource not found error."""

    def __init__(self, message: str, code: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, code=code, status_code=status.HTTP_404_NOT_FOUND)


class BookNotFoundError(NotFoundError):
    """Book not found error."""

    def __init__(self, book_id: UUID | None = None) -> None:
        """Initialize with the missing book ID."""
        self.book_id = book_id
        super().__init__("book not found", code="BOOK_NOT_FOUND")


class AuthorNotFoundError(NotFoundError):
    """Author not found error."""

    def __init__(self, author_id: UUID | None = None) -> None:
        """Initialize with the missing author ID."""
        self.author_id = author_id
        super().__init__("author not found", code="AUTHOR_NOT_FOUND")


class ValidationError(BooksApiError):
    """Client input error (HTTP 400)."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        errors: list[FieldError] | None = None,
    ) -> None:
        """Initialize with message, code and optional field errors."""
        super().__init__(
            message, code=code, status_code=status.HTTP_400_BAD_REQUEST, errors=errors
        )


class InvalidSortKeyError(ValidationError):
    """Sort key outside the supported enumeration."""

    def __init__(self, sort: str, allowed: list[str]) -> None:
        """Initialize with the rejected sort key and the allowed values."""
        self.sort = sort
        self.allowed = allowed
        super().__init__(
            f"sort must be one of: {', '.join(allowed)}",
            code="INVALID_SORT_KEY",
            errors=[FieldError(field="sort", rule="oneof", message=f"unsupported sort '{sort}'")],
        )


class InvalidIdentifierError(ValidationError):
    """Identifier that is not a valid UUID."""

    def __init__(self, field: str, code: str, message: str) -> None:
        """Initialize with the offending field, error code and message."""
        self.field = field
        super().__init__(
            message,
            code=code,
            errors=[FieldError(field=field, rule="uuid", message=message)],
        )


class InvalidDateBoundError(ValidationError):
    """Publish-date bound not in YYYY-MM-DD format."""

    def __init__(self, field: str) -> None:
        """Initialize with the name of the malformed bound."""
        self.field = field
        message = f"{field} must be in format YYYY-MM-DD"
        super().__init__(
            message,
            code=f"INVALID_{field.upper()}",
            errors=[FieldError(field=field, rule="date", message=message)],
        )


class NoFieldsToUpdateError(ValidationError):
    """PATCH request without any field to change."""

    def __init__(self) -> None:
        """Initialize with the fixed message."""
        super().__init__(
            "at least one field must be provided to update", code="NO_FIELDS_TO_UPDATE"
        )


class ReferentialError(BooksApiError):
    """Request points at a related resource that does not exist (HTTP 400)."""

    def __init__(self, message: str, code: str, errors: list[FieldError] | None = None) -> None:
        """Initialize with message, code and optional field errors."""
        super().__init__(
            message, code=code, status_code=status.HTTP_400_BAD_REQUEST, errors=errors
        )


class AuthorReferenceError(ReferentialError):
    """Book refers to an author that does not exist."""

    def __init__(self, author_id: UUID) -> None:
        """Initialize with the dangling author ID."""
        self.author_id = author_id
        super().__init__(
            "author does not exist",
            code="AUTHOR_NOT_FOUND",
            errors=[FieldError(field="author_id", rule="exists", message="author does not exist")],
        )


class ConflictError(BooksApiError):
    """Request conflicts with the current state of a resource (HTTP 409)."""

    def __init__(self, message: str, code: str) -> None:
        """Initialize with message and 409 status code."""
        super().__init__(message, code=code, status_code=status.HTTP_409_CONFLICT)


class AuthorHasBooksError(ConflictError):
    """Author cannot be deleted while books still reference it."""

    def __init__(self, author_id: UUID) -> None:
        """Initialize with the author ID."""
        self.author_id = author_id
        super().__init__(
            "author still has books; delete or reassign them first", code="AUTHOR_HAS_BOOKS"
        )


class OperationFailedError(BooksApiError):
    """Unexpected storage failure, reported without internal detail."""

    def __init__(self, code: str, message: str) -> None:
        """Initialize with the operation specific code and a generic message."""
        super().__init__(message, code=code, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
