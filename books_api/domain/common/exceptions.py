"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They are translated to API error responses by the infrastructure layer.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class InvariantViolationError(DomainError):
    """
    Raised when an entity invariant is violated.

    Example: A book must always have a non-empty title.
    """

    def __init__(self, entity: str, field: str, invariant: str) -> None:
        message = f"{field} {invariant}"
        super().__init__(message, {"entity": entity, "field": field})
        self.entity = entity
        self.field = field
        self.invariant = invariant
