"""Error response schemas shared by every endpoint."""

from pydantic import BaseModel, Field


class FieldErrorSchema(BaseModel):
    """A single field-level validation failure."""

    field: str = Field(..., description="Name of the offending field")
    rule: str = Field(..., description="Validation rule that failed")
    message: str = Field(..., description="Human-readable explanation")


class ErrorResponse(BaseModel):
    """Structured error body: stable code, message and optional field errors."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    errors: list[FieldErrorSchema] | None = Field(
        None, description="Field-level failures, present for validation errors"
    )
