"""Pydantic schemas for Book API request/response validation."""

from datetime import date, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from books_api.utils import parse_flexible_date


def _coerce_body_date(value: Any) -> Any:  # noqa: ANN401
    """Accept the flexible date layouts for string input, pass anything else through."""
    if isinstance(value, str):
        return parse_flexible_date(value)
    return value


class BookCreate(BaseModel):
    """Schema for creating a Book."""

    title: str = Field(..., min_length=1, max_length=500, description="Book title")
    author_id: UUID = Field(..., description="ID of an existing author")
    description: str = Field("", max_length=2000, description="Free-text description")
    published_at: date | None = Field(
        None, description="Publication date", examples=["2025-11-24"]
    )

    @field_validator("published_at", mode="before")
    @classmethod
    def parse_published_at(cls, value: Any) -> Any:  # noqa: ANN401
        """Accept the supported date layouts."""
        return _coerce_body_date(value)

    @field_validator("title", mode="after")
    @classmethod
    def strip_title(cls, value: str) -> str:
        """Reject whitespace-only titles."""
        value = value.strip()
        if not value:
            msg = "title cannot be blank"
            raise ValueError(msg)
        return value


class BookUpdate(BaseModel):
    """
    Schema for partially updating a Book.

    Only fields present in the request body are applied. An empty string for
    ``published_at`` clears the date.
    """

    title: str | None = Field(None, min_length=1, max_length=500)
    author_id: UUID | None = None
    description: str | None = Field(None, max_length=2000)
    published_at: date | None = Field(None, examples=["2025-11-24"])

    @field_validator("published_at", mode="before")
    @classmethod
    def parse_published_at(cls, value: Any) -> Any:  # noqa: ANN401
        """Accept the supported date layouts; an empty string clears the date."""
        return _coerce_body_date(value)


class AuthorSummary(BaseModel):
    """Author embedded in book responses."""

    id: UUID
    name: str
    bio: str

    model_config = {"from_attributes": True}


class Book(BaseModel):
    """Schema for Book response."""

    id: UUID
    title: str
    author: AuthorSummary
    description: str
    published_at: date | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class BookSummary(BaseModel):
    """Book without its author, used inside author responses."""

    id: UUID
    title: str
    description: str
    published_at: date | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
