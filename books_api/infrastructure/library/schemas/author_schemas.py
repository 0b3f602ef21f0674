"""Pydantic schemas for Author API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from books_api.infrastructure.library.schemas.book_schemas import BookSummary


class AuthorCreate(BaseModel):
    """Schema for creating an Author."""

    name: str = Field(..., min_length=1, max_length=255, description="Author name")
    bio: str = Field("", max_length=2000, description="Short biography")


class AuthorUpdate(BaseModel):
    """Schema for partially updating an Author."""

    name: str | None = Field(None, min_length=1, max_length=255)
    bio: str | None = Field(None, max_length=2000)


class Author(BaseModel):
    """Schema for Author response."""

    id: UUID
    name: str
    bio: str
    books: list[BookSummary] | None = Field(
        None, description="Books by this author, present in detail and list views"
    )
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
