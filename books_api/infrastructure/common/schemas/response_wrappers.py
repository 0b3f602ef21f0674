"""Common response wrapper schemas for API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from books_api.application.common.pagination import PaginatedResult

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Generic single-payload wrapper."""

    data: T


class PaginationMeta(BaseModel):
    """Pagination block returned alongside list payloads."""

    page: int = Field(..., ge=1, description="Current page number")
    page_size: int = Field(..., ge=1, description="Items per page")
    total: int = Field(..., ge=0, description="Rows matching the filter across all pages")
    total_pages: int = Field(..., ge=0, description="ceil(total / page_size)")

    @classmethod
    def from_result(cls, result: PaginatedResult[object]) -> "PaginationMeta":
        return cls(
            page=result.page,
            page_size=result.page_size,
            total=result.total,
            total_pages=result.total_pages,
        )


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic pagination wrapper."""

    data: list[T]
    pagination: PaginationMeta
