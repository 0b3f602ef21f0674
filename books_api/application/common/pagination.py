"""
Page arithmetic for list queries.

Pages are 1-based. ``Pagination`` only holds values that are already valid;
lenient parsing of user input (fallbacks and clamping) happens before one is
built.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def compute_total_pages(total: int, page_size: int) -> int:
    """Number of pages needed to show ``total`` rows; 0 for an empty set or a non-positive page size."""
    if page_size <= 0 or total <= 0:
        return 0
    return (total + page_size - 1) // page_size


@dataclass(frozen=True)
class Pagination:
    """Requested page and page size."""

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {self.page_size}")

    @property
    def offset(self) -> int:
        """Rows to skip before the requested page starts."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    One page of items plus the size of the whole result set.

    ``total`` counts every matching row, not only the ones on this page, so a
    page past the end has no items but still reports the real total.
    """

    items: list[T]
    total: int
    pagination: Pagination

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def page_size(self) -> int:
        return self.pagination.page_size

    @property
    def total_pages(self) -> int:
        return compute_total_pages(self.total, self.pagination.page_size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1
