"""
Listing descriptor for books.

``parse_book_list_params`` turns loosely typed query-string values into a
validated ``BookListParams``. Malformed identifiers, dates and sort keys are
rejected here, before any storage access; page and page size are normalized
instead of rejected.
"""

import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

from books_api.application.common.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PaginatedResult,
    Pagination,
)
from books_api.application.common.query import Query
from books_api.domain.common.value_objects.ids import AuthorId
from books_api.domain.library.entities.book import Book
from books_api.exceptions import (
    InvalidDateBoundError,
    InvalidIdentifierError,
    InvalidSortKeyError,
)

QUERY_DATE_FORMAT = "%Y-%m-%d"
_QUERY_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Largest page whose row offset still fits a signed 64-bit SQL integer
MAX_PAGE = sys.maxsize // MAX_PAGE_SIZE


class BookSortKey(StrEnum):
    """Supported orderings for the book listing."""

    CREATED_AT_DESC = "created_at_desc"
    CREATED_AT_ASC = "created_at_asc"
    TITLE_ASC = "title_asc"
    TITLE_DESC = "title_desc"
    PUBLISHED_AT_DESC = "published_at_desc"
    PUBLISHED_AT_ASC = "published_at_asc"

    @property
    def field(self) -> str:
        """Book attribute the key orders by."""
        return self.value.rsplit("_", 1)[0]

    @property
    def descending(self) -> bool:
        return self.value.endswith("_desc")


DEFAULT_SORT = BookSortKey.CREATED_AT_DESC


@dataclass(frozen=True)
class BookListParams(Query):
    """
    Validated listing descriptor.

    Attributes:
        pagination: Page number and page size (already normalized)
        sort: Ordering key
        query: Free-text match against title and description
        author_id: Exact author filter
        published_after: Inclusive lower publish-date bound
        published_before: Inclusive upper publish-date bound
    """

    pagination: Pagination = field(default_factory=Pagination)
    sort: BookSortKey = DEFAULT_SORT
    query: str | None = None
    author_id: AuthorId | None = None
    published_after: date | None = None
    published_before: date | None = None

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def page_size(self) -> int:
        return self.pagination.page_size


@dataclass(frozen=True)
class BookListResult:
    """One page of books plus the number of rows matching the filter before pagination."""

    books: list[Book]
    total: int

    def to_paginated(self, pagination: Pagination) -> PaginatedResult[Book]:
        return PaginatedResult(items=self.books, total=self.total, pagination=pagination)


def _parse_positive_int(raw: str | None, default: int, maximum: int | None = None) -> int:
    """
    Read a plain decimal integer, falling back to ``default`` when it is not one.

    Only ASCII digits with an optional sign are accepted, so ``"1_0"`` or
    full-width digits fall back too. Values below 1 or above ``maximum`` are
    treated as invalid.
    """
    if raw is None:
        return default
    text = raw.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return default
    value = int(text)
    if value < 1 or (maximum is not None and value > maximum):
        return default
    return value


def _parse_sort(raw: str | None) -> BookSortKey:
    if raw is None or not raw.strip():
        return DEFAULT_SORT
    try:
        return BookSortKey(raw.strip())
    except ValueError:
        raise InvalidSortKeyError(raw, [key.value for key in BookSortKey]) from None


def _parse_author_id(raw: str | None) -> AuthorId | None:
    if raw is None or not raw.strip():
        return None
    try:
        return AuthorId.parse(raw.strip())
    except ValueError:
        raise InvalidIdentifierError(
            "author_id", "INVALID_AUTHOR_ID", "author_id must be a valid UUID"
        ) from None


def parse_query_date(raw: str | None, field_name: str) -> date | None:
    """
    Parse an optional YYYY-MM-DD query value.

    Raises:
        InvalidDateBoundError: If the value is present but not a valid calendar date
    """
    if raw is None or not raw.strip():
        return None
    value = raw.strip()
    if not _QUERY_DATE_PATTERN.match(value):
        raise InvalidDateBoundError(field_name)
    try:
        return datetime.strptime(value, QUERY_DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateBoundError(field_name) from None


def parse_book_list_params(raw: Mapping[str, str | None]) -> BookListParams:
    """
    Build a validated listing descriptor from raw query parameters.

    Recognized keys: page, page_size, sort, q, author_id, published_after,
    published_before. Unknown keys are ignored.

    - page: non-numeric, non-positive or beyond MAX_PAGE falls back to 1
    - page_size: non-numeric or non-positive falls back to 20, above 100 is clamped to 100
    - sort: must be a BookSortKey value (empty means the default)

    Raises:
        InvalidSortKeyError: Unknown sort key
        InvalidIdentifierError: author_id is not a UUID
        InvalidDateBoundError: published_after / published_before not YYYY-MM-DD
    """
    page = _parse_positive_int(raw.get("page"), DEFAULT_PAGE, maximum=MAX_PAGE)
    page_size = min(_parse_positive_int(raw.get("page_size"), DEFAULT_PAGE_SIZE), MAX_PAGE_SIZE)

    sort = _parse_sort(raw.get("sort"))

    query = (raw.get("q") or "").strip() or None

    author_id = _parse_author_id(raw.get("author_id"))
    published_after = parse_query_date(raw.get("published_after"), "published_after")
    published_before = parse_query_date(raw.get("published_before"), "published_before")

    return BookListParams(
        pagination=Pagination(page=page, page_size=page_size),
        sort=sort,
        query=query,
        author_id=author_id,
        published_after=published_after,
        published_before=published_before,
    )
