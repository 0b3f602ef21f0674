"""
Application common module.

Contains base classes for application layer:
- Query: Base class for read operations
- QueryHandler: Handles query execution
- Pagination / PaginatedResult: page arithmetic for list queries
"""

from .pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PaginatedResult,
    Pagination,
    compute_total_pages,
)
from .query import Query, QueryHandler

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PaginatedResult",
    "Pagination",
    "Query",
    "QueryHandler",
    "compute_total_pages",
]
