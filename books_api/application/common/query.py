"""
Read-side base classes.

A query is an immutable description of what to fetch; its handler turns it
into a result without changing any state:

    @dataclass(frozen=True)
    class BookListParams(Query):
        pagination: Pagination

    class ListBooksUseCase(QueryHandler[BookListParams, PaginatedResult[Book]]):
        def handle(self, query: BookListParams) -> PaginatedResult[Book]: ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

TQuery = TypeVar("TQuery", bound="Query")
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Query:
    """Marker base for frozen query dataclasses."""


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Executes exactly one query type and returns its result."""

    @abstractmethod
    def handle(self, query: TQuery) -> TResult:
        raise NotImplementedError
