"""List books use case."""

import logging

from books_api.application.common.pagination import PaginatedResult
from books_api.application.common.query import QueryHandler
from books_api.application.library.book_list_params import BookListParams
from books_api.application.library.protocols.book_repository import BookRepositoryProtocol
from books_api.domain.library.entities.book import Book

logger = logging.getLogger(__name__)


class ListBooksUseCase(QueryHandler[BookListParams, PaginatedResult[Book]]):
    """Use case for the filtered, sorted and paginated book listing."""

    def __init__(self, book_repository: BookRepositoryProtocol) -> None:
        self.book_repository = book_repository

    def handle(self, query: BookListParams) -> PaginatedResult[Book]:
        """
        Run the listing query.

        Storage errors propagate unchanged; no partial result is returned.

        Args:
            query: Validated listing descriptor

        Returns:
            PaginatedResult with the requested page and the total match count.
            A page beyond the last one has no items but keeps total populated.
        """
        result = self.book_repository.list(query)

        logger.debug(
            f"Listed {len(result.books)} of {result.total} books "
            f"(page={query.page}, page_size={query.page_size}, sort={query.sort.value})"
        )
        return result.to_paginated(query.pagination)
