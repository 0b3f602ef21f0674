"""Delete book use case."""

import logging
from uuid import UUID

from books_api.application.library.protocols.book_repository import BookRepositoryProtocol
from books_api.domain.common.value_objects import BookId
from books_api.exceptions import BookNotFoundError

logger = logging.getLogger(__name__)


class DeleteBookUseCase:
    """Use case for deleting books."""

    def __init__(self, book_repository: BookRepositoryProtocol) -> None:
        self.book_repository = book_repository

    def delete_book(self, book_id: UUID) -> None:
        """
        Delete a book (hard delete).

        Raises:
            BookNotFoundError: If no book was deleted
        """
        if not self.book_repository.delete(BookId(book_id)):
            raise BookNotFoundError(book_id)

        logger.info(f"Deleted book {book_id}")
