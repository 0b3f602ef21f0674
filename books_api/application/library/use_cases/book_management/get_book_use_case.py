"""Get book use case."""

from uuid import UUID

from books_api.application.library.protocols.book_repository import BookRepositoryProtocol
from books_api.domain.common.value_objects import BookId
from books_api.domain.library.entities.book import Book
from books_api.exceptions import BookNotFoundError


class GetBookUseCase:
    """Use case for fetching a single book."""

    def __init__(self, book_repository: BookRepositoryProtocol) -> None:
        self.book_repository = book_repository

    def get_book(self, book_id: UUID) -> Book:
        """
        Get a book with its author resolved.

        Raises:
            BookNotFoundError: If book is not found
        """
        book = self.book_repository.find_by_id(BookId(book_id), include_author=True)
        if not book:
            raise BookNotFoundError(book_id)
        return book
