"""Create book use case."""

import logging

from books_api.application.library.protocols.author_repository import AuthorRepositoryProtocol
from books_api.application.library.protocols.book_repository import BookRepositoryProtocol
from books_api.domain.common.value_objects import AuthorId
from books_api.domain.library.entities.book import Book
from books_api.exceptions import AuthorReferenceError
from books_api.infrastructure.library.schemas import BookCreate

logger = logging.getLogger(__name__)


class CreateBookUseCase:
    """Use case for creating books."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        author_repository: AuthorRepositoryProtocol,
    ) -> None:
        self.book_repository = book_repository
        self.author_repository = author_repository

    def create_book(self, book_data: BookCreate) -> Book:
        """
        Create a book for an existing author.

        Args:
            book_data: Book creation data

        Returns:
            The stored book with its author resolved

        Raises:
            AuthorReferenceError: If author_id does not reference an existing author
        """
        author_id_vo = AuthorId(book_data.author_id)
        if not self.author_repository.exists(author_id_vo):
            raise AuthorReferenceError(book_data.author_id)

        # Create new book using domain entity factory
        book = Book.create(
            author_id=author_id_vo,
            title=book_data.title,
            description=book_data.description,
            published_at=book_data.published_at,
        )

        book = self.book_repository.create(book)
        logger.info(f"Created book {book.id.value} for author {author_id_vo.value}")
        return book
