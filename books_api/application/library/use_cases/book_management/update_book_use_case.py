"""Update book use case."""

import logging
from uuid import UUID

from books_api.application.library.protocols.author_repository import AuthorRepositoryProtocol
from books_api.application.library.protocols.book_repository import BookRepositoryProtocol
from books_api.domain.common.value_objects import AuthorId, BookId
from books_api.domain.library.entities.book import Book
from books_api.exceptions import AuthorReferenceError, BookNotFoundError, NoFieldsToUpdateError
from books_api.infrastructure.library.schemas import BookUpdate

logger = logging.getLogger(__name__)


class UpdateBookUseCase:
    """Use case for partially updating book information."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        author_repository: AuthorRepositoryProtocol,
    ) -> None:
        self.book_repository = book_repository
        self.author_repository = author_repository

    def update_book(self, book_id: UUID, update_data: BookUpdate) -> Book:
        """
        Apply the fields present in the request to a book.

        Fields missing from the request body are left untouched. An explicit
        null for ``published_at`` or ``description`` clears it; an explicit null
        for ``title`` or ``author_id`` is ignored since both are required.

        Args:
            book_id: ID of the book to update
            update_data: Partial update, only ``model_fields_set`` is applied

        Returns:
            The updated book with its author resolved

        Raises:
            NoFieldsToUpdateError: If the request carries no field at all
            BookNotFoundError: If book is not found
            AuthorReferenceError: If the new author_id does not exist
        """
        fields = update_data.model_fields_set
        if not fields:
            raise NoFieldsToUpdateError()

        book = self.book_repository.find_by_id(BookId(book_id), include_author=False)
        if not book:
            raise BookNotFoundError(book_id)

        if "author_id" in fields and update_data.author_id is not None:
            author_id_vo = AuthorId(update_data.author_id)
            if not self.author_repository.exists(author_id_vo):
                raise AuthorReferenceError(update_data.author_id)
            book.assign_author(author_id_vo)

        if "title" in fields and update_data.title is not None:
            book.rename(update_data.title)

        if "description" in fields:
            book.description = update_data.description or ""

        if "published_at" in fields:
            book.published_at = update_data.published_at

        book.touch()
        book = self.book_repository.update(book)

        logger.info(f"Successfully updated book {book_id} (fields: {sorted(fields)})")
        return book
