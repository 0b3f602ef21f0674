"""
Author management use case.

Handles CRUD operations for authors. Deleting an author that still owns
books is refused rather than cascading.
"""

import logging
from uuid import UUID

from books_api.application.library.protocols.author_repository import AuthorRepositoryProtocol
from books_api.domain.common.value_objects import AuthorId
from books_api.domain.library.entities.author import Author
from books_api.exceptions import AuthorHasBooksError, AuthorNotFoundError, NoFieldsToUpdateError
from books_api.infrastructure.library.schemas import (
    AuthorCreate,
    AuthorUpdate,
)  # Only for input parameter types

logger = logging.getLogger(__name__)


class AuthorManagementUseCase:
    """Use case for author management operations."""

    def __init__(self, author_repository: AuthorRepositoryProtocol) -> None:
        """
        Initialize use case with dependencies.

        Args:
            author_repository: Author repository protocol implementation
        """
        self.author_repository = author_repository

    def create_author(self, author_data: AuthorCreate) -> Author:
        """Create an author."""
        author = Author.create(name=author_data.name, bio=author_data.bio)
        author = self.author_repository.create(author)
        logger.info(f"Created author {author.id.value}")
        return author

    def get_author(self, author_id: UUID) -> Author:
        """
        Get an author together with the author's books.

        Raises:
            AuthorNotFoundError: If author is not found
        """
        author = self.author_repository.find_by_id(AuthorId(author_id), include_books=True)
        if not author:
            raise AuthorNotFoundError(author_id)
        return author

    def list_authors(self) -> list[Author]:
        """List all authors, newest first, each with its books."""
        return self.author_repository.list_all(include_books=True)

    def update_author(self, author_id: UUID, update_data: AuthorUpdate) -> Author:
        """
        Apply the fields present in the request to an author.

        Raises:
            NoFieldsToUpdateError: If the request carries no field at all
            AuthorNotFoundError: If author is not found
        """
        fields = update_data.model_fields_set
        if not fields:
            raise NoFieldsToUpdateError()

        author = self.author_repository.find_by_id(AuthorId(author_id))
        if not author:
            raise AuthorNotFoundError(author_id)

        if "name" in fields and update_data.name is not None:
            author.rename(update_data.name)
        if "bio" in fields:
            author.bio = update_data.bio or ""

        author.touch()
        author = self.author_repository.update(author)

        logger.info(f"Successfully updated author {author_id}")
        return author

    def delete_author(self, author_id: UUID) -> None:
        """
        Delete an author that owns no books.

        Raises:
            AuthorNotFoundError: If author is not found
            AuthorHasBooksError: If books still reference the author
        """
        author_id_vo = AuthorId(author_id)
        if not self.author_repository.exists(author_id_vo):
            raise AuthorNotFoundError(author_id)

        if self.author_repository.has_books(author_id_vo):
            raise AuthorHasBooksError(author_id)

        if not self.author_repository.delete(author_id_vo):
            raise AuthorNotFoundError(author_id)

        logger.info(f"Deleted author {author_id}")
