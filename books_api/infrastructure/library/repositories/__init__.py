"""Library repositories: SQLAlchemy-backed and in-memory."""

from books_api.infrastructure.library.repositories.author_repository import AuthorRepository
from books_api.infrastructure.library.repositories.book_repository import BookRepository
from books_api.infrastructure.library.repositories.in_memory import (
    InMemoryAuthorRepository,
    InMemoryBookRepository,
    InMemoryLibraryStore,
)

__all__ = [
    "AuthorRepository",
    "BookRepository",
    "InMemoryAuthorRepository",
    "InMemoryBookRepository",
    "InMemoryLibraryStore",
]
