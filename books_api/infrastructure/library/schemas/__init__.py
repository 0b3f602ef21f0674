"""Library context schemas."""

from books_api.infrastructure.library.schemas.author_schemas import (
    Author,
    AuthorCreate,
    AuthorUpdate,
)
from books_api.infrastructure.library.schemas.book_schemas import (
    AuthorSummary,
    Book,
    BookCreate,
    BookSummary,
    BookUpdate,
)

__all__ = [
    "Author",
    "AuthorCreate",
    "AuthorSummary",
    "AuthorUpdate",
    "Book",
    "BookCreate",
    "BookSummary",
    "BookUpdate",
]
