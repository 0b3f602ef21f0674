"""ORM <-> domain mappers for the library context."""

from books_api.infrastructure.library.mappers.author_mapper import AuthorMapper
from books_api.infrastructure.library.mappers.book_mapper import BookMapper

__all__ = ["AuthorMapper", "BookMapper"]
