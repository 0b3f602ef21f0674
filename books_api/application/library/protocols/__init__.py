"""Repository protocols (ports) for the library bounded context."""

from .author_repository import AuthorRepositoryProtocol
from .book_repository import BookRepositoryProtocol

__all__ = ["AuthorRepositoryProtocol", "BookRepositoryProtocol"]
