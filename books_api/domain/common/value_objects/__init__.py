"""Shared value objects."""

from .ids import AuthorId, BookId

__all__ = ["AuthorId", "BookId"]
