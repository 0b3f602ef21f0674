from typing import Protocol

from books_api.domain.common.value_objects.ids import AuthorId
from books_api.domain.library.entities.author import Author


class AuthorRepositoryProtocol(Protocol):
    def create(self, author: Author) -> Author: ...

    def find_by_id(self, author_id: AuthorId, *, include_books: bool = False) -> Author | None: ...

    def list_all(self, *, include_books: bool = True) -> list[Author]: ...

    def update(self, author: Author) -> Author: ...

    def delete(self, author_id: AuthorId) -> bool: ...

    def exists(self, author_id: AuthorId) -> bool: ...

    def has_books(self, author_id: AuthorId) -> bool: ...
