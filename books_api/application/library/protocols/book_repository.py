from typing import Protocol

from books_api.application.library.book_list_params import BookListParams, BookListResult
from books_api.domain.common.value_objects.ids import BookId
from books_api.domain.library.entities.book import Book


class BookRepositoryProtocol(Protocol):
    def create(self, book: Book) -> Book: ...

    def find_by_id(self, book_id: BookId, *, include_author: bool = True) -> Book | None: ...

    def list(self, params: BookListParams) -> BookListResult: ...

    def update(self, book: Book) -> Book: ...

    def delete(self, book_id: BookId) -> bool: ...
