"""
In-memory repositories.

Drop-in substitutes for the SQLAlchemy repositories, used by tests that
exercise use cases without a database. Both repositories share one
``InMemoryLibraryStore`` so the author reference and ``has_books`` checks see
the same data. Returned entities are copies; mutating them never changes the
store until they are passed back through ``update``.
"""

from dataclasses import dataclass, field, replace
from uuid import UUID

from books_api.application.library.book_list_params import BookListParams, BookListResult
from books_api.domain.common.value_objects.ids import AuthorId, BookId
from books_api.domain.library.entities.author import Author
from books_api.domain.library.entities.book import Book


@dataclass
class InMemoryLibraryStore:
    """Shared state for the in-memory repositories, keyed by raw UUID."""

    authors: dict[UUID, Author] = field(default_factory=dict)
    books: dict[UUID, Book] = field(default_factory=dict)


def _sort_books(books: list[Book], params: BookListParams) -> list[Book]:
    sort = params.sort
    # Stable sorts: id first so equal keys keep id order in both directions
    by_id = sorted(books, key=lambda book: book.id.value)

    if sort.field == "published_at":
        dated = [book for book in by_id if book.published_at is not None]
        undated = [book for book in by_id if book.published_at is None]
        dated.sort(key=lambda book: book.published_at, reverse=sort.descending)
        return dated + undated

    if sort.field == "title":
        return sorted(by_id, key=lambda book: book.title, reverse=sort.descending)

    return sorted(by_id, key=lambda book: book.created_at, reverse=sort.descending)


class InMemoryBookRepository:
    """Book repository backed by an ``InMemoryLibraryStore``."""

    def __init__(self, store: InMemoryLibraryStore) -> None:
        self.store = store

    def create(self, book: Book) -> Book:
        self.store.books[book.id.value] = replace(book, author=None)
        return self._with_author(self.store.books[book.id.value])

    def find_by_id(self, book_id: BookId, *, include_author: bool = True) -> Book | None:
        book = self.store.books.get(book_id.value)
        if book is None:
            return None
        if include_author:
            return self._with_author(book)
        return replace(book, author=None)

    def list(self, params: BookListParams) -> BookListResult:
        """Filter, sort and paginate with the same semantics as the SQL repository."""
        matching = [book for book in self.store.books.values() if self._matches(book, params)]
        ordered = _sort_books(matching, params)

        offset = params.pagination.offset
        page = ordered[offset : offset + params.pagination.limit]
        return BookListResult(books=[self._with_author(book) for book in page], total=len(matching))

    def update(self, book: Book) -> Book:
        if book.id.value not in self.store.books:
            raise KeyError(book.id.value)
        self.store.books[book.id.value] = replace(book, author=None)
        return self._with_author(self.store.books[book.id.value])

    def delete(self, book_id: BookId) -> bool:
        return self.store.books.pop(book_id.value, None) is not None

    @staticmethod
    def _matches(book: Book, params: BookListParams) -> bool:
        if params.query and not book.matches_text(params.query):
            return False
        if params.author_id is not None and book.author_id != params.author_id:
            return False
        return book.is_published_between(params.published_after, params.published_before)

    def _with_author(self, book: Book) -> Book:
        author = self.store.authors.get(book.author_id.value)
        return replace(book, author=replace(author, books=None) if author else None)


class InMemoryAuthorRepository:
    """Author repository backed by an ``InMemoryLibraryStore``."""

    def __init__(self, store: InMemoryLibraryStore) -> None:
        self.store = store

    def create(self, author: Author) -> Author:
        self.store.authors[author.id.value] = replace(author, books=None)
        return replace(author, books=None)

    def find_by_id(self, author_id: AuthorId, *, include_books: bool = False) -> Author | None:
        author = self.store.authors.get(author_id.value)
        if author is None:
            return None
        return self._copy(author, include_books=include_books)

    def list_all(self, *, include_books: bool = True) -> list[Author]:
        ordered = sorted(self.store.authors.values(), key=lambda author: author.id.value)
        ordered.sort(key=lambda author: author.created_at, reverse=True)
        return [self._copy(author, include_books=include_books) for author in ordered]

    def update(self, author: Author) -> Author:
        if author.id.value not in self.store.authors:
            raise KeyError(author.id.value)
        self.store.authors[author.id.value] = replace(author, books=None)
        return replace(author, books=None)

    def delete(self, author_id: AuthorId) -> bool:
        return self.store.authors.pop(author_id.value, None) is not None

    def exists(self, author_id: AuthorId) -> bool:
        return author_id.value in self.store.authors

    def has_books(self, author_id: AuthorId) -> bool:
        return any(book.author_id == author_id for book in self.store.books.values())

    def _copy(self, author: Author, *, include_books: bool) -> Author:
        if not include_books:
            return replace(author, books=None)
        owned = [book for book in self.store.books.values() if book.author_id == author.id]
        owned.sort(key=lambda book: (book.created_at, book.id.value))
        books = [replace(book, author=None) for book in owned]
        return replace(author, books=books)
