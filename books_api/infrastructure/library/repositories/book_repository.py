from sqlalchemy import ColumnElement, delete, func, or_, select
from sqlalchemy.orm import Session, joinedload

from books_api.application.library.book_list_params import (
    BookListParams,
    BookListResult,
    BookSortKey,
)
from books_api.domain.common.value_objects.ids import BookId
from books_api.domain.library.entities.book import Book
from books_api.infrastructure.library.mappers.book_mapper import BookMapper
from books_api.models import Book as BookORM

_SORT_COLUMNS = {
    "created_at": BookORM.created_at,
    "title": BookORM.title,
    "published_at": BookORM.published_at,
}


def _build_filters(params: BookListParams) -> list[ColumnElement[bool]]:
    filters: list[ColumnElement[bool]] = []
    if params.query:
        filters.append(
            or_(
                BookORM.title.icontains(params.query, autoescape=True),
                BookORM.description.icontains(params.query, autoescape=True),
            )
        )
    if params.author_id is not None:
        filters.append(BookORM.author_id == params.author_id.value)
    # NULL publication dates never satisfy a comparison, so undated books drop out here
    if params.published_after is not None:
        filters.append(BookORM.published_at >= params.published_after)
    if params.published_before is not None:
        filters.append(BookORM.published_at <= params.published_before)
    return filters


def _build_order_by(sort: BookSortKey) -> list[ColumnElement]:
    column = _SORT_COLUMNS[sort.field]
    ordering = column.desc() if sort.descending else column.asc()
    if sort.field == "published_at":
        ordering = ordering.nulls_last()
    return [ordering, BookORM.id.asc()]


class BookRepository:
    """Domain-centric repository for Book persistence."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BookMapper()

    def create(self, book: Book) -> Book:
        """Persist a new book; the author reference is checked by the caller."""
        orm_model = self.mapper.to_orm(book)
        self.db.add(orm_model)
        self.db.commit()
        return self._reload(book.id)

    def find_by_id(self, book_id: BookId, *, include_author: bool = True) -> Book | None:
        """Find book by ID, optionally with its author resolved."""
        stmt = select(BookORM).where(BookORM.id == book_id.value)
        if include_author:
            stmt = stmt.options(joinedload(BookORM.author))
        orm_model = self.db.execute(stmt).scalar_one_or_none()

        if not orm_model:
            return None

        return self.mapper.to_domain(orm_model, include_author=include_author)

    def list(self, params: BookListParams) -> BookListResult:
        """
        Fetch one page of books matching the descriptor.

        The count and the page query share the same predicate and run as two
        statements in the current session transaction. Rows come back with
        their author resolved.

        Args:
            params: Validated listing descriptor

        Returns:
            BookListResult with the page rows and the pre-pagination total
        """
        filters = _build_filters(params)

        # Count query for total number of books
        total_stmt = select(func.count(BookORM.id)).where(*filters)
        total = self.db.execute(total_stmt).scalar() or 0

        stmt = (
            select(BookORM)
            .options(joinedload(BookORM.author))
            .where(*filters)
            .order_by(*_build_order_by(params.sort))
            .offset(params.pagination.offset)
            .limit(params.pagination.limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()

        books = [self.mapper.to_domain(orm_model, include_author=True) for orm_model in orm_models]
        return BookListResult(books=books, total=total)

    def update(self, book: Book) -> Book:
        """Persist changes to an existing book."""
        stmt = select(BookORM).where(BookORM.id == book.id.value)
        existing_orm = self.db.execute(stmt).scalar_one()
        self.mapper.to_orm(book, existing_orm)
        self.db.commit()
        return self._reload(book.id)

    def delete(self, book_id: BookId) -> bool:
        """Hard delete a book. Returns False when no row matched."""
        result = self.db.execute(delete(BookORM).where(BookORM.id == book_id.value))
        self.db.commit()
        return result.rowcount > 0

    def _reload(self, book_id: BookId) -> Book:
        # Fresh load so the author is joined in
        self.db.expire_all()
        book = self.find_by_id(book_id, include_author=True)
        if book is None:
            raise RuntimeError(f"Book {book_id} vanished after write")
        return book
