from sqlalchemy import delete, exists, select
from sqlalchemy.orm import Session, selectinload

from books_api.domain.common.value_objects.ids import AuthorId
from books_api.domain.library.entities.author import Author
from books_api.infrastructure.library.mappers.author_mapper import AuthorMapper
from books_api.models import Author as AuthorORM
from books_api.models import Book as BookORM


class AuthorRepository:
    """Domain-centric repository for Author persistence."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = AuthorMapper()

    def create(self, author: Author) -> Author:
        orm_model = self.mapper.to_orm(author)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def find_by_id(self, author_id: AuthorId, *, include_books: bool = False) -> Author | None:
        """Find author by ID, optionally with the author's books loaded up front."""
        stmt = select(AuthorORM).where(AuthorORM.id == author_id.value)
        if include_books:
            stmt = stmt.options(selectinload(AuthorORM.books))
        orm_model = self.db.execute(stmt).scalar_one_or_none()

        if not orm_model:
            return None

        return self.mapper.to_domain(orm_model, include_books=include_books)

    def list_all(self, *, include_books: bool = True) -> list[Author]:
        """List every author, newest first."""
        stmt = select(AuthorORM).order_by(AuthorORM.created_at.desc(), AuthorORM.id.asc())
        if include_books:
            stmt = stmt.options(selectinload(AuthorORM.books))
        orm_models = self.db.execute(stmt).scalars().all()
        return [
            self.mapper.to_domain(orm_model, include_books=include_books)
            for orm_model in orm_models
        ]

    def update(self, author: Author) -> Author:
        stmt = select(AuthorORM).where(AuthorORM.id == author.id.value)
        existing_orm = self.db.execute(stmt).scalar_one()
        self.mapper.to_orm(author, existing_orm)
        self.db.commit()
        self.db.refresh(existing_orm)
        return self.mapper.to_domain(existing_orm)

    def delete(self, author_id: AuthorId) -> bool:
        """Hard delete an author. Returns False when no row matched."""
        result = self.db.execute(delete(AuthorORM).where(AuthorORM.id == author_id.value))
        self.db.commit()
        return result.rowcount > 0

    def exists(self, author_id: AuthorId) -> bool:
        stmt = select(exists().where(AuthorORM.id == author_id.value))
        return bool(self.db.execute(stmt).scalar())

    def has_books(self, author_id: AuthorId) -> bool:
        stmt = select(exists().where(BookORM.author_id == author_id.value))
        return bool(self.db.execute(stmt).scalar())
