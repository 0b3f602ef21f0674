from books_api.domain.common.value_objects.ids import AuthorId, BookId
from books_api.domain.library.entities.author import Author
from books_api.domain.library.entities.book import Book
from books_api.infrastructure.library.mappers.timestamps import as_utc
from books_api.models import Author as AuthorORM
from books_api.models import Book as BookORM


class BookMapper:
    """Mapper for Book ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: BookORM, *, include_author: bool = False) -> Book:
        """
        Convert ORM model to domain entity.

        ``include_author`` must only be set when the author relationship was
        loaded with the book; relationships never lazy-load.
        """
        author = self._author_to_domain(orm_model.author) if include_author else None
        return Book.create_with_id(
            id=BookId(orm_model.id),
            author_id=AuthorId(orm_model.author_id),
            title=orm_model.title,
            description=orm_model.description,
            published_at=orm_model.published_at,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
            author=author,
        )

    def to_orm(self, domain_entity: Book, orm_model: BookORM | None = None) -> BookORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.title = domain_entity.title
            orm_model.author_id = domain_entity.author_id.value
            orm_model.description = domain_entity.description
            orm_model.published_at = domain_entity.published_at
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        # Create new
        return BookORM(
            id=domain_entity.id.value,
            title=domain_entity.title,
            author_id=domain_entity.author_id.value,
            description=domain_entity.description,
            published_at=domain_entity.published_at,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )

    @staticmethod
    def _author_to_domain(orm_model: AuthorORM) -> Author:
        return Author.create_with_id(
            id=AuthorId(orm_model.id),
            name=orm_model.name,
            bio=orm_model.bio,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
        )
