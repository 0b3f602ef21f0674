from books_api.domain.common.value_objects.ids import AuthorId
from books_api.domain.library.entities.author import Author
from books_api.infrastructure.library.mappers.book_mapper import BookMapper
from books_api.infrastructure.library.mappers.timestamps import as_utc
from books_api.models import Author as AuthorORM


class AuthorMapper:
    """Mapper for Author ORM ↔ Domain conversion."""

    def __init__(self) -> None:
        self.book_mapper = BookMapper()

    def to_domain(self, orm_model: AuthorORM, *, include_books: bool = False) -> Author:
        """Convert ORM model to domain entity, with books only when they were loaded."""
        books = None
        if include_books:
            books = [self.book_mapper.to_domain(book_orm) for book_orm in orm_model.books]
        return Author.create_with_id(
            id=AuthorId(orm_model.id),
            name=orm_model.name,
            bio=orm_model.bio,
            created_at=as_utc(orm_model.created_at),
            updated_at=as_utc(orm_model.updated_at),
            books=books,
        )

    def to_orm(self, domain_entity: Author, orm_model: AuthorORM | None = None) -> AuthorORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.bio = domain_entity.bio
            orm_model.updated_at = domain_entity.updated_at
            return orm_model

        return AuthorORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            bio=domain_entity.bio,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
