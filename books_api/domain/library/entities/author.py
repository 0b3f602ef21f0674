from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from books_api.domain.common.entity import Entity
from books_api.domain.common.exceptions import InvariantViolationError
from books_api.domain.common.value_objects.ids import AuthorId

if TYPE_CHECKING:
    from books_api.domain.library.entities.book import Book


@dataclass(eq=False)
class Author(Entity[AuthorId]):
    """
    Author entity.

    ``books`` is a derived collection: it is filled only when the repository
    was asked to include the author's books (detail and author list views).
    """

    id: AuthorId
    name: str
    created_at: datetime
    updated_at: datetime
    bio: str = ""
    books: list["Book"] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise InvariantViolationError("Author", "name", "cannot be empty")

    def rename(self, name: str) -> None:
        """Change the name, keeping the non-empty invariant."""
        if not name or not name.strip():
            raise InvariantViolationError("Author", "name", "cannot be empty")
        self.name = name.strip()

    def touch(self) -> None:
        """Advance updated_at to now without ever moving it backwards."""
        self.updated_at = max(datetime.now(UTC), self.updated_at)

    @classmethod
    def create(cls, name: str, bio: str | None = None) -> "Author":
        """Factory for creating new author."""
        now = datetime.now(UTC)
        return cls(
            id=AuthorId.generate(),
            name=name.strip(),
            bio=bio or "",
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: AuthorId,
        name: str,
        created_at: datetime,
        updated_at: datetime,
        bio: str | None = None,
        books: list["Book"] | None = None,
    ) -> "Author":
        """Factory for reconstituting author from persistence."""
        return cls(
            id=id,
            name=name,
            bio=bio or "",
            created_at=created_at,
            updated_at=updated_at,
            books=books,
        )
