from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

from books_api.domain.common.entity import Entity
from books_api.domain.common.exceptions import InvariantViolationError
from books_api.domain.common.value_objects.ids import AuthorId, BookId

if TYPE_CHECKING:
    from books_api.domain.library.entities.author import Author


@dataclass(eq=False)
class Book(Entity[BookId]):
    """
    Book aggregate root.

    A book always belongs to exactly one author. The author entity itself is
    only attached when the repository was asked to resolve it.
    """

    # Identity
    id: BookId
    author_id: AuthorId

    # Essential metadata
    title: str

    # Timestamps
    created_at: datetime
    updated_at: datetime

    # Optional fields
    description: str = ""
    published_at: date | None = None

    # Resolved association (eager-loaded on request)
    author: "Author | None" = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise InvariantViolationError("Book", "title", "cannot be empty")

        if self.updated_at < self.created_at:
            raise InvariantViolationError("Book", "updated_at", "cannot precede created_at")

    # Query methods
    def is_published_between(self, after: date | None, before: date | None) -> bool:
        """Check the publication date against inclusive bounds; undated books never match a bound."""
        if after is None and before is None:
            return True
        if self.published_at is None:
            return False
        if after is not None and self.published_at < after:
            return False
        return before is None or self.published_at <= before

    def matches_text(self, query: str) -> bool:
        """Case-insensitive substring match against title or description."""
        needle = query.casefold()
        return needle in self.title.casefold() or needle in self.description.casefold()

    # Command methods
    def rename(self, title: str) -> None:
        """Change the title, keeping the non-empty invariant."""
        if not title or not title.strip():
            raise InvariantViolationError("Book", "title", "cannot be empty")
        self.title = title.strip()

    def assign_author(self, author_id: AuthorId) -> None:
        """Move the book to another author; the resolved author is dropped."""
        if author_id != self.author_id:
            self.author_id = author_id
            self.author = None

    def touch(self) -> None:
        """Advance updated_at to now without ever moving it backwards."""
        self.updated_at = max(datetime.now(UTC), self.updated_at)

    # Factory methods
    @classmethod
    def create(
        cls,
        author_id: AuthorId,
        title: str,
        description: str | None = None,
        published_at: date | None = None,
        book_id: BookId | None = None,
    ) -> "Book":
        """Factory for creating new book."""
        now = datetime.now(UTC)
        return cls(
            id=book_id or BookId.generate(),
            author_id=author_id,
            title=title.strip(),
            description=description or "",
            published_at=published_at,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: BookId,
        author_id: AuthorId,
        title: str,
        created_at: datetime,
        updated_at: datetime,
        description: str | None = None,
        published_at: date | None = None,
        author: "Author | None" = None,
    ) -> "Book":
        """Factory for reconstituting book from persistence."""
        return cls(
            id=id,
            author_id=author_id,
            title=title,
            description=description or "",
            published_at=published_at,
            created_at=created_at,
            updated_at=updated_at,
            author=author,
        )
