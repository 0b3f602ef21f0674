"""
Identity-bearing domain objects.

An entity keeps its identity while its attributes change: two ``Book``
instances with the same ``BookId`` are the same book even if one of them has
a newer title.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    UUID wrapper typed per entity.

    ``BookId`` and ``AuthorId`` never compare equal to each other, so a book id
    cannot be passed where an author id is expected by accident.
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Build an id from its textual form; raises ValueError for anything but a UUID."""
        return cls(UUID(raw))

    def to_primitive(self) -> str:
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """Domain object compared and hashed by its ``id`` alone."""

    id: IdType

    def __eq__(self, other: object) -> bool:
        return isinstance(other, self.__class__) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"
