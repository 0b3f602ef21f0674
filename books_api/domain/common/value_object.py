"""Base class for Value Objects."""

from abc import ABC, abstractmethod


class ValueObject(ABC):
    """
    Immutable value compared by its attributes, never by identity.

    Concrete value objects are frozen dataclasses, whose generated ``__eq__``
    and ``__hash__`` already compare field by field. The base class only fixes
    the serialization hook every value object has to provide.
    """

    __slots__ = ()

    @abstractmethod
    def to_primitive(self) -> object:
        """Return a JSON-friendly representation of the value."""
