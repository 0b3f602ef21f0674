import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from books_api.core import container
from books_api.database import DatabaseSession

T = TypeVar("T")

# Sync endpoints run in a thread pool and container.db is shared by all of them
_db_override_lock = threading.Lock()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency that builds a use case from a container provider.

    The request-scoped session is bound to ``container.db`` only while the
    provider builds the object graph; the repositories keep their own
    reference to it afterwards.
    """

    def dependency(db: DatabaseSession) -> T:
        with _db_override_lock, container.db.override(db):
            return provider()

    return dependency
