"""Row builders shared by the database-backed tests."""

import uuid
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta

from sqlalchemy.orm import Session

from books_api import models

SEED_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


@dataclass
class SeededLibrary:
    """Rows created by the ``library`` fixture."""

    author_a: models.Author
    author_b: models.Author
    clean_code: models.Book
    clean_architecture: models.Book
    domain_driven_design: models.Book
    legacy_code: models.Book


def make_author(db_session: Session, name: str, minutes: int = 0, bio: str = "") -> models.Author:
    author = models.Author(
        id=uuid.uuid4(),
        name=name,
        bio=bio,
        created_at=SEED_TIME + timedelta(minutes=minutes),
        updated_at=SEED_TIME + timedelta(minutes=minutes),
    )
    db_session.add(author)
    db_session.commit()
    return author


def make_book(
    db_session: Session,
    author: models.Author,
    title: str,
    minutes: int,
    published_at: date | None = None,
    description: str = "",
) -> models.Book:
    book = models.Book(
        id=uuid.uuid4(),
        title=title,
        author_id=author.id,
        description=description,
        published_at=published_at,
        created_at=SEED_TIME + timedelta(minutes=minutes),
        updated_at=SEED_TIME + timedelta(minutes=minutes),
    )
    db_session.add(book)
    db_session.commit()
    return book
