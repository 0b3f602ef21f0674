import uuid
from datetime import date

import pytest
from pydantic import ValidationError

from books_api.infrastructure.library.schemas import BookCreate, BookUpdate
from books_api.utils import parse_flexible_date


@pytest.mark.parametrize(
    "raw",
    [
        "2025-11-24",
        "24-11-2025",
        "2025/11/24",
        "November 24, 2025",
        "Nov 24, 2025",
        "2025-11-24T10:30:00Z",
        "2025-11-24T10:30:00+02:00",
    ],
)
def test_accepted_layouts(raw: str) -> None:
    assert parse_flexible_date(raw) == date(2025, 11, 24)


def test_empty_string_means_no_date() -> None:
    assert parse_flexible_date("") is None
    assert parse_flexible_date("   ") is None


@pytest.mark.parametrize("raw", ["yesterday", "2025-13-01", "11/24/2025"])
def test_unknown_layout_raises(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_flexible_date(raw)


def test_book_create_parses_flexible_date() -> None:
    book = BookCreate(
        title="Clean Code",
        author_id=uuid.uuid4(),
        published_at="Aug 1, 2008",  # type: ignore[arg-type]
    )

    assert book.published_at == date(2008, 8, 1)


def test_book_create_rejects_bad_date() -> None:
    with pytest.raises(ValidationError):
        BookCreate(
            title="Clean Code",
            author_id=uuid.uuid4(),
            published_at="sometime in 2008",  # type: ignore[arg-type]
        )


def test_book_create_rejects_blank_title() -> None:
    with pytest.raises(ValidationError):
        BookCreate(title="   ", author_id=uuid.uuid4())


def test_book_update_tracks_present_fields() -> None:
    update = BookUpdate.model_validate({"published_at": ""})

    assert update.model_fields_set == {"published_at"}
    assert update.published_at is None
