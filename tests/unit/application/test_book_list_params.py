import uuid
from datetime import date

import pytest

from books_api.application.common.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from books_api.application.library.book_list_params import (
    MAX_PAGE,
    BookSortKey,
    parse_book_list_params,
    parse_query_date,
)
from books_api.domain.common.value_objects import AuthorId
from books_api.exceptions import (
    InvalidDateBoundError,
    InvalidIdentifierError,
    InvalidSortKeyError,
)


def test_defaults_when_nothing_is_given() -> None:
    params = parse_book_list_params({})

    assert params.page == 1
    assert params.page_size == DEFAULT_PAGE_SIZE
    assert params.sort is BookSortKey.CREATED_AT_DESC
    assert params.query is None
    assert params.author_id is None
    assert params.published_after is None
    assert params.published_before is None


@pytest.mark.parametrize("raw", ["0", "-3", "abc", "", "1.5"])
def test_invalid_page_falls_back_to_first_page(raw: str) -> None:
    assert parse_book_list_params({"page": raw}).page == 1


@pytest.mark.parametrize("raw", ["0", "-1", "many"])
def test_invalid_page_size_falls_back_to_default(raw: str) -> None:
    assert parse_book_list_params({"page_size": raw}).page_size == DEFAULT_PAGE_SIZE


def test_page_size_is_clamped_to_maximum() -> None:
    assert parse_book_list_params({"page_size": "500"}).page_size == MAX_PAGE_SIZE
    assert parse_book_list_params({"page_size": "100"}).page_size == 100


@pytest.mark.parametrize("raw", ["1_0", "３", "٣", "0x10", "1e3"])
def test_page_accepts_only_plain_ascii_digits(raw: str) -> None:
    assert parse_book_list_params({"page": raw}).page == 1
    assert parse_book_list_params({"page_size": raw}).page_size == DEFAULT_PAGE_SIZE


def test_signed_and_padded_page_is_kept() -> None:
    assert parse_book_list_params({"page": " +4 "}).page == 4


def test_page_beyond_sql_integer_range_falls_back_to_first_page() -> None:
    assert parse_book_list_params({"page": "99999999999999999999"}).page == 1
    assert parse_book_list_params({"page": str(MAX_PAGE + 1)}).page == 1


def test_largest_page_keeps_offset_within_64_bits() -> None:
    params = parse_book_list_params({"page": str(MAX_PAGE), "page_size": "100"})

    assert params.page == MAX_PAGE
    assert params.pagination.offset < 2**63


def test_valid_page_values_are_kept() -> None:
    params = parse_book_list_params({"page": "3", "page_size": "7"})

    assert params.page == 3
    assert params.page_size == 7
    assert params.pagination.offset == 14


@pytest.mark.parametrize("key", [key.value for key in BookSortKey])
def test_every_sort_key_is_accepted(key: str) -> None:
    assert parse_book_list_params({"sort": key}).sort.value == key


def test_empty_sort_uses_default() -> None:
    assert parse_book_list_params({"sort": ""}).sort is BookSortKey.CREATED_AT_DESC


def test_unknown_sort_key_is_rejected() -> None:
    with pytest.raises(InvalidSortKeyError) as exc_info:
        parse_book_list_params({"sort": "price_asc"})

    assert exc_info.value.code == "INVALID_SORT_KEY"
    assert exc_info.value.status_code == 400
    assert exc_info.value.errors[0].field == "sort"


def test_sort_key_field_and_direction() -> None:
    assert BookSortKey.PUBLISHED_AT_DESC.field == "published_at"
    assert BookSortKey.PUBLISHED_AT_DESC.descending
    assert BookSortKey.TITLE_ASC.field == "title"
    assert not BookSortKey.TITLE_ASC.descending


def test_query_is_trimmed_and_blank_means_no_filter() -> None:
    assert parse_book_list_params({"q": "  clean  "}).query == "clean"
    assert parse_book_list_params({"q": "   "}).query is None


def test_author_id_is_parsed() -> None:
    raw = uuid.uuid4()
    params = parse_book_list_params({"author_id": str(raw)})

    assert params.author_id == AuthorId(raw)


def test_malformed_author_id_is_rejected() -> None:
    with pytest.raises(InvalidIdentifierError) as exc_info:
        parse_book_list_params({"author_id": "not-a-uuid"})

    assert exc_info.value.code == "INVALID_AUTHOR_ID"
    assert exc_info.value.errors[0].field == "author_id"


def test_date_bounds_are_parsed() -> None:
    params = parse_book_list_params(
        {"published_after": "2000-01-01", "published_before": "2010-12-31"}
    )

    assert params.published_after == date(2000, 1, 1)
    assert params.published_before == date(2010, 12, 31)


@pytest.mark.parametrize(
    ("field", "raw"),
    [
        ("published_after", "01-01-2000"),
        ("published_after", "2000/01/01"),
        ("published_before", "2000-13-01"),
        ("published_before", "2000-02-30"),
        ("published_before", "2000-1-1"),
    ],
)
def test_malformed_date_bound_names_the_field(field: str, raw: str) -> None:
    with pytest.raises(InvalidDateBoundError) as exc_info:
        parse_book_list_params({field: raw})

    assert exc_info.value.code == f"INVALID_{field.upper()}"
    assert exc_info.value.field == field


def test_parse_query_date_empty_is_none() -> None:
    assert parse_query_date(None, "published_after") is None
    assert parse_query_date("", "published_after") is None
