import uuid

import pytest

from books_api.application.library.use_cases.author_management.author_management_use_case import (
    AuthorManagementUseCase,
)
from books_api.domain.library.entities.book import Book
from books_api.exceptions import AuthorHasBooksError, AuthorNotFoundError, NoFieldsToUpdateError
from books_api.infrastructure.library.repositories import (
    InMemoryAuthorRepository,
    InMemoryBookRepository,
    InMemoryLibraryStore,
)
from books_api.infrastructure.library.schemas import AuthorCreate, AuthorUpdate


@pytest.fixture
def store() -> InMemoryLibraryStore:
    return InMemoryLibraryStore()


@pytest.fixture
def use_case(store: InMemoryLibraryStore) -> AuthorManagementUseCase:
    return AuthorManagementUseCase(InMemoryAuthorRepository(store))


def test_create_and_get_author(use_case: AuthorManagementUseCase) -> None:
    created = use_case.create_author(AuthorCreate(name="Martin Fowler", bio="Refactoring"))

    fetched = use_case.get_author(created.id.value)

    assert fetched.name == "Martin Fowler"
    assert fetched.bio == "Refactoring"
    assert fetched.books == []


def test_get_missing_author(use_case: AuthorManagementUseCase) -> None:
    with pytest.raises(AuthorNotFoundError) as exc_info:
        use_case.get_author(uuid.uuid4())

    assert exc_info.value.status_code == 404


def test_list_authors_includes_books(
    use_case: AuthorManagementUseCase, store: InMemoryLibraryStore
) -> None:
    author = use_case.create_author(AuthorCreate(name="Martin Fowler"))
    InMemoryBookRepository(store).create(Book.create(author_id=author.id, title="Refactoring"))

    authors = use_case.list_authors()

    assert len(authors) == 1
    assert authors[0].books is not None
    assert [book.title for book in authors[0].books] == ["Refactoring"]


def test_update_author(use_case: AuthorManagementUseCase) -> None:
    author = use_case.create_author(AuthorCreate(name="Martin Fowler", bio="old"))

    updated = use_case.update_author(author.id.value, AuthorUpdate.model_validate({"bio": None}))

    assert updated.name == "Martin Fowler"
    assert updated.bio == ""


def test_update_without_fields(use_case: AuthorManagementUseCase) -> None:
    author = use_case.create_author(AuthorCreate(name="Martin Fowler"))

    with pytest.raises(NoFieldsToUpdateError):
        use_case.update_author(author.id.value, AuthorUpdate.model_validate({}))


def test_delete_author_with_books_is_refused(
    use_case: AuthorManagementUseCase, store: InMemoryLibraryStore
) -> None:
    author = use_case.create_author(AuthorCreate(name="Martin Fowler"))
    InMemoryBookRepository(store).create(Book.create(author_id=author.id, title="Refactoring"))

    with pytest.raises(AuthorHasBooksError) as exc_info:
        use_case.delete_author(author.id.value)

    assert exc_info.value.status_code == 409


def test_delete_author(use_case: AuthorManagementUseCase) -> None:
    author = use_case.create_author(AuthorCreate(name="Martin Fowler"))

    use_case.delete_author(author.id.value)

    with pytest.raises(AuthorNotFoundError):
        use_case.delete_author(author.id.value)
