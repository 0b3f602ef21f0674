from typing import Annotated
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends
from starlette import status

from books_api.application.library.use_cases.author_management.author_management_use_case import (
    AuthorManagementUseCase,
)
from books_api.core import container
from books_api.domain.common import DomainError
from books_api.domain.library.entities.author import Author as DomainAuthor
from books_api.domain.library.entities.book import Book as DomainBook
from books_api.exceptions import BooksApiError, InvalidIdentifierError, OperationFailedError
from books_api.infrastructure.common.di import inject_use_case
from books_api.infrastructure.common.schemas import DataResponse
from books_api.infrastructure.library.schemas import (
    Author,
    AuthorCreate,
    AuthorUpdate,
    BookSummary,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/authors", tags=["authors"])

AuthorUseCase = Annotated[
    AuthorManagementUseCase,
    Depends(inject_use_case(container.author_management_use_case)),
]


def parse_author_id(author_id: str) -> UUID:
    try:
        return UUID(author_id)
    except ValueError:
        raise InvalidIdentifierError("id", "INVALID_AUTHOR_ID", "invalid author id") from None


def _to_book_summary(book: DomainBook) -> BookSummary:
    return BookSummary(
        id=book.id.value,
        title=book.title,
        description=book.description,
        published_at=book.published_at,
        created_at=book.created_at,
        updated_at=book.updated_at,
    )


def to_author_schema(author: DomainAuthor) -> Author:
    """Build the Author response schema; books are included only when they were loaded."""
    return Author(
        id=author.id.value,
        name=author.name,
        bio=author.bio,
        books=[_to_book_summary(book) for book in author.books]
        if author.books is not None
        else None,
        created_at=author.created_at,
        updated_at=author.updated_at,
    )


@router.get("", response_model=DataResponse[list[Author]], status_code=status.HTTP_200_OK)
def list_authors(use_case: AuthorUseCase) -> DataResponse[list[Author]]:
    """List all authors, newest first, each with a summary of its books."""
    try:
        authors = use_case.list_authors()
    except (BooksApiError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_list_authors", error=str(e), exc_info=True)
        raise OperationFailedError("AUTHOR_LIST_FAILED", "failed to fetch authors") from e

    return DataResponse[list[Author]](data=[to_author_schema(author) for author in authors])


@router.post("", response_model=DataResponse[Author], status_code=status.HTTP_201_CREATED)
def create_author(request: AuthorCreate, use_case: AuthorUseCase) -> DataResponse[Author]:
    """Create an author."""
    try:
        author = use_case.create_author(request)
    except (BooksApiError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_create_author", error=str(e), exc_info=True)
        raise OperationFailedError("AUTHOR_CREATE_FAILED", "failed to create author") from e

    return DataResponse[Author](data=to_author_schema(author))


@router.get("/{author_id}", response_model=DataResponse[Author], status_code=status.HTTP_200_OK)
def get_author(
    author_id: Annotated[UUID, Depends(parse_author_id)],
    use_case: AuthorUseCase,
) -> DataResponse[Author]:
    """
    Get an author with the author's books.

    Raises:
        InvalidIdentifierError: If the path id is not a UUID (400)
        AuthorNotFoundError: If author is not found (404)
    """
    try:
        author = use_case.get_author(author_id)
    except (BooksApiError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_fetch_author", author_id=str(author_id), error=str(e), exc_info=True)
        raise OperationFailedError("AUTHOR_FETCH_FAILED", "failed to fetch author") from e

    return DataResponse[Author](data=to_author_schema(author))


@router.patch("/{author_id}", response_model=DataResponse[Author], status_code=status.HTTP_200_OK)
def update_author(
    author_id: Annotated[UUID, Depends(parse_author_id)],
    request: AuthorUpdate,
    use_case: AuthorUseCase,
) -> DataResponse[Author]:
    """Partially update an author's name and bio."""
    try:
        author = use_case.update_author(author_id, request)
    except (BooksApiError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_update_author", author_id=str(author_id), error=str(e), exc_info=True
        )
        raise OperationFailedError("AUTHOR_UPDATE_FAILED", "failed to update author") from e

    return DataResponse[Author](data=to_author_schema(author))


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_author(
    author_id: Annotated[UUID, Depends(parse_author_id)],
    use_case: AuthorUseCase,
) -> None:
    """
    Delete an author.

    Raises:
        AuthorNotFoundError: If author is not found (404)
        AuthorHasBooksError: If the author still owns books (409)
    """
    try:
        use_case.delete_author(author_id)
    except (BooksApiError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_delete_author", author_id=str(author_id), error=str(e), exc_info=True
        )
        raise OperationFailedError("AUTHOR_DELETE_FAILED", "failed to delete author") from e
