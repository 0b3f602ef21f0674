import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query
from starlette import status

from books_api.application.library.book_list_params import parse_book_list_params
from books_api.application.library.use_cases.book_management.create_book_use_case import (
    CreateBookUseCase,
)
from books_api.application.library.use_cases.book_management.delete_book_use_case import (
    DeleteBookUseCase,
)
from books_api.application.library.use_cases.book_management.get_book_use_case import (
    GetBookUseCase,
)
from books_api.application.library.use_cases.book_management.update_book_use_case import (
    UpdateBookUseCase,
)
from books_api.application.library.use_cases.book_queries.list_books_use_case import (
    ListBooksUseCase,
)
from books_api.core import container
from books_api.domain.common import DomainError
from books_api.domain.library.entities.book import Book as DomainBook
from books_api.exceptions import BooksApiError, InvalidIdentifierError, OperationFailedError
from books_api.infrastructure.common.di import inject_use_case
from books_api.infrastructure.common.schemas import (
    DataResponse,
    PaginatedResponse,
    PaginationMeta,
)
from books_api.infrastructure.library.schemas import AuthorSummary, Book, BookCreate, BookUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])


def parse_book_id(book_id: str) -> UUID:
    """Parse the path identifier, rejecting anything that is not a UUID."""
    try:
        return UUID(book_id)
    except ValueError:
        raise InvalidIdentifierError("id", "INVALID_BOOK_ID", "invalid book id") from None


def to_book_schema(book: DomainBook) -> Book:
    """
    Build the Book response schema from a domain entity.

    The entity must have been loaded with its author resolved.
    """
    if book.author is None:
        raise RuntimeError(f"Book {book.id} was loaded without its author")

    return Book(
        id=book.id.value,
        title=book.title,
        author=AuthorSummary(
            id=book.author.id.value,
            name=book.author.name,
            bio=book.author.bio,
        ),
        description=book.description,
        published_at=book.published_at,
        created_at=book.created_at,
        updated_at=book.updated_at,
    )


@router.get("", response_model=PaginatedResponse[Book], status_code=status.HTTP_200_OK)
def list_books(
    use_case: ListBooksUseCase = Depends(inject_use_case(container.list_books_use_case)),
    page: Annotated[str | None, Query(description="Page number, 1-based")] = None,
    page_size: Annotated[str | None, Query(description="Items per page, at most 100")] = None,
    sort: Annotated[
        str | None,
        Query(
            description="created_at_desc, created_at_asc, title_asc, title_desc, "
            "published_at_desc or published_at_asc"
        ),
    ] = None,
    q: Annotated[str | None, Query(description="Search text for title or description")] = None,
    author_id: Annotated[str | None, Query(description="Only books by this author")] = None,
    published_after: Annotated[
        str | None, Query(description="Inclusive lower bound, YYYY-MM-DD")
    ] = None,
    published_before: Annotated[
        str | None, Query(description="Inclusive upper bound, YYYY-MM-DD")
    ] = None,
) -> PaginatedResponse[Book]:
    """
    List books with filtering, sorting and pagination.

    Query values are validated before the database is touched: an unknown sort
    key, a malformed author_id or a malformed date bound is rejected with 400.
    Out-of-range page and page_size values fall back to their defaults.

    Returns:
        PaginatedResponse with the requested page and pagination metadata

    Raises:
        OperationFailedError: If fetching books fails due to server error
    """
    params = parse_book_list_params(
        {
            "page": page,
            "page_size": page_size,
            "sort": sort,
            "q": q,
            "author_id": author_id,
            "published_after": published_after,
            "published_before": published_before,
        }
    )

    try:
        result = use_case.handle(params)
    except Exception as e:
        logger.error(f"Failed to fetch books: {e!s}", exc_info=True)
        raise OperationFailedError("BOOK_LIST_FAILED", "failed to fetch books") from e

    return PaginatedResponse[Book](
        data=[to_book_schema(book) for book in result.items],
        pagination=PaginationMeta.from_result(result),
    )


@router.post("", response_model=DataResponse[Book], status_code=status.HTTP_201_CREATED)
def create_book(
    request: BookCreate,
    use_case: CreateBookUseCase = Depends(inject_use_case(container.create_book_use_case)),
) -> DataResponse[Book]:
    """
    Create a book.

    Raises:
        AuthorReferenceError: If author_id does not reference an existing author (400)
        OperationFailedError: If creating the book fails due to server error
    """
    try:
        book = use_case.create_book(request)
    except (BooksApiError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create book: {e!s}", exc_info=True)
        raise OperationFailedError("BOOK_CREATE_FAILED", "failed to create book") from e

    return DataResponse[Book](data=to_book_schema(book))


@router.get("/{book_id}", response_model=DataResponse[Book], status_code=status.HTTP_200_OK)
def get_book(
    book_id: Annotated[UUID, Depends(parse_book_id)],
    use_case: GetBookUseCase = Depends(inject_use_case(container.get_book_use_case)),
) -> DataResponse[Book]:
    """
    Get a single book with its author.

    Raises:
        InvalidIdentifierError: If the path id is not a UUID (400)
        BookNotFoundError: If book is not found (404)
    """
    try:
        book = use_case.get_book(book_id)
    except (BooksApiError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch book {book_id}: {e!s}", exc_info=True)
        raise OperationFailedError("BOOK_FETCH_FAILED", "failed to fetch book") from e

    return DataResponse[Book](data=to_book_schema(book))


@router.patch("/{book_id}", response_model=DataResponse[Book], status_code=status.HTTP_200_OK)
def update_book(
    book_id: Annotated[UUID, Depends(parse_book_id)],
    request: Annotated[BookUpdate, Body()],
    use_case: UpdateBookUseCase = Depends(inject_use_case(container.update_book_use_case)),
) -> DataResponse[Book]:
    """
    Partially update a book.

    Only the fields present in the body are changed; ``"published_at": ""``
    clears the publication date.

    Raises:
        NoFieldsToUpdateError: If the body carries no field (400)
        BookNotFoundError: If book is not found (404)
        AuthorReferenceError: If the new author_id does not exist (400)
    """
    try:
        book = use_case.update_book(book_id, request)
    except (BooksApiError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update book {book_id}: {e!s}", exc_info=True)
        raise OperationFailedError("BOOK_UPDATE_FAILED", "failed to update book") from e

    return DataResponse[Book](data=to_book_schema(book))


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: Annotated[UUID, Depends(parse_book_id)],
    use_case: DeleteBookUseCase = Depends(inject_use_case(container.delete_book_use_case)),
) -> None:
    """
    Delete a book (hard delete).

    Raises:
        BookNotFoundError: If no book was deleted (404)
    """
    try:
        use_case.delete_book(book_id)
    except (BooksApiError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete book {book_id}: {e!s}", exc_info=True)
        raise OperationFailedError("BOOK_DELETE_FAILED", "failed to delete book") from e
