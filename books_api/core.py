from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from books_api.application.library.use_cases.author_management.author_management_use_case import (
    AuthorManagementUseCase,
)
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
from books_api.infrastructure.library.repositories import AuthorRepository, BookRepository


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    book_repository = providers.Factory(BookRepository, db=db)
    author_repository = providers.Factory(AuthorRepository, db=db)

    # Library module, application use cases
    list_books_use_case = providers.Factory(ListBooksUseCase, book_repository=book_repository)
    get_book_use_case = providers.Factory(GetBookUseCase, book_repository=book_repository)
    create_book_use_case = providers.Factory(
        CreateBookUseCase,
        book_repository=book_repository,
        author_repository=author_repository,
    )
    update_book_use_case = providers.Factory(
        UpdateBookUseCase,
        book_repository=book_repository,
        author_repository=author_repository,
    )
    delete_book_use_case = providers.Factory(DeleteBookUseCase, book_repository=book_repository)

    author_management_use_case = providers.Factory(
        AuthorManagementUseCase,
        author_repository=author_repository,
    )


# Initialize container
container = Container()
