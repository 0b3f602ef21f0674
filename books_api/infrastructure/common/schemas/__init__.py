"""Common API schemas."""

from books_api.infrastructure.common.schemas.error_schemas import ErrorResponse, FieldErrorSchema
from books_api.infrastructure.common.schemas.response_wrappers import (
    DataResponse,
    PaginatedResponse,
    PaginationMeta,
)

__all__ = [
    "DataResponse",
    "ErrorResponse",
    "FieldErrorSchema",
    "PaginatedResponse",
    "PaginationMeta",
]
