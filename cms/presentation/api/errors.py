"""Translate domain failures carried in a Result into HTTP errors."""

from typing import TypeVar

from fastapi import HTTPException, status

from cms.domain.exceptions import (
    DomainError,
    EntityNotFoundError,
    IllegalTransitionError,
    InvalidInputError,
    InvalidOperationError,
    PermissionDeniedError,
    StorageError,
)
from cms.domain.result import Result

T = TypeVar("T")

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (InvalidInputError, 422),
    (IllegalTransitionError, status.HTTP_409_CONFLICT),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (InvalidOperationError, status.HTTP_409_CONFLICT),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def status_for(error: DomainError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def unwrap_or_raise(result: Result[T]) -> T:
    """Return the result value or raise the matching HTTPException."""
    if result.ok:
        return result.value  # type: ignore[return-value]
    error = result.error
    raise HTTPException(
        status_code=status_for(error),
        detail={"code": error.code, "message": str(error)},
    )
