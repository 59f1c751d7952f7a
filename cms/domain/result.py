"""Success/failure container returned by every domain and repository operation."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from cms.domain.exceptions import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation: either a value or a ``DomainError``.

    Failures are carried, not raised, so callers short-circuit with
    ``if not result.ok: return result``.
    """

    value: T | None = None
    error: DomainError | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
