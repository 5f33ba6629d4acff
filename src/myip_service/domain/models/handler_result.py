"""Tagged result returned by application services."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from myip_service.domain.models.error_details import ErrorDetails

T = TypeVar("T")


@dataclass(frozen=True)
class HandlerResult(Generic[T]):
    """Either a value or an error, never both."""

    value: T | None = None
    error: ErrorDetails | None = None

    @classmethod
    def ok(cls, value: T) -> "HandlerResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: ErrorDetails) -> "HandlerResult[T]":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising if this result is an error."""
        if self.error is not None:
            raise ValueError(f"Cannot unwrap failed result: {self.error.kind}")
        return self.value  # type: ignore[return-value]
