"""
Result type returned by application handlers.

A Result is either a success carrying a value or a failure carrying
the domain exception that stopped the operation.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from core.domain.exceptions import DomainException
from core.domain.value_objects import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Tagged union of ``Ok(value)`` and ``Err(error)``."""

    value: Optional[T] = None
    error: Optional[DomainException] = None

    def __post_init__(self):
        """Validate that exactly one side is set."""
        if (self.value is None) == (self.error is None):
            raise ValueError("Result must carry either a value or an error")

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: DomainException) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Return the error kind, or None on success."""
        return self.error.kind if self.error else None

    def unwrap(self) -> T:
        """
        Return the value, raising the carried error on failure.

        Raises:
            DomainException: The error this result carries
        """
        if self.error is not None:
            raise self.error
        return self.value
