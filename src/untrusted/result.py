"""Result values used in place of exceptions for read failures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar


T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class ParseError(ValueError):
    """Raised when a caller unwraps a failed result."""

    def __init__(self, error: object):
        super().__init__(f"parse failed: {_describe(error)}")
        self.error = error


def _describe(error: object) -> str:
    # Enum members carry their message as the value
    return str(getattr(error, "value", error))


@dataclass(frozen=True, slots=True)
class Result(Generic[T, E]):
    """Discriminated union capturing either a success value or an error.

    ``succeeded`` tags the variant, so any value, ``None`` included, may be
    used as an error.
    """

    value: Optional[T] = None
    error: Optional[E] = None
    succeeded: bool = True

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(value=value)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(error=error, succeeded=False)

    def is_ok(self) -> bool:
        return self.succeeded

    def is_err(self) -> bool:
        return not self.succeeded

    def map(self, fn: Callable[[T], U]) -> "Result[U, E]":
        if not self.succeeded:
            return Result.err(self.error)  # type: ignore[arg-type]
        return Result.ok(fn(self.value))  # type: ignore[arg-type]

    def and_then(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        if not self.succeeded:
            return Result.err(self.error)  # type: ignore[arg-type]
        return fn(self.value)  # type: ignore[arg-type]

    def unwrap(self) -> T:
        if not self.succeeded:
            raise ParseError(self.error)
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        if not self.succeeded:
            return default
        return self.value  # type: ignore[return-value]


__all__ = ["ParseError", "Result"]
