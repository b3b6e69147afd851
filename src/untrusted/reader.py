from __future__ import annotations

from enum import Enum
from typing import Callable, TypeVar

from .input import Input
from .result import Result

R = TypeVar("R")
E = TypeVar("E")


class ReadError(Enum):
    """Failures reported by ``Reader``."""

    END_OF_INPUT = "end of input"


# The only read failure: fewer bytes remained than the read required.
EndOfInput = ReadError.END_OF_INPUT


class Reader:
    """
    A read-only, forward-only cursor into the data in an ``Input``.

    Reading through a ``Reader`` makes sure no byte is processed twice, and
    ``Input.read_all`` makes sure none is left unprocessed. A failed read
    returns ``EndOfInput`` and leaves the cursor where it was.
    """

    __slots__ = ("_input",)

    def __init__(self, data: Input):
        """Prefer ``Input.read_all`` to constructing a Reader directly."""
        self._input = data

    def at_end(self) -> bool:
        return self._input.is_empty()

    def remaining(self) -> int:
        return len(self._input)

    def peek(self, b: int) -> bool:
        """True if the next byte exists and equals ``b``; consumes nothing."""
        return self._input.first() == b

    def read_byte(self) -> Result[int, ReadError]:
        split = self._input.split_first()
        if split is None:
            return Result.err(EndOfInput)
        head, self._input = split
        return Result.ok(head)

    def read_bytes(self, num_bytes: int) -> Result[Input, ReadError]:
        """
        Consumes ``num_bytes`` and returns them as an ``Input``, or fails with
        ``EndOfInput`` when fewer remain. Reading zero bytes always succeeds.
        """
        split = self._input.split_at(num_bytes)
        if split is None:
            return Result.err(EndOfInput)
        before, self._input = split
        return Result.ok(before)

    def read_bytes_to_end(self) -> Input:
        rest, self._input = self._input, Input.empty()
        return rest

    def read_partial(
        self, read: Callable[["Reader"], Result[R, E]]
    ) -> Result[tuple[Input, R], E]:
        """
        Calls ``read`` with this reader. On success returns the bytes ``read``
        consumed paired with its value; a failure is returned unchanged.
        """
        original = self._input
        result = read(self)
        if result.is_err():
            return Result.err(result.error)
        # Remaining input never grows; clamp anyway so the split cannot fail.
        amount = min(max(len(original) - len(self._input), 0), len(original))
        consumed, _ = original.split_at(amount) or (Input.empty(), original)
        return Result.ok((consumed, result.value))

    def skip(self, num_bytes: int) -> Result[None, ReadError]:
        return self.read_bytes(num_bytes).map(lambda _: None)

    def skip_to_end(self) -> None:
        self.read_bytes_to_end()

    def __repr__(self) -> str:
        return f"Reader({self._input!r})"
