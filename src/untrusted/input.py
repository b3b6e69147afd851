from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional, TypeVar, Union

from .no_panic import BytesLike, Slice
from .result import Result

if TYPE_CHECKING:
    from .reader import Reader

logger = logging.getLogger(__name__)

R = TypeVar("R")
E = TypeVar("E")


class Input:
    """Immutable view over untrusted bytes.

    No method of ``Input`` raises for any content or length; out-of-range
    requests return ``None``. Operations that narrow the view return new
    ``Input`` values over the same buffer.
    """

    __slots__ = ("_slice",)

    def __init__(self, data: Union[BytesLike, Slice] = b""):
        self._slice = data if isinstance(data, Slice) else Slice(data)

    @classmethod
    def empty(cls) -> "Input":
        return _EMPTY

    def first(self) -> Optional[int]:
        """Returns the first byte of the input, or ``None`` if it is empty."""
        return self._slice.get(0)

    def is_empty(self) -> bool:
        return self._slice.is_empty()

    def __len__(self) -> int:
        return len(self._slice)

    def read_all(
        self,
        incomplete_read: E,
        read: Callable[["Reader"], Result[R, E]],
    ) -> Result[R, E]:
        """
        Calls ``read`` with a fresh ``Reader`` over this input and checks that
        it consumed every byte.

        A failed ``read`` is returned unchanged. A successful ``read`` that
        left bytes behind is replaced by ``Result.err(incomplete_read)``.
        """
        from .reader import Reader

        reader = Reader(self)
        result = read(reader)
        if result.is_err():
            return result
        if not reader.at_end():
            logger.debug(
                "read_all rejected input: %d of %d bytes left unconsumed",
                reader.remaining(), len(self),
            )
            return Result.err(incomplete_read)
        return result

    def split_first(self) -> Optional[tuple[int, "Input"]]:
        """Returns the first byte and the rest, or ``None`` if empty."""
        head = self._slice.get(0)
        tail = self._slice.subslice(1, len(self._slice))
        if head is None or tail is None:
            return None
        return head, Input(tail)

    def split_at(self, i: int) -> Optional[tuple["Input", "Input"]]:
        """Splits at position ``i``, or returns ``None`` if ``i`` is out of bounds."""
        before = self._slice.subslice(0, i)
        after = self._slice.subslice(i, len(self._slice))
        if before is None or after is None:
            return None
        return Input(before), Input(after)

    def as_slice_less_safe(self) -> memoryview:
        """Access the raw bytes for code outside the Input/Reader framework."""
        return self._slice.as_slice_less_safe()

    def __bytes__(self) -> bytes:
        return self._slice.as_slice_less_safe().tobytes()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Input):
            return self._slice == other._slice
        if isinstance(other, (bytes, bytearray, memoryview)):
            # compare bytes, not items of a wider format such as array('H')
            return self.as_slice_less_safe() == memoryview(other).tobytes()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(bytes(self))

    def __repr__(self) -> str:
        return repr(self._slice)


_EMPTY = Input(b"")
