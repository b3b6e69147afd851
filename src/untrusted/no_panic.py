from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _escape(b: int) -> str:
    if b == 0x0A:
        return "\\n"
    if b == 0x0D:
        return "\\r"
    if b == 0x09:
        return "\\t"
    if b == 0x5C or b == 0x22:
        return "\\" + chr(b)
    if b == 0x00:
        return "\\0"
    # ASCII printable
    if 0x20 <= b < 0x7F:
        return chr(b)
    return f"\\x{b:02x}"


_ESCAPES = tuple(_escape(b) for b in range(0x100))


def render(data: BytesLike) -> str:
    """Render bytes as a quoted byte string, keeping printable ASCII readable.

    Unlike ``repr(bytes)`` the quote is always ``"`` and the zero byte is
    written ``\\0``, so the output is stable across inputs.
    """
    return 'b"' + "".join(_ESCAPES[b] for b in memoryview(data).cast("B")) + '"'


class Slice:
    """Read-only view over a byte region whose accessors never raise.

    The view holds a memoryview of the caller's buffer and never copies it.
    The buffer must not be modified in place while any view over it exists;
    a ``bytearray`` cannot be resized while viewed.
    """

    __slots__ = ("_bytes",)

    def __init__(self, data: BytesLike = b""):
        view = memoryview(data)
        if view.format != "B" or view.ndim != 1:
            view = view.cast("B")
        self._bytes = view.toreadonly()

    def get(self, i: int) -> Optional[int]:
        if 0 <= i < len(self._bytes):
            return self._bytes[i]
        return None

    def subslice(self, start: int, stop: int) -> Optional["Slice"]:
        if not (0 <= start <= stop <= len(self._bytes)):
            return None
        return Slice(self._bytes[start:stop])

    def is_empty(self) -> bool:
        return len(self._bytes) == 0

    def __len__(self) -> int:
        return len(self._bytes)

    def as_slice_less_safe(self) -> memoryview:
        return self._bytes

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Slice):
            return self._bytes == other._bytes
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._bytes.tobytes())

    def __repr__(self) -> str:
        return render(self._bytes)
