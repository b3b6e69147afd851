from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from untrusted.reader import Reader, ReadError
from untrusted.result import Result


class Endian(str, Enum):
    BIG = "big"
    LITTLE = "little"

    @property
    def prefix(self) -> str:
        return ">" if self is Endian.BIG else "<"


@lru_cache(maxsize=None)
def _codec(code: str, endian: Endian) -> struct.Struct:
    return struct.Struct(endian.prefix + code)


@dataclass(frozen=True)
class IntKind:
    """A fixed-width integer type, named after its struct format code."""

    name: str
    code: str

    @property
    def width(self) -> int:
        return struct.calcsize("<" + self.code)

    @property
    def signed(self) -> bool:
        return self.code.islower()

    @property
    def min(self) -> int:
        return -(1 << (8 * self.width - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        bits = 8 * self.width - (1 if self.signed else 0)
        return (1 << bits) - 1

    def read(self, reader: Reader, endian: Endian = Endian.BIG) -> Result[int, ReadError]:
        codec = _codec(self.code, endian)
        return reader.read_bytes(codec.size).map(
            lambda raw: codec.unpack(raw.as_slice_less_safe())[0]
        )


U8 = IntKind("u8", "B")
I8 = IntKind("i8", "b")
U16 = IntKind("u16", "H")
I16 = IntKind("i16", "h")
U32 = IntKind("u32", "I")
I32 = IntKind("i32", "i")
U64 = IntKind("u64", "Q")
I64 = IntKind("i64", "q")

INT_KINDS: dict[str, IntKind] = {k.name: k for k in (U8, I8, U16, I16, U32, I32, U64, I64)}


# Named readers
def read_u8(r: Reader) -> Result[int, ReadError]:      return U8.read(r)
def read_i8(r: Reader) -> Result[int, ReadError]:      return I8.read(r)
def read_u16_be(r: Reader) -> Result[int, ReadError]:  return U16.read(r, Endian.BIG)
def read_u16_le(r: Reader) -> Result[int, ReadError]:  return U16.read(r, Endian.LITTLE)
def read_i16_be(r: Reader) -> Result[int, ReadError]:  return I16.read(r, Endian.BIG)
def read_i16_le(r: Reader) -> Result[int, ReadError]:  return I16.read(r, Endian.LITTLE)
def read_u32_be(r: Reader) -> Result[int, ReadError]:  return U32.read(r, Endian.BIG)
def read_u32_le(r: Reader) -> Result[int, ReadError]:  return U32.read(r, Endian.LITTLE)
def read_i32_be(r: Reader) -> Result[int, ReadError]:  return I32.read(r, Endian.BIG)
def read_i32_le(r: Reader) -> Result[int, ReadError]:  return I32.read(r, Endian.LITTLE)
def read_u64_be(r: Reader) -> Result[int, ReadError]:  return U64.read(r, Endian.BIG)
def read_u64_le(r: Reader) -> Result[int, ReadError]:  return U64.read(r, Endian.LITTLE)
def read_i64_be(r: Reader) -> Result[int, ReadError]:  return I64.read(r, Endian.BIG)
def read_i64_le(r: Reader) -> Result[int, ReadError]:  return I64.read(r, Endian.LITTLE)
