from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator
from untrusted.codecs.integers import Endian

class FieldKind(str, Enum):
    U8 = "u8"
    I8 = "i8"
    U16 = "u16"
    I16 = "i16"
    U32 = "u32"
    I32 = "i32"
    U64 = "u64"
    I64 = "i64"
    BYTES = "bytes"   # fixed length, see FieldSpec.length
    REST = "rest"     # everything up to the end of the record

class FieldSpec(BaseModel):
    name: str = Field(..., min_length=1)
    kind: FieldKind
    endian: Optional[Endian] = None   # overrides Layout.endian
    length: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def _length_only_for_bytes(self) -> "FieldSpec":
        if self.kind is FieldKind.BYTES and self.length is None:
            raise ValueError(f"field {self.name!r}: 'bytes' needs a length")
        if self.kind is not FieldKind.BYTES and self.length is not None:
            raise ValueError(f"field {self.name!r}: length is only valid for 'bytes'")
        return self

class Layout(BaseModel):
    """An ordered list of fields that must cover a record exactly."""
    endian: Endian = Endian.BIG
    fields: List[FieldSpec] = Field(default_factory=list)

    @field_validator("fields")
    @classmethod
    def _check_fields(cls, fields: List[FieldSpec]) -> List[FieldSpec]:
        seen = set()
        for i, f in enumerate(fields):
            if f.name in seen:
                raise ValueError(f"duplicate field name {f.name!r}")
            seen.add(f.name)
            if f.kind is FieldKind.REST and i != len(fields) - 1:
                raise ValueError(f"field {f.name!r}: 'rest' must be the last field")
        return fields

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Layout":
        # bytes, so undecodable input surfaces as a ValidationError
        return cls.model_validate_json(Path(path).read_bytes())
