from __future__ import annotations
from pydantic import BaseModel, Field
from typing import List
from .layout import FieldKind

class DecodedField(BaseModel):
    name: str
    kind: FieldKind
    offset: int = Field(..., ge=0)
    length: int = Field(..., ge=0)
    value: int | None = None   # None for bytes/rest fields
    raw: str                   # escaped rendering of the consumed bytes

class DecodedRecord(BaseModel):
    length: int = Field(..., ge=0)
    fields: List[DecodedField] = Field(default_factory=list)

    def get(self, name: str) -> DecodedField | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None
