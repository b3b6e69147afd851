from __future__ import annotations

import logging
from enum import Enum
from functools import partial
from typing import Optional, Union

from untrusted.codecs.integers import INT_KINDS, Endian
from untrusted.input import Input
from untrusted.models.layout import FieldKind, FieldSpec, Layout
from untrusted.models.record import DecodedField, DecodedRecord
from untrusted.reader import Reader, ReadError
from untrusted.result import Result

logger = logging.getLogger(__name__)


class LayoutError(Enum):
    TRAILING_DATA = "trailing data after the last field"


DecodeError = Union[ReadError, LayoutError]


def _read_field(reader: Reader, spec: FieldSpec, endian: Endian) -> Result[Optional[int], ReadError]:
    if spec.kind is FieldKind.BYTES:
        return reader.skip(spec.length or 0)
    if spec.kind is FieldKind.REST:
        reader.skip_to_end()
        return Result.ok(None)
    return INT_KINDS[spec.kind.value].read(reader, spec.endian or endian)


def _read_fields(reader: Reader, layout: Layout) -> Result[DecodedRecord, ReadError]:
    fields = []
    offset = 0
    for spec in layout.fields:
        res = reader.read_partial(partial(_read_field, spec=spec, endian=layout.endian))
        if res.is_err():
            logger.debug("field %s at offset %d: %s", spec.name, offset, res.error.value)
            return Result.err(res.error)
        raw, value = res.value
        fields.append(DecodedField(
            name=spec.name, kind=spec.kind, offset=offset,
            length=len(raw), value=value, raw=repr(raw),
        ))
        logger.debug("field %s at offset %d: %d byte(s)", spec.name, offset, len(raw))
        offset += len(raw)
    return Result.ok(DecodedRecord(length=offset, fields=fields))


def decode_record(data: Input, layout: Layout) -> Result[DecodedRecord, DecodeError]:
    """
    Decode ``data`` field by field according to ``layout``.

    Fails with ``EndOfInput`` when a field runs past the end of the data and
    with ``LayoutError.TRAILING_DATA`` when bytes remain after the last field.
    """
    return data.read_all(LayoutError.TRAILING_DATA, partial(_read_fields, layout=layout))
