from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from typing import Optional, Sequence, Union

from pydantic import ValidationError

from .input import Input
from .result import ParseError

BytesLike = Union[str, Path, bytes, bytearray, memoryview]

logger = logging.getLogger(__name__)


def _load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    return Path(str(inp)).read_bytes()


def _select(data: Input, offset: int, length: Optional[int]) -> Input:
    split = data.split_at(offset)
    if split is None:
        raise ParseError(f"offset {offset} is past the end of {len(data)} bytes")
    rest = split[1]
    if length is None:
        return rest
    split = rest.split_at(length)
    if split is None:
        raise ParseError(f"length {length} at offset {offset} exceeds {len(data)} bytes")
    return split[0]


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def cmd_dump(args) -> int:
    data = Input(_load_bytes(args.input))
    selected = _select(data, args.offset, args.length)
    print(f"{len(selected)} bytes")
    print(repr(selected))
    return 0


def cmd_decode(args) -> int:
    from .codecs.layout import decode_record
    from .models.layout import Layout

    layout = Layout.from_file(args.layout)
    data = Input(_load_bytes(args.input))
    logger.debug("decoding %d bytes with %d field(s)", len(data), len(layout.fields))
    record = decode_record(data, layout).unwrap()
    print(record.model_dump_json(indent=None if args.compact else 2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="untrusted", description="Inspect untrusted binary input")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("dump", help="print bytes with non-printable bytes escaped")
    sp.add_argument("input", help="Path to the input file")
    sp.add_argument("--offset", type=_non_negative, default=0, help="Skip this many bytes first")
    sp.add_argument("--length", type=_non_negative, default=None, help="Print at most this many bytes")
    sp.set_defaults(func=cmd_dump)

    sp = sub.add_parser("decode", help="decode a record with a JSON field layout")
    sp.add_argument("input", help="Path to the input file")
    sp.add_argument("--layout", required=True, help="Path to the layout JSON file")
    sp.add_argument("--compact", action="store_true", help="Print JSON on one line")
    sp.set_defaults(func=cmd_decode)

    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return ns.func(ns)
    except (ParseError, ValidationError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
