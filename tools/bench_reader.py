#!/usr/bin/env python3
# tools/bench_reader.py
import os
import time

from untrusted.codecs.integers import INT_KINDS, Endian
from untrusted.input import Input
from untrusted.reader import EndOfInput
from untrusted.result import Result


def _timed(label: str, data: bytes, count: int, read_one) -> None:
    def read(reader):
        for _ in range(count):
            res = read_one(reader)
            if res.is_err():
                return res
        return Result.ok(count)

    t0 = time.perf_counter()
    Input(data).read_all(EndOfInput, read).unwrap()
    dt = time.perf_counter() - t0
    print(f"{label:<14} {count:>9} reads  {dt * 1e3:9.2f} ms  {dt / max(count, 1) * 1e9:8.1f} ns/read")


def main(count: int = 1_000_000):
    _timed("read_byte", os.urandom(count), count, lambda r: r.read_byte())
    for name, kind in INT_KINDS.items():
        for endian in Endian:
            data = os.urandom(count * kind.width)
            _timed(f"{name}_{endian.value[0]}e", data, count,
                   lambda r, k=kind, e=endian: k.read(r, e))


if __name__ == "__main__":
    import sys
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 1_000_000)
