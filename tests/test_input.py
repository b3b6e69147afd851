from array import array

import pytest
from hypothesis import given
from hypothesis import strategies as st

from untrusted.input import Input
from untrusted.reader import EndOfInput, Reader
from untrusted.result import Result


def test_input_from():
    Input(b"foo")
    Input(bytearray(b"foo"))
    Input(memoryview(b"foo"))
    Input(array("B", [1, 2, 3]))


def test_input_from_rejects_non_bytes():
    with pytest.raises(TypeError):
        Input("foo")  # type: ignore[arg-type]


def test_input_is_empty():
    assert Input(b"").is_empty()
    assert not Input(b"foo").is_empty()


def test_input_len():
    assert len(Input(b"foo")) == 3


def test_empty_constant():
    assert Input.empty() is Input.empty()
    assert Input.empty().is_empty()
    assert Input.empty() == Input(b"")


def test_first():
    assert Input(b"foo").first() == ord("f")
    assert Input.empty().first() is None


def test_input_read_all():
    def read(r: Reader):
        assert r.read_byte() == Result.ok(ord("f"))
        assert r.read_byte() == Result.ok(ord("o"))
        assert r.read_byte() == Result.ok(ord("o"))
        assert r.at_end()
        return Result.ok(None)

    assert Input(b"foo").read_all(EndOfInput, read) == Result.ok(None)


def test_input_read_all_unconsumed():
    def read(r: Reader):
        assert r.read_byte() == Result.ok(ord("f"))
        assert not r.at_end()
        return Result.ok("ignored")

    assert Input(b"foo").read_all(EndOfInput, read) == Result.err(EndOfInput)


def test_read_all_incomplete_read_is_caller_chosen():
    res = Input(b"foo").read_all("trailing", lambda r: r.read_byte())
    assert res == Result.err("trailing")


def test_read_all_propagates_read_failure_unchanged():
    res = Input(b"foo").read_all("trailing", lambda r: r.read_bytes(4))
    assert res == Result.err(EndOfInput)

    res = Input(b"foo").read_all("trailing", lambda r: Result.err("bad tag"))
    assert res == Result.err("bad tag")


def test_reader_after_failed_read_still_usable():
    def read(r: Reader):
        assert r.read_bytes(1) == Result.err(EndOfInput)
        return Result.ok(r.read_bytes_to_end())

    res = Input(b"").read_all(EndOfInput, read)
    assert res.unwrap() == b""


def test_input_as_slice_less_safe():
    data = b"foo"
    assert Input(data).as_slice_less_safe() == data
    assert bytes(Input(data)) == data


def test_equality_is_by_content():
    a = Input(b"foo")
    b = Input(bytearray(b"foo"))
    assert a == b
    assert a == b"foo"
    assert b"foo" == a
    assert a != Input(b"fo")
    assert hash(a) == hash(b"foo")
    assert len({a, b}) == 1


def test_split_first():
    head, tail = Input(b"foo").split_first()
    assert head == ord("f") and tail == b"oo"
    assert Input.empty().split_first() is None


def test_split_at_edges():
    data = Input(b"foo")
    before, after = data.split_at(0)
    assert before.is_empty() and after == b"foo"
    before, after = data.split_at(3)
    assert before == b"foo" and after.is_empty()
    assert data.split_at(-1) is None


@given(data=st.binary(max_size=256), extra=st.integers(min_value=1, max_value=2**70))
def test_split_at_past_end_is_absent(data, extra):
    assert Input(data).split_at(len(data) + extra) is None


@given(data=st.binary(max_size=256), i=st.integers(min_value=0, max_value=256))
def test_split_at_within_bounds(data, i):
    split = Input(data).split_at(i)
    if i > len(data):
        assert split is None
    else:
        before, after = split
        assert before == data[:i] and after == data[i:]


def test_inputs_are_immutable():
    data = Input(b"foo")
    data.split_at(1)
    data.split_first()
    assert data == b"foo"
    with pytest.raises(AttributeError):
        data.extra = 1  # type: ignore[attr-defined]


def test_read_all_accepts_none_as_incomplete_read():
    res = Input(b"ab").read_all(None, lambda r: r.read_byte())
    assert res.is_err()
    assert res == Result.err(None)


def test_equality_with_wider_memoryview_format():
    wide = array("H", [0x0102])
    assert Input(bytes(memoryview(wide).cast("B"))) == memoryview(wide)
    assert Input(wide) == memoryview(wide)
    assert Input(b"\x00\x00") != memoryview(wide)
