import struct

import pytest

from kernelsim.buffer import Buffer


def test_uint32_is_little_endian():
    buffer = Buffer(4)
    buffer.add_uint32(1)
    assert buffer.getvalue() == b"\x01\x00\x00\x00"


def test_string_is_length_prefixed_and_nul_terminated():
    buffer = Buffer(4 + 3)
    buffer.add_string("hi")
    assert buffer.getvalue() == struct.pack("<I", 3) + b"hi\x00"
    assert buffer.offset == buffer.size


def test_unwritten_bytes_are_zero():
    buffer = Buffer(3)
    buffer.add_uint8(7)
    assert buffer.getvalue() == b"\x07\x00\x00"
    assert buffer.offset == 1


def test_values_are_appended_in_order():
    buffer = Buffer(5)
    buffer.add_uint8(9)
    buffer.add_uint32(0xFFFFFFFF)
    assert buffer.getvalue() == b"\x09\xff\xff\xff\xff"


def test_overflow_is_rejected_and_offset_kept():
    buffer = Buffer(2)
    buffer.add_bytes(b"a")
    with pytest.raises(OverflowError):
        buffer.add_bytes(b"bc")
    assert buffer.offset == 1
    assert buffer.getvalue() == b"a\x00"


@pytest.mark.parametrize(
    "method, value",
    [("add_uint8", 256), ("add_uint8", -1), ("add_uint32", -1), ("add_uint32", 2**32)],
)
def test_out_of_range_integers(method, value):
    buffer = Buffer(8)
    with pytest.raises(ValueError):
        getattr(buffer, method)(value)
    assert buffer.offset == 0


def test_negative_size_is_rejected():
    with pytest.raises(ValueError):
        Buffer(-1)