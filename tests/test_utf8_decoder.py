"""Tests for the password UTF-8 decoder."""
from __future__ import annotations

import pytest

from pdfdoc_password.codec.utf8 import iter_code_points
from pdfdoc_password.errors import InvalidEncodingError


def test_ascii_bytes_decode_one_per_byte() -> None:
    assert list(iter_code_points(b"abc")) == [(0, 0x61), (1, 0x62), (2, 0x63)]


def test_mixed_widths_report_lead_offsets() -> None:
    data = "aé™b".encode("utf-8")
    assert list(iter_code_points(data)) == [(0, 0x61), (1, 0xE9), (3, 0x2122), (6, 0x62)]


def test_accepts_bytearray_and_memoryview() -> None:
    data = "é".encode("utf-8")
    assert list(iter_code_points(bytearray(data))) == [(0, 0xE9)]
    assert list(iter_code_points(memoryview(data))) == [(0, 0xE9)]


def test_nul_byte_ends_password() -> None:
    # 0xFF after the terminator would be malformed if it were ever read.
    assert list(iter_code_points(b"ab\x00\xff")) == [(0, 0x61), (1, 0x62)]


def test_leading_nul_yields_nothing() -> None:
    assert list(iter_code_points(b"\x00abc")) == []


def test_length_limits_decoding() -> None:
    assert [cp for _offset, cp in iter_code_points(b"abcdef", 3)] == [0x61, 0x62, 0x63]
    assert list(iter_code_points(b"abcdef", 0)) == []


def test_length_splitting_a_sequence_is_truncation() -> None:
    decoded = iter_code_points("aé".encode("utf-8"), 2)
    assert next(decoded) == (0, 0x61)
    with pytest.raises(InvalidEncodingError) as excinfo:
        next(decoded)
    assert excinfo.value.offset == 1
    assert "truncated" in str(excinfo.value)


@pytest.mark.parametrize("length", [-1, 4])
def test_length_out_of_range_rejected_eagerly(length: int) -> None:
    with pytest.raises(ValueError):
        iter_code_points(b"abc", length)


def test_trailing_lone_lead_byte_is_truncated() -> None:
    decoded = iter_code_points(b"abc\xc3")
    with pytest.raises(InvalidEncodingError) as excinfo:
        list(decoded)
    assert excinfo.value.offset == 3


@pytest.mark.parametrize(
    ("data", "offset"),
    [
        (b"\x80", 0),  # stray continuation byte
        (b"a\xbf", 1),
        (b"\xf0\x9f\x98\x80", 0),  # four-byte form
        (b"\xf8\x88\x80\x80\x80", 0),
        (b"\xff", 0),
        (b"\xc3\x41", 0),  # continuation missing
        (b"x\xe2\x84\x41", 1),
        (b"\xe2\x84", 0),
        (b"\xe2", 0),
    ],
)
def test_malformed_sequences_raise(data: bytes, offset: int) -> None:
    with pytest.raises(InvalidEncodingError) as excinfo:
        list(iter_code_points(data))
    assert excinfo.value.offset == offset


def test_decoding_is_lazy() -> None:
    decoded = iter_code_points(b"a\xff")
    assert next(decoded) == (0, 0x61)
    with pytest.raises(InvalidEncodingError):
        next(decoded)


def test_overlong_forms_are_not_rejected() -> None:
    assert list(iter_code_points(b"\xc1\x81")) == [(0, 0x41)]
    assert list(iter_code_points(b"\xe0\x81\x81")) == [(0, 0x41)]


def test_surrogates_decode_as_code_points() -> None:
    assert list(iter_code_points(b"\xed\xa0\x80")) == [(0, 0xD800)]


def test_fresh_call_starts_over() -> None:
    data = b"xy"
    first = iter_code_points(data)
    next(first)
    assert list(iter_code_points(data)) == [(0, 0x78), (1, 0x79)]
