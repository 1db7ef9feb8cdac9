"""Minimal UTF-8 decoder for password input.

Only the 1-3 byte forms are decoded: the highest code point with a legacy
mapping is U+2122. Overlong forms and surrogates are not rejected, matching
what Acrobat-era readers accepted.
"""
from __future__ import annotations

from typing import Iterator, Union

from pdfdoc_password.errors import InvalidEncodingError

BytesLike = Union[bytes, bytearray, memoryview]


def resolve_length(data: BytesLike, length: int | None) -> int:
    """Return the number of bytes of ``data`` to convert."""

    available = len(data)
    if length is None:
        return available
    if length < 0 or length > available:
        raise ValueError(f"length must be between 0 and {available}, got {length}")
    return length


def _decode(buf: memoryview, end: int) -> Iterator[tuple[int, int]]:
    pos = 0
    while pos < end:
        lead = buf[pos]
        if lead == 0:
            # NUL terminates the password like a C string.
            return
        if lead < 0x80:
            yield pos, lead
            pos += 1
            continue

        if lead & 0xE0 == 0xC0:
            width, value = 2, lead & 0x1F
        elif lead & 0xF0 == 0xE0:
            width, value = 3, lead & 0x0F
        else:
            raise InvalidEncodingError(pos, "invalid UTF-8 lead byte")

        if pos + width > end:
            raise InvalidEncodingError(pos, "truncated UTF-8 sequence")

        for index in range(pos + 1, pos + width):
            follow = buf[index]
            if follow & 0xC0 != 0x80:
                raise InvalidEncodingError(pos, "invalid UTF-8 continuation byte")
            value = (value << 6) | (follow & 0x3F)

        yield pos, value
        pos += width


def iter_code_points(data: BytesLike, length: int | None = None) -> Iterator[tuple[int, int]]:
    """Yield ``(byte_offset, code_point)`` pairs from UTF-8 ``data``.

    Decoding is lazy and stops at the first NUL byte or after ``length``
    bytes. A malformed or truncated sequence raises
    :exc:`~pdfdoc_password.errors.InvalidEncodingError` when it is reached;
    the code points before it have already been yielded.
    """

    buf = memoryview(data).cast("B")
    end = resolve_length(buf, length)
    return _decode(buf, end)


__all__ = ["BytesLike", "iter_code_points", "resolve_length"]
