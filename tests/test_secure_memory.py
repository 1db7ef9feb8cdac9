"""Tests for secure password buffers."""
from __future__ import annotations

import pytest

from pdfdoc_password.secure_memory import SecureBuffer, mlock_available, secure_zeroize


def test_secure_buffer_zeroes_on_close() -> None:
    buf = SecureBuffer(8)
    with buf as data:
        data[:] = b"\x92\xa3pass\x9c!"
        assert bytes(buf) == b"\x92\xa3pass\x9c!"
    assert buf.buffer == bytearray(8)
    assert buf.closed
    assert not buf.locked


def test_secure_buffer_close_twice() -> None:
    buf = SecureBuffer(4)
    buf.close()
    buf.close()
    assert buf.closed


def test_secure_buffer_len_and_empty() -> None:
    assert len(SecureBuffer(16)) == 16
    with SecureBuffer(0) as data:
        assert data == bytearray()


def test_secure_buffer_rejects_negative_size() -> None:
    with pytest.raises(ValueError):
        SecureBuffer(-1)


def test_secure_zeroize_bytearray_and_memoryview() -> None:
    raw = bytearray(b"converted password")
    secure_zeroize(raw)
    assert raw == bytearray(len(raw))

    backing = bytearray(b"\xff" * 6)
    secure_zeroize(memoryview(backing))
    assert backing == bytearray(6)


def test_secure_zeroize_none_and_empty() -> None:
    secure_zeroize(None)
    secure_zeroize(bytearray())


def test_mlock_available_returns_bool() -> None:
    assert isinstance(mlock_available(), bool)


def test_secure_buffer_view_cannot_be_resized() -> None:
    buf = SecureBuffer(4)
    with buf as data:
        with pytest.raises(ValueError):
            data[:] = b"longer than four"
        with pytest.raises(BufferError):
            buf.buffer.extend(b"xx")
        assert len(buf) == 4
    assert buf.buffer == bytearray(4)
