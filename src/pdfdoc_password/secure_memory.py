"""Locked, self-clearing buffers for converted passwords.

A converted password is key material for the legacy PDF key derivation, so
it is kept in a :class:`SecureBuffer`: the memory is ``mlock``-ed where the
platform allows it and overwritten with zeros when the buffer is closed.
"""
from __future__ import annotations

import ctypes
import ctypes.util
import logging
import platform

logger = logging.getLogger(__name__)

_libc: ctypes.CDLL | None = None

if platform.system() != "Windows":
    try:
        _libc_name = ctypes.util.find_library("c")
        if _libc_name:
            _libc = ctypes.CDLL(_libc_name, use_errno=True)
    except OSError:
        _libc = None


def mlock_available() -> bool:
    """Return True if mlock can be attempted on this platform."""
    return _libc is not None


def _address(data: bytearray | memoryview) -> int:
    return ctypes.addressof((ctypes.c_char * len(data)).from_buffer(data))


class SecureBuffer:
    """Fixed-size byte buffer that is zeroed (and unlocked) on close.

    Sized once from a capacity query and then filled in place::

        size = required_length(data, Mode.DECRYPT).raise_for_failure()
        with SecureBuffer(size) as buf:
            convert_into(data, Mode.DECRYPT, buf).raise_for_failure()
            derive_key(bytes(buf))
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._buffer = bytearray(size)
        self._locked = False
        self._closed = False

        if _libc is not None and size:
            try:
                if _libc.mlock(_address(self._buffer), size) == 0:
                    self._locked = True
                else:
                    logger.debug("mlock failed (errno=%d), buffer stays pageable", ctypes.get_errno())
            except (AttributeError, TypeError, ValueError):
                logger.debug("mlock unavailable, buffer stays pageable")

    def __enter__(self) -> memoryview:
        # A view cannot resize the locked bytearray behind it.
        return memoryview(self._buffer)

    def __exit__(self, *args: object) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._buffer)

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    @property
    def buffer(self) -> bytearray:
        return self._buffer

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Zero the contents and release the memory lock. Safe to call twice."""
        if self._closed:
            return
        secure_zeroize(self._buffer)
        if self._locked and _libc is not None:
            _libc.munlock(_address(self._buffer), len(self._buffer))
            self._locked = False
        self._closed = True


def secure_zeroize(data: bytearray | memoryview | None) -> None:
    """Overwrite a writable buffer with zeros in place."""
    if data is None:
        return
    length = len(data)
    if length:
        ctypes.memset(_address(data), 0, length)


__all__ = ["SecureBuffer", "mlock_available", "secure_zeroize"]
