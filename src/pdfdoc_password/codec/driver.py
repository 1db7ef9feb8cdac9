"""UTF-8 password to PDFDocEncoding conversion.

Older PDF security handlers (revision 4 and earlier) feed the password to the
key derivation as PDFDocEncoding bytes, a modified ISO-8859-1. Newer handlers
use Unicode directly and are not covered here.

Conversion is a single decode-and-map pass. Called without an output buffer
it only counts, so callers can size a buffer before the real conversion.
Failures are returned as values, never raised: check
:attr:`ConversionResult.ok` before using the count.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from pdfdoc_password.codec.mapper import map_code_point
from pdfdoc_password.codec.mode import Mode, normalize_mode
from pdfdoc_password.codec.utf8 import BytesLike, iter_code_points, resolve_length
from pdfdoc_password.errors import (
    BufferTooSmallError,
    FailureKind,
    PasswordEncodingError,
    PdfDocPasswordError,
    UnmappableCharacterError,
)
from pdfdoc_password.secure_memory import SecureBuffer, secure_zeroize

logger = logging.getLogger(__name__)

OutputBuffer = Union[bytearray, memoryview, SecureBuffer]
PasswordInput = Union[str, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of one conversion: a byte count or a typed failure."""

    count: int | None = None
    failure: FailureKind | None = None
    offset: int | None = None
    code_point: int | None = None
    error: PasswordEncodingError | None = field(default=None, compare=False, repr=False)

    @classmethod
    def success(cls, count: int) -> ConversionResult:
        return cls(count=count)

    @classmethod
    def from_error(cls, error: PasswordEncodingError) -> ConversionResult:
        code_point = error.code_point if isinstance(error, UnmappableCharacterError) else None
        return cls(failure=error.kind, offset=error.offset, code_point=code_point, error=error)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def raise_for_failure(self) -> int:
        """Return the byte count, or raise the error that caused the failure."""
        if self.failure is None:
            assert self.count is not None
            return self.count
        if self.error is not None:
            raise self.error
        raise PdfDocPasswordError(f"password conversion failed: {self.failure.value}")


def convert(
    data: BytesLike,
    mode: Mode | str,
    output: OutputBuffer | None = None,
    *,
    length: int | None = None,
) -> ConversionResult:
    """Convert UTF-8 password bytes to PDFDocEncoding.

    ``length`` limits how many bytes of ``data`` are read; a NUL byte ends the
    password earlier. With ``output=None`` nothing is written and the result
    carries the number of bytes a fill pass would write.

    With an ``output`` buffer the converted bytes are written to
    ``output[:count]`` only once the whole password has converted; on failure
    the buffer is left untouched. Raises :exc:`BufferTooSmallError` if
    ``output`` is shorter than the converted password.
    """

    resolved = normalize_mode(mode)
    end = resolve_length(data, length)
    staged = bytearray(end) if output is not None else None
    count = 0

    try:
        try:
            for offset, code_point in iter_code_points(data, end):
                byte = map_code_point(code_point, resolved, offset=offset)
                if staged is not None:
                    staged[count] = byte
                count += 1
        except PasswordEncodingError as exc:
            logger.debug(
                "password conversion failed (%s, mode=%s, offset=%d)",
                exc.kind.value,
                resolved.value,
                exc.offset,
            )
            return ConversionResult.from_error(exc)

        if staged is not None and output is not None:
            target = output.buffer if isinstance(output, SecureBuffer) else output
            if len(target) < count:
                raise BufferTooSmallError(count, len(target))
            target[:count] = memoryview(staged)[:count]
    finally:
        secure_zeroize(staged)

    return ConversionResult.success(count)


def required_length(data: BytesLike, mode: Mode | str, *, length: int | None = None) -> ConversionResult:
    """Capacity query: validate ``data`` and return the converted size."""

    return convert(data, mode, None, length=length)


def convert_into(
    data: BytesLike,
    mode: Mode | str,
    output: OutputBuffer,
    *,
    length: int | None = None,
) -> ConversionResult:
    """Fill pass: write the converted password into ``output``."""

    if output is None:
        raise TypeError("convert_into() requires an output buffer; use required_length() to size it")
    return convert(data, mode, output, length=length)


def password_bytes(password: PasswordInput) -> BytesLike:
    """Return ``password`` as UTF-8 bytes; bytes-like input is used as is."""

    if isinstance(password, str):
        # surrogatepass lets lone surrogates reach the mapper, which rejects them.
        return password.encode("utf-8", "surrogatepass")
    return password


def encode_password(password: PasswordInput, mode: Mode | str) -> bytes:
    """Convert ``password`` and return the PDFDocEncoding bytes.

    Unlike :func:`convert` this raises
    :exc:`~pdfdoc_password.errors.PasswordEncodingError` on failure.
    """

    data = password_bytes(password)
    scratch = bytearray(len(data))
    try:
        count = convert_into(data, mode, scratch).raise_for_failure()
        return bytes(memoryview(scratch)[:count])
    finally:
        secure_zeroize(scratch)


def encode_password_secure(password: PasswordInput, mode: Mode | str) -> SecureBuffer:
    """Convert ``password`` into a :class:`SecureBuffer` sized by a capacity query.

    The caller owns the returned buffer and should close it (or use it as a
    context manager) once the key has been derived.
    """

    data = password_bytes(password)
    count = required_length(data, mode).raise_for_failure()
    secure = SecureBuffer(count)
    try:
        convert_into(data, mode, secure).raise_for_failure()
    except BaseException:
        secure.close()
        raise
    return secure


__all__ = [
    "ConversionResult",
    "OutputBuffer",
    "PasswordInput",
    "convert",
    "convert_into",
    "encode_password",
    "encode_password_secure",
    "password_bytes",
    "required_length",
]
