"""Custom exceptions for pdfdoc-password."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pdfdoc_password.codec.mode import Mode


class FailureKind(str, Enum):
    """Why a password could not be converted."""

    INVALID_ENCODING = "invalid-encoding"
    UNMAPPABLE_CHARACTER = "unmappable-character"


class PdfDocPasswordError(Exception):
    """Base exception for pdfdoc-password."""


class PasswordEncodingError(PdfDocPasswordError):
    """Password cannot be converted to PDFDocEncoding."""

    kind: FailureKind

    def __init__(self, message: str, *, offset: int) -> None:
        self.offset = offset
        super().__init__(message)


class InvalidEncodingError(PasswordEncodingError):
    """Password bytes are not well-formed UTF-8."""

    kind = FailureKind.INVALID_ENCODING

    def __init__(self, offset: int, reason: str = "malformed UTF-8 sequence") -> None:
        self.reason = reason
        super().__init__(f"{reason} at byte offset {offset}", offset=offset)


class UnmappableCharacterError(PasswordEncodingError):
    """Character has no PDFDocEncoding byte under the active mode."""

    kind = FailureKind.UNMAPPABLE_CHARACTER

    def __init__(self, code_point: int, mode: Mode, *, offset: int = 0) -> None:
        self.code_point = code_point
        self.mode = mode
        super().__init__(
            f"U+{code_point:04X} cannot be used in a password for {mode.value}",
            offset=offset,
        )


class BufferTooSmallError(PdfDocPasswordError, ValueError):
    """Output buffer cannot hold the converted password."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Output buffer holds {available} bytes, {required} required")
