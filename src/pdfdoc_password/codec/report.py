"""Per-character password inspection (which characters map where, and why)."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from pdfdoc_password.codec.driver import ConversionResult, PasswordInput, convert, password_bytes
from pdfdoc_password.codec.mapper import is_passthrough, map_code_point
from pdfdoc_password.codec.mode import Mode, normalize_mode
from pdfdoc_password.codec.tables import (
    COMMON_SPECIALS,
    DECRYPT_ONLY_SPECIALS,
    FALLBACK_BYTE,
    LEGACY_TABLE_END,
    LEGACY_TABLE_START,
    legacy_byte,
)
from pdfdoc_password.codec.utf8 import iter_code_points
from pdfdoc_password.errors import FailureKind, InvalidEncodingError, UnmappableCharacterError

logger = logging.getLogger(__name__)

Category = Literal["passthrough", "special", "legacy", "fallback", "decrypt-only", "rejected"]


@dataclass(frozen=True)
class CharacterReport:
    offset: int
    code_point: int
    encrypt_byte: int | None
    decrypt_byte: int | None
    category: Category

    @property
    def character(self) -> str:
        return chr(self.code_point)


@dataclass(frozen=True)
class PasswordReport:
    mode: Mode
    characters: tuple[CharacterReport, ...]
    result: ConversionResult

    @property
    def portable(self) -> bool:
        """True if the password would also be accepted when protecting a document."""
        if self.result.failure is FailureKind.INVALID_ENCODING:
            return False
        return all(char.encrypt_byte is not None for char in self.characters)


def classify(code_point: int) -> Category:
    """Return which mapping rule handles ``code_point``."""

    if is_passthrough(code_point):
        return "passthrough"
    if code_point in COMMON_SPECIALS:
        return "special"
    if LEGACY_TABLE_START <= code_point <= LEGACY_TABLE_END:
        return "fallback" if legacy_byte(code_point) == FALLBACK_BYTE else "legacy"
    if code_point in DECRYPT_ONLY_SPECIALS:
        return "decrypt-only"
    return "rejected"


def _mapped_or_none(code_point: int, mode: Mode) -> int | None:
    try:
        return map_code_point(code_point, mode)
    except UnmappableCharacterError:
        return None


def inspect_password(password: PasswordInput, mode: Mode | str = Mode.DECRYPT) -> PasswordReport:
    """Describe how each character of ``password`` converts in both modes.

    ``result`` is the outcome of converting under ``mode``. Decoding stops at
    the first malformed UTF-8 sequence; characters before it are still listed.
    """

    resolved = normalize_mode(mode)
    data = password_bytes(password)
    characters: list[CharacterReport] = []
    try:
        for offset, code_point in iter_code_points(data):
            characters.append(
                CharacterReport(
                    offset=offset,
                    code_point=code_point,
                    encrypt_byte=_mapped_or_none(code_point, Mode.ENCRYPT),
                    decrypt_byte=_mapped_or_none(code_point, Mode.DECRYPT),
                    category=classify(code_point),
                )
            )
    except InvalidEncodingError as exc:
        logger.debug("inspection stopped at malformed UTF-8 (offset=%d)", exc.offset)

    return PasswordReport(mode=resolved, characters=tuple(characters), result=convert(data, resolved))


__all__ = ["Category", "CharacterReport", "PasswordReport", "classify", "inspect_password"]
