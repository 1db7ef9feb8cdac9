"""Code point to PDFDocEncoding byte mapping."""
from __future__ import annotations

from pdfdoc_password.codec.mode import Mode, normalize_mode
from pdfdoc_password.codec.tables import (
    COMMON_SPECIALS,
    DECRYPT_ONLY_SPECIALS,
    LEGACY_TABLE_END,
    LEGACY_TABLE_START,
    legacy_byte,
)
from pdfdoc_password.errors import UnmappableCharacterError

# Printable ASCII (DEL excluded) and the upper half of Latin-1 are already
# valid PDFDocEncoding.
ASCII_PRINTABLE_FIRST = 0x20
ASCII_PRINTABLE_LAST = 0x7E
LATIN1_UPPER_FIRST = 0xA0
LATIN1_UPPER_LAST = 0xFF


def is_passthrough(code_point: int) -> bool:
    """Return True if ``code_point`` is emitted unchanged in both modes."""

    return (
        ASCII_PRINTABLE_FIRST <= code_point <= ASCII_PRINTABLE_LAST
        or LATIN1_UPPER_FIRST <= code_point <= LATIN1_UPPER_LAST
    )


def map_code_point(code_point: int, mode: Mode | str, *, offset: int = 0) -> int:
    """Return the PDFDocEncoding byte for ``code_point`` under ``mode``.

    Checks run in a fixed order and the first match wins:

    1. pass-through ranges (both modes);
    2. :data:`~pdfdoc_password.codec.tables.COMMON_SPECIALS` (both modes);
    3. in ``DECRYPT`` mode only, the Latin Extended table for U+0100..U+01FF
       (which may yield the ``.`` fallback), then
       :data:`~pdfdoc_password.codec.tables.DECRYPT_ONLY_SPECIALS`.

    Raises :exc:`~pdfdoc_password.errors.UnmappableCharacterError` when
    nothing matches. ``offset`` is only used to report where the character sits.
    """

    mode = normalize_mode(mode)
    if is_passthrough(code_point):
        return code_point

    special = COMMON_SPECIALS.get(code_point)
    if special is not None:
        return special

    if mode is Mode.DECRYPT:
        if LEGACY_TABLE_START <= code_point <= LEGACY_TABLE_END:
            return legacy_byte(code_point)
        special = DECRYPT_ONLY_SPECIALS.get(code_point)
        if special is not None:
            return special

    raise UnmappableCharacterError(code_point, mode, offset=offset)


__all__ = ["is_passthrough", "map_code_point"]
