"""PDFDocEncoding lookup tables for legacy password conversion.

Acrobat/Reader (pre-1.7 PDF, tested with Acrobat 7 on Windows 7) maps password
characters outside PDFDocEncoding as follows:

* characters in PDFDocEncoding use PDFDocEncoding;
* code points from 0x200 up are refused as input;
* many points below 0x200 map to Windows CP-1250;
* some map to the unaccented ASCII letter;
* the rest map to ``.`` (period).

That behaviour is platform dependent, so the Latin Extended table is only
consulted when opening a document, never when protecting one.

All tables here are immutable and safe to share between threads.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

LEGACY_TABLE_START = 0x100
LEGACY_TABLE_END = 0x1FF
FALLBACK_BYTE = ord(".")

_D = "."

_Entry = Union[str, int]

# One row per eight code points, starting at U+0100.
_LATIN_EXTENDED_ENTRIES: tuple[_Entry, ...] = (
    # Latin Extended-A
    "A", "a", 0xC3, 0xC4, 0xA5, 0xB9, 0xC6, 0xE6,  # U+0100
    _D, _D, _D, _D, 0xC8, 0xE8, 0xCF, 0xEF,  # U+0108
    0xD0, 0xF0, "E", "e", _D, _D, "E", "e",  # U+0110
    0xCA, 0xEA, 0xCC, 0xEC, _D, _D, "G", "g",  # U+0118
    _D, _D, "G", "g", _D, _D, _D, _D,  # U+0120
    _D, _D, "I", "i", _D, _D, "I", "i",  # U+0128
    "I", "i", _D, _D, _D, _D, "K", "k",  # U+0130
    _D, 0xC5, 0xE5, "L", "l", 0xBC, 0xBE, _D,  # U+0138
    _D, 0xA3, 0xB3, 0xD1, 0xF1, "N", "n", 0xD2,  # U+0140
    0xF2, _D, _D, _D, "O", "o", _D, _D,  # U+0148
    0xD5, 0xF5, 0x96, 0x9C, 0xC0, 0xE0, "R", "r",  # U+0150
    0xD8, 0xF8, 0x8C, 0x9C, _D, _D, 0xAA, 0xBA,  # U+0158
    0x8A, 0x9A, 0xDE, 0xFE, 0x8D, 0x9D, "T", "t",  # U+0160
    _D, _D, "U", "u", _D, _D, 0xD9, 0xF9,  # U+0168
    0xDB, 0xFB, "U", "u", _D, _D, _D, _D,  # U+0170
    0x98, 0x8F, 0x9F, 0xAF, 0xBF, 0x99, 0x9E, _D,  # U+0178
    # Latin Extended-B, first half
    "b", _D, _D, _D, _D, _D, _D, _D,  # U+0180
    _D, 0xD0, _D, _D, _D, _D, _D, _D,  # U+0188
    # U+0191 and U+0192 borrow the CP-1252 florin; unverified against Acrobat.
    _D, 0x83, 0x83, _D, _D, _D, _D, "I",  # U+0190
    _D, _D, "l", _D, _D, _D, _D, "O",  # U+0198
    "O", "o", _D, _D, _D, _D, _D, _D,  # U+01A0
    _D, _D, _D, "t", _D, _D, "T", "U",  # U+01A8
    "u", _D, _D, _D, _D, _D, _D, _D,  # U+01B0
    _D, _D, _D, _D, _D, _D, _D, _D,  # U+01B8
    "|", _D, _D, "!", _D, _D, _D, _D,  # U+01C0
    _D, _D, _D, _D, _D, _D, _D, _D,  # U+01C8
    _D, _D, _D, _D, _D, _D, _D, _D,  # U+01D0
    _D, _D, _D, _D, _D, _D, "A", "a",  # U+01D8
    _D, _D, _D, _D, "G", "g", _D, _D,  # U+01E0
    _D, _D, _D, _D, "O", "o", _D, _D,  # U+01E8
    _D, _D, _D, _D, _D, _D, _D, _D,  # U+01F0
    _D, _D, _D, _D, _D, _D, _D, _D,  # U+01F8
)

LEGACY_TABLE: bytes = bytes(
    ord(entry) if isinstance(entry, str) else entry for entry in _LATIN_EXTENDED_ENTRIES
)
"""Byte for each code point U+0100..U+01FF, indexed by ``code_point - 0x100``."""

# Characters below 0x200 with a dedicated PDFDocEncoding slot. Accepted in
# both modes and checked before LEGACY_TABLE.
COMMON_SPECIALS: Mapping[int, int] = MappingProxyType(
    {
        0x0152: 0x96,  # OE
        0x0153: 0x9C,  # oe
        0x0160: 0x97,  # Scaron
        0x017E: 0x9E,  # zcaron
        0x0178: 0x98,  # Ydieresis
        0x017D: 0x99,  # Zcaron
        0x0192: 0x86,  # florin
        0x0161: 0x9D,  # scaron
    }
)

# Acrobat/Reader refuses these as input for revision 4 security and earlier,
# so they are only honoured when opening a document.
DECRYPT_ONLY_SPECIALS: Mapping[int, int] = MappingProxyType(
    {
        0x20AC: 0xA0,  # Euro
        0x2022: 0x80,  # bullet
        0x2020: 0x81,  # dagger
        0x2021: 0x82,  # daggerdbl
        0x2026: 0x83,  # ellipsis
        0x02C6: 0x1A,  # circumflex
        0x2014: 0x84,  # emdash
        0x2013: 0x85,  # endash
        0x2039: 0x88,  # guilsinglleft
        0x203A: 0x89,  # guilsinglright
        0x2030: 0x8B,  # perthousand
        0x201E: 0x8C,  # quotedblbase
        0x201C: 0x8D,  # quotedblleft
        0x201D: 0x8E,  # quotedblright
        0x2018: 0x8F,  # quoteleft
        0x2019: 0x90,  # quoteright
        0x201A: 0x91,  # quotesinglebase
        0x02DC: 0x1F,  # tilde
        0x2122: 0x92,  # trademark
    }
)


def legacy_byte(code_point: int) -> int:
    """Return the Latin Extended table byte for ``code_point``."""

    if not LEGACY_TABLE_START <= code_point <= LEGACY_TABLE_END:
        raise KeyError(code_point)
    return LEGACY_TABLE[code_point - LEGACY_TABLE_START]


__all__ = [
    "COMMON_SPECIALS",
    "DECRYPT_ONLY_SPECIALS",
    "FALLBACK_BYTE",
    "LEGACY_TABLE",
    "LEGACY_TABLE_END",
    "LEGACY_TABLE_START",
    "legacy_byte",
]
