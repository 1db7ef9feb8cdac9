"""Public conversion API re-exported for external users.

The objects listed in ``__all__`` form the supported public surface for
Python consumers. Everything else in :mod:`pdfdoc_password.codec` is
considered internal and may change without notice.
"""
from __future__ import annotations

from pdfdoc_password.codec.driver import (
    ConversionResult,
    convert,
    convert_into,
    encode_password,
    encode_password_secure,
    password_bytes,
    required_length,
)
from pdfdoc_password.codec.mapper import is_passthrough, map_code_point
from pdfdoc_password.codec.mode import Mode, normalize_mode
from pdfdoc_password.codec.report import CharacterReport, PasswordReport, classify, inspect_password
from pdfdoc_password.codec.tables import COMMON_SPECIALS, DECRYPT_ONLY_SPECIALS, FALLBACK_BYTE, LEGACY_TABLE
from pdfdoc_password.codec.utf8 import iter_code_points
from pdfdoc_password.errors import FailureKind

__all__ = [
    "COMMON_SPECIALS",
    "CharacterReport",
    "ConversionResult",
    "DECRYPT_ONLY_SPECIALS",
    "FALLBACK_BYTE",
    "FailureKind",
    "LEGACY_TABLE",
    "Mode",
    "PasswordReport",
    "classify",
    "convert",
    "convert_into",
    "encode_password",
    "encode_password_secure",
    "inspect_password",
    "is_passthrough",
    "iter_code_points",
    "map_code_point",
    "normalize_mode",
    "password_bytes",
    "required_length",
]
