"""Conversion modes."""
from __future__ import annotations

from enum import Enum


class Mode(str, Enum):
    """Whether a password protects a document or opens one.

    ``ENCRYPT`` accepts only characters that re-enter identically on every
    platform. ``DECRYPT`` also accepts the platform-specific mappings that
    Acrobat/Reader applied to existing passwords.
    """

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


def normalize_mode(mode: Mode | str) -> Mode:
    """Normalize user-provided mode strings."""

    if isinstance(mode, Mode):
        return mode

    normalized = mode.strip().lower()
    for candidate in Mode:
        if candidate.value == normalized:
            return candidate

    raise ValueError(f"Unknown conversion mode: {mode}")
