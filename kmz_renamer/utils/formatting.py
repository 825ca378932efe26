"""Formatting helpers."""

from __future__ import annotations

from ..config import ARCHIVE_CONFIG


def pad_location_number(value: str, width: int = 3) -> str:
    """Left-pad a location token with zeros to ``width`` characters.

    The whole token counts toward the width, so ``"7"`` becomes ``"007"``
    while ``"12A"`` and ``"1234"`` are returned unchanged.
    """

    return value.rjust(width, "0")


def download_name(filename: str, prefix: str | None = None) -> str:
    """Return the name offered for the rewritten archive."""

    if prefix is None:
        prefix = ARCHIVE_CONFIG.download_prefix
    return f"{prefix}{filename}"
