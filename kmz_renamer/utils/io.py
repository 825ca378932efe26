"""File IO utilities."""

from __future__ import annotations

import posixpath
import re

import chardet

_DECLARED_ENCODING = re.compile(rb"^\s*<\?xml[^>]*\bencoding\s*=", re.IGNORECASE)
_BOMS = (b"\xef\xbb\xbf", b"\xff\xfe", b"\xfe\xff")


def detect_encoding(raw: bytes) -> str:
    """Detect the encoding of a byte payload."""

    detection = chardet.detect(raw)
    return detection.get("encoding") or "utf-8"


def declares_encoding(raw: bytes) -> bool:
    """Return ``True`` when ``raw`` carries a BOM or an XML encoding declaration."""

    if raw.startswith(_BOMS):
        return True
    return bool(_DECLARED_ENCODING.match(raw[:256]))


def base_filename(filename: str) -> str:
    """Strip any client-side directory components from an uploaded filename."""

    return posixpath.basename(filename.replace("\\", "/")).strip()
