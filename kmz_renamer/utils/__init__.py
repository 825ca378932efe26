"""Utility helpers for the KMZ Renamer project."""

from .formatting import download_name, pad_location_number
from .io import base_filename, declares_encoding, detect_encoding

__all__ = [
    "download_name",
    "pad_location_number",
    "declares_encoding",
    "detect_encoding",
    "base_filename",
]
