"""Service layer exports."""

from .kml_document import KmlDocument, PlacemarkEntry
from .kmz_archive import KmzArchive
from .naming import (
    CLEANUP_RULES,
    CleanupRule,
    LabelNormalizer,
    clean_label,
    is_eligible,
    normalize,
    rewrite_label,
)

__all__ = [
    "KmlDocument",
    "PlacemarkEntry",
    "KmzArchive",
    "CLEANUP_RULES",
    "CleanupRule",
    "LabelNormalizer",
    "clean_label",
    "is_eligible",
    "normalize",
    "rewrite_label",
]
