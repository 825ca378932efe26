"""Runtime configuration for the KMZ Renamer project."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    """High level runtime configuration values."""

    max_kmz_size_mb: int = 25
    allowed_kmz_extensions: tuple[str, ...] = ("kmz",)

    @property
    def max_upload_bytes(self) -> int:
        """Maximum upload payload in bytes."""
        return self.max_kmz_size_mb * 1024 * 1024


@dataclass(frozen=True)
class ArchiveConfig:
    """Naming conventions for the archives we read and write."""

    markup_extension: str = ".kml"
    preferred_document: str = "doc.kml"
    download_prefix: str = "Updated-"


APP_CONFIG = AppConfig(
    max_kmz_size_mb=int(
        os.environ.get("KMZ_RENAMER_MAX_UPLOAD_MB", AppConfig.max_kmz_size_mb)
    ),
)
ARCHIVE_CONFIG = ArchiveConfig(
    download_prefix=os.environ.get(
        "KMZ_RENAMER_DOWNLOAD_PREFIX", ArchiveConfig.download_prefix
    ),
)
