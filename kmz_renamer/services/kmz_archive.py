"""Read and rewrite KMZ archives in memory."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from zipfile import BadZipFile, ZipFile, ZipInfo

from ..config import ARCHIVE_CONFIG, ArchiveConfig
from ..core.exceptions import DocumentNotFoundError, InvalidArchiveError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class KmzArchive:
    """The members of a KMZ file and the name of its KML document."""

    members: list[tuple[ZipInfo, bytes]]
    document_name: str

    @classmethod
    def from_bytes(cls, data: bytes, *, config: ArchiveConfig = ARCHIVE_CONFIG) -> "KmzArchive":
        try:
            with ZipFile(io.BytesIO(data)) as archive:
                members = [(info, archive.read(info)) for info in archive.infolist()]
        except BadZipFile as exc:
            raise InvalidArchiveError("File is not a valid KMZ archive") from exc

        document_name = cls._find_document([info.filename for info, _ in members], config)
        logger.debug("Using %s from archive with %s member(s)", document_name, len(members))
        return cls(members=members, document_name=document_name)

    @staticmethod
    def read_path(path: Path | str) -> bytes:
        path = Path(path)
        if not path.is_file():
            raise InvalidArchiveError(f"KMZ file not found: {path}")
        return path.read_bytes()

    @staticmethod
    def _find_document(names: list[str], config: ArchiveConfig) -> str:
        candidates = [
            name for name in names if name.lower().endswith(config.markup_extension)
        ]
        if not candidates:
            raise DocumentNotFoundError(
                "KML file not found in KMZ.", details={"members": names}
            )
        if config.preferred_document in candidates:
            return config.preferred_document
        return candidates[0]

    def read_document(self) -> bytes:
        for info, data in self.members:
            if info.filename == self.document_name:
                return data
        raise DocumentNotFoundError(f"{self.document_name} missing from archive")

    def replace_document(self, markup: bytes) -> None:
        self.members = [
            (info, markup if info.filename == self.document_name else data)
            for info, data in self.members
        ]

    def to_bytes(self) -> bytes:
        buffer = io.BytesIO()
        with ZipFile(buffer, "w") as archive:
            for info, data in self.members:
                archive.writestr(info, data)
        return buffer.getvalue()
