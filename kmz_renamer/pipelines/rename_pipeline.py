"""Rename workflow orchestrator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..config import ARCHIVE_CONFIG, ArchiveConfig
from ..core import InvalidArchiveError, MissingInputError, RenameResult
from ..services import KmlDocument, KmzArchive, LabelNormalizer
from ..utils import download_name

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Please upload a KMZ file and enter a project number."


@dataclass(slots=True)
class RenamePipeline:
    """Unzip a KMZ, rename its placemarks and zip it back up."""

    config: ArchiveConfig = field(default=ARCHIVE_CONFIG)

    def run(
        self,
        *,
        data: bytes | None,
        filename: str,
        project_identifier: str | None,
        dry_run: bool = False,
    ) -> RenameResult:
        project_identifier = (project_identifier or "").strip()
        if data is None or not project_identifier:
            raise MissingInputError(MISSING_INPUT_MESSAGE)
        if not data:
            raise InvalidArchiveError("File is not a valid KMZ archive")

        logger.info("Renaming placemarks in %s for project %s", filename, project_identifier)

        archive = KmzArchive.from_bytes(data, config=self.config)
        document = KmlDocument.from_bytes(archive.read_document())

        normalizer = LabelNormalizer(project_identifier, dry_run=dry_run)
        outcome = normalizer.normalize(document)

        if dry_run:
            payload = data
        else:
            archive.replace_document(document.to_bytes())
            payload = archive.to_bytes()

        return RenameResult(
            download_name=download_name(filename, self.config.download_prefix),
            payload=payload,
            outcome=outcome,
        )

    def run_path(
        self,
        path: Path | str,
        *,
        project_identifier: str | None,
        dry_run: bool = False,
    ) -> RenameResult:
        archive_path = Path(path)
        return self.run(
            data=KmzArchive.read_path(archive_path),
            filename=archive_path.name,
            project_identifier=project_identifier,
            dry_run=dry_run,
        )

    @classmethod
    def default(cls) -> "RenamePipeline":
        return cls()
