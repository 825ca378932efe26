"""Domain models used throughout the KMZ Renamer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol


class LabelEntry(Protocol):
    """A single label-bearing entry, such as a KML placemark."""

    @property
    def label(self) -> str:
        """Trimmed label text, empty when the entry has no name."""
        ...

    def relabel(self, text: str) -> None:
        """Replace the entry's label text."""
        ...


class LabelSource(Protocol):
    """Anything that can enumerate its label-bearing entries."""

    def entries(self) -> Iterable[LabelEntry]:
        ...


@dataclass(frozen=True, slots=True)
class LabelChange:
    """A label before and after renaming."""

    original: str
    renamed: str


@dataclass(slots=True)
class RenameOutcome:
    """Aggregate result of a normalization pass."""

    visited: int = 0
    skipped: int = 0
    changes: list[LabelChange] = field(default_factory=list)

    @property
    def renamed_count(self) -> int:
        return len(self.changes)

    def status_message(self) -> str:
        return f"Renamed {self.renamed_count} pushpin placemarks."

    def as_dict(self) -> dict:
        return {
            "renamed_count": self.renamed_count,
            "visited": self.visited,
            "skipped": self.skipped,
            "changes": [
                {"original": change.original, "renamed": change.renamed}
                for change in self.changes
            ],
        }


@dataclass(slots=True)
class RenameResult:
    """Information returned to callers after a rename job completes."""

    download_name: str
    payload: bytes
    outcome: RenameOutcome

    @property
    def renamed_count(self) -> int:
        return self.outcome.renamed_count
