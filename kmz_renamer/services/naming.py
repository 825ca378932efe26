"""Traffic-study label normalization.

Placemark labels such as ``"ATR-7 24-HR Main St"`` are rewritten to
``"<project>-007 Main St"``. A label is renamed only when it carries a study
token (study code, dash, location number) and has not been renamed before.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..core import LabelChange, LabelSource, RenameOutcome
from ..utils import pad_location_number

logger = logging.getLogger(__name__)

STUDY_CODES: tuple[str, ...] = ("ATR", "TMC", "P&B", "QUE", "ADT")
UNTITLED_LABELS = frozenset({"Untitled Polygon", "Untitled Path"})

_CODES = "|".join(re.escape(code) for code in STUDY_CODES)
# Letters and word boundaries match ASCII only; whitespace stays Unicode-aware.
_STUDY_TOKEN = rf"(?a:(?:{_CODES})-[0-9]+[A-Z]?)"
STUDY_PATTERN = re.compile(rf"(?:{_CODES})-([0-9]+[A-Z]?)", re.IGNORECASE | re.ASCII)


@dataclass(frozen=True, slots=True)
class CleanupRule:
    """One substitution step applied to a label; ``count=0`` replaces all matches."""

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""
    count: int = 0

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text, count=self.count)


CLEANUP_RULES: tuple[CleanupRule, ...] = (
    CleanupRule("study-token", re.compile(rf"{_STUDY_TOKEN}\s*", re.IGNORECASE), count=1),
    CleanupRule("duration", re.compile(r"(?a:\b[0-9]{1,3}-HR\b)", re.IGNORECASE)),
    CleanupRule("machines", re.compile(r"\([0-9]+\s+(?a:MACHINES?)\)", re.IGNORECASE)),
    CleanupRule("machine-code", re.compile(r"(?a:\([0-9]+M[0-9]+\))", re.IGNORECASE)),
    CleanupRule("whitespace", re.compile(r"\s{2,}"), replacement=" "),
)


def already_renamed(label: str, project_identifier: str) -> bool:
    return label.startswith(f"{project_identifier}-") or label.startswith(
        f"{project_identifier} "
    )


def is_eligible(label: str, project_identifier: str) -> bool:
    """Return ``True`` when ``label`` should be rewritten for the project."""

    if label in UNTITLED_LABELS:
        return False
    if already_renamed(label, project_identifier):
        return False
    return STUDY_PATTERN.search(label) is not None


def clean_label(label: str, rules: tuple[CleanupRule, ...] = CLEANUP_RULES) -> str:
    """Run ``label`` through the ordered cleanup rules and trim the result."""

    for rule in rules:
        label = rule.apply(label)
    return label.strip()


def rewrite_label(label: str, project_identifier: str) -> str | None:
    """Return the new label, or ``None`` if ``label`` is not eligible."""

    if not is_eligible(label, project_identifier):
        return None

    match = STUDY_PATTERN.search(label)
    location_number = pad_location_number(match.group(1))
    cleaned = clean_label(label)

    new_label = f"{project_identifier}-{location_number}"
    if cleaned:
        new_label = f"{new_label} {cleaned}"
    return new_label


class LabelNormalizer:
    """Apply the project naming convention to every entry of a document."""

    def __init__(self, project_identifier: str, *, dry_run: bool = False):
        self.project_identifier = project_identifier
        self.dry_run = dry_run

    def normalize(self, document: LabelSource) -> RenameOutcome:
        outcome = RenameOutcome()
        for entry in document.entries():
            outcome.visited += 1
            original = entry.label
            if not original:
                outcome.skipped += 1
                continue

            renamed = rewrite_label(original, self.project_identifier)
            if renamed is None:
                logger.debug("Leaving %r unchanged", original)
                outcome.skipped += 1
                continue

            if not self.dry_run:
                entry.relabel(renamed)
            outcome.changes.append(LabelChange(original=original, renamed=renamed))

        logger.info(
            "Renamed %s of %s placemarks for project %s",
            outcome.renamed_count,
            outcome.visited,
            self.project_identifier,
        )
        return outcome


def normalize(document: LabelSource, project_identifier: str) -> int:
    """Rename eligible entries of ``document`` in place and return the count."""

    return LabelNormalizer(project_identifier).normalize(document).renamed_count
