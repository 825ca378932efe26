"""Command line interface for renaming KMZ placemarks."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .core import ProcessingError, RenameResult
from .pipelines import RenamePipeline

__all__ = ["rename_kmz_file", "main"]

LOGGER = logging.getLogger(__name__)


def rename_kmz_file(
    input_kmz: Path,
    *,
    project_identifier: str,
    output_kmz: Optional[Path] = None,
    dry_run: bool = False,
    pipeline: Optional[RenamePipeline] = None,
) -> tuple[RenameResult, Optional[Path]]:
    """Rename the placemarks of ``input_kmz`` and write the updated archive.

    Parameters
    ----------
    input_kmz:
        KMZ file to read.
    project_identifier:
        Project number used as the prefix of every renamed label.
    output_kmz:
        Optional explicit output path. When omitted the archive is written
        next to ``input_kmz`` as ``Updated-<name>``.
    dry_run:
        When ``True`` nothing is written and the returned path is ``None``.

    Returns
    -------
    tuple
        The :class:`~kmz_renamer.core.RenameResult` and the written path.
    """

    pipeline = pipeline or RenamePipeline.default()
    result = pipeline.run_path(
        input_kmz,
        project_identifier=project_identifier,
        dry_run=dry_run,
    )
    if dry_run:
        return result, None

    target = output_kmz or input_kmz.with_name(result.download_name)
    target.write_bytes(result.payload)
    LOGGER.info("Wrote %s", target)
    return result, target


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rename traffic-study placemarks in a KMZ file to a project numbering scheme.",
    )
    parser.add_argument("input", type=Path, help="KMZ file to rename")
    parser.add_argument(
        "--project",
        "-p",
        required=True,
        help="Project number used as the label prefix (e.g. 25-260108)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output KMZ path (defaults to 'Updated-<name>' next to the input)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the renames without writing a new file.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every skipped placemark.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    project = args.project.strip()
    if not project:
        parser.error("a project number is required")

    try:
        result, _ = rename_kmz_file(
            args.input,
            project_identifier=project,
            output_kmz=args.output,
            dry_run=args.dry_run,
        )
    except ProcessingError as exc:
        LOGGER.error("%s", exc)
        return 1
    except Exception:
        LOGGER.exception("Error processing %s", args.input)
        return 1

    if args.dry_run:
        for change in result.outcome.changes:
            print(f"{change.original} -> {change.renamed}")
    print(result.outcome.status_message())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
