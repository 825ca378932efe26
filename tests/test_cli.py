from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from conftest import build_kmz
from kmz_renamer.cli import main, rename_kmz_file
from kmz_renamer.services import KmlDocument


@pytest.fixture()
def kmz_path(tmp_path: Path, scenario_kmz: bytes) -> Path:
    path = tmp_path / "study.kmz"
    path.write_bytes(scenario_kmz)
    return path


def read_labels(path: Path) -> list[str]:
    with zipfile.ZipFile(path) as archive:
        return KmlDocument.from_bytes(archive.read("doc.kml")).labels()


def test_rename_kmz_file_writes_next_to_input(kmz_path: Path):
    result, target = rename_kmz_file(kmz_path, project_identifier="25-260108")

    assert target == kmz_path.with_name("Updated-study.kmz")
    assert result.renamed_count == 2
    assert read_labels(target)[3] == "25-260108-12A School Rd"


def test_main_honours_output_argument(kmz_path: Path, tmp_path: Path, capsys):
    output = tmp_path / "renamed.kmz"

    assert main([str(kmz_path), "--project", "25-260108", "--output", str(output)]) == 0
    assert output.exists()
    assert "Renamed 2 pushpin placemarks." in capsys.readouterr().out


def test_main_dry_run_prints_changes(kmz_path: Path, capsys):
    assert main([str(kmz_path), "-p", "25-260108", "--dry-run"]) == 0

    out = capsys.readouterr().out
    assert "ATR-7 24-HR Main St -> 25-260108-007 Main St" in out
    assert not kmz_path.with_name("Updated-study.kmz").exists()


def test_main_reports_missing_document(tmp_path: Path):
    path = tmp_path / "empty.kmz"
    path.write_bytes(build_kmz(None, extras={"readme.txt": b"hi"}))

    assert main([str(path), "--project", "25-260108"]) == 1


def test_main_rejects_blank_project(kmz_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(kmz_path), "--project", "  "])
    assert excinfo.value.code == 2
