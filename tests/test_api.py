from __future__ import annotations

import io
import zipfile

import pytest

from conftest import build_kmz
from kmz_renamer import create_app
from kmz_renamer.services import KmlDocument


@pytest.fixture()
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


def post_rename(client, *, data: bytes | None, filename: str = "study.kmz", project: str = "25-260108"):
    form = {"project_number": project}
    if data is not None:
        form["kmz_file"] = (io.BytesIO(data), filename)
    return client.post("/api/rename", data=form, content_type="multipart/form-data")


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "healthy"}


def test_rename_returns_updated_archive(client, scenario_kmz: bytes):
    response = post_rename(client, data=scenario_kmz)

    assert response.status_code == 200
    assert response.mimetype == "application/vnd.google-earth.kmz"
    assert "Updated-study.kmz" in response.headers["Content-Disposition"]
    assert response.headers["X-Renamed-Count"] == "2"
    assert response.headers["X-Status-Message"] == "Renamed 2 pushpin placemarks."

    with zipfile.ZipFile(io.BytesIO(response.data)) as archive:
        labels = KmlDocument.from_bytes(archive.read("doc.kml")).labels()
    assert labels[0] == "25-260108-007 Main St"


def test_missing_file_is_rejected(client):
    response = post_rename(client, data=None)
    assert response.status_code == 400
    assert response.get_json() == {"error": "Please upload a KMZ file and enter a project number."}


def test_blank_project_is_rejected(client, scenario_kmz: bytes):
    response = post_rename(client, data=scenario_kmz, project="   ")
    assert response.status_code == 400


def test_wrong_extension_is_rejected(client, scenario_kmz: bytes):
    response = post_rename(client, data=scenario_kmz, filename="study.zip")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid KMZ file"}


def test_missing_kml_is_reported(client):
    response = post_rename(client, data=build_kmz(None, extras={"readme.txt": b"hi"}))
    assert response.status_code == 400
    assert response.get_json() == {"error": "KML file not found in KMZ."}


def test_corrupt_archive_is_reported(client):
    response = post_rename(client, data=b"this is not a zip")
    assert response.status_code == 400
    assert response.get_json() == {"error": "File is not a valid KMZ archive"}


def test_unexpected_failure_is_generic(client):
    broken = build_kmz(b'<?xml version="1.0" encoding="UTF-8"?><kml><Placemark></kml>')
    response = post_rename(client, data=broken)

    assert response.status_code == 500
    assert response.get_json() == {"error": "Error processing file. Please try again."}


def test_empty_upload_is_reported_as_invalid_archive(client):
    response = post_rename(client, data=b"")
    assert response.status_code == 400
    assert response.get_json() == {"error": "File is not a valid KMZ archive"}
