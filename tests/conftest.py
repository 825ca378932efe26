from __future__ import annotations

import io
import zipfile
from xml.sax.saxutils import escape
from typing import Sequence

import pytest


KML_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="http://www.opengis.net/kml/2.2" xmlns:gx="http://www.google.com/kml/ext/2.2">
<Document>
  <name>Traffic Study</name>
  <!-- exported from Google Earth -->
  <Folder>
    <name>Counts</name>
{placemarks}
  </Folder>
</Document>
</kml>
"""

PLACEMARK_TEMPLATE = """    <Placemark>
      <name>{name}</name>
      <gx:balloonVisibility>1</gx:balloonVisibility>
      <Point><coordinates>-97.7431,30.2672,0</coordinates></Point>
    </Placemark>"""

SCENARIO_LABELS = [
    "ATR-7 24-HR Main St",
    "Untitled Polygon",
    "25-260108-003 Already Done",
    "QUE-12A School Rd",
]

ICON_BYTES = b"\x89PNG\r\n\x1a\nnot-really-an-image"


def build_kml(labels: Sequence[str]) -> bytes:
    placemarks = "\n".join(PLACEMARK_TEMPLATE.format(name=escape(name)) for name in labels)
    return KML_TEMPLATE.format(placemarks=placemarks).encode("utf-8")


def build_kmz(kml: bytes | None, *, document_name: str = "doc.kml", extras: dict | None = None) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        if kml is not None:
            archive.writestr(document_name, kml)
        for name, data in (extras or {}).items():
            archive.writestr(name, data)
    return buffer.getvalue()


@pytest.fixture()
def scenario_kml() -> bytes:
    return build_kml(SCENARIO_LABELS)


@pytest.fixture()
def scenario_kmz(scenario_kml: bytes) -> bytes:
    return build_kmz(scenario_kml, extras={"files/icon.png": ICON_BYTES})
