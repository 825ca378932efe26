"""Mutable KML documents backed by :mod:`xml.etree.ElementTree`."""

from __future__ import annotations

import logging
import re
import threading
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Iterator

from ..utils import declares_encoding, detect_encoding

logger = logging.getLogger(__name__)

# ElementTree reserves ns0, ns1, ... for prefixes it invents itself.
_RESERVED_PREFIX = re.compile(r"ns\d+$")

# ElementTree keeps prefixes in a process-wide registry.
_REGISTRY_LOCK = threading.Lock()


@dataclass(slots=True)
class PlacemarkEntry:
    """The direct ``name`` child of a placemark, if it has one."""

    name_node: ET.Element | None

    @property
    def label(self) -> str:
        if self.name_node is None:
            return ""
        return "".join(self.name_node.itertext()).strip()

    def relabel(self, text: str) -> None:
        if self.name_node is None:
            raise ValueError("Placemark has no name element to relabel")
        for child in list(self.name_node):
            self.name_node.remove(child)
        self.name_node.text = text


class KmlDocument:
    """Parsed KML markup exposing its placemarks as label entries."""

    def __init__(self, root: ET.Element, namespaces: dict[str, str] | None = None):
        # namespace URI -> prefix used when writing the document back out
        self.root = root
        self.namespaces = namespaces or {}

    @classmethod
    def from_bytes(cls, raw: bytes) -> "KmlDocument":
        try:
            return cls._parse(raw)
        except ET.ParseError:
            if declares_encoding(raw):
                raise
            encoding = detect_encoding(raw)
            logger.warning("KML is not valid UTF-8; retrying as %s", encoding)
            return cls._parse(raw.decode(encoding, errors="replace").encode("utf-8"))

    @classmethod
    def _parse(cls, raw: bytes) -> "KmlDocument":
        namespaces = _collect_namespaces(raw)
        parser = ET.XMLParser(
            target=ET.TreeBuilder(insert_comments=True, insert_pis=True)
        )
        parser.feed(raw)
        return cls(parser.close(), namespaces)

    def placemarks(self) -> Iterator[ET.Element]:
        for element in self.root.iter():
            if isinstance(element.tag, str) and _local_name(element.tag) == "Placemark":
                yield element

    def entries(self) -> Iterator[PlacemarkEntry]:
        for placemark in self.placemarks():
            yield PlacemarkEntry(placemark.find("./{*}name"))

    def labels(self) -> list[str]:
        return [entry.label for entry in self.entries()]

    def to_bytes(self) -> bytes:
        with _REGISTRY_LOCK:
            for uri, prefix in self.namespaces.items():
                ET.register_namespace(prefix, uri)
            return ET.tostring(self.root, encoding="utf-8", xml_declaration=True)


def _collect_namespaces(raw: bytes) -> dict[str, str]:
    """Return one prefix per namespace URI declared in ``raw``.

    Google Earth binds the KML namespace both as the default namespace and as
    ``kml:``. The default namespace wins, otherwise the first declaration does.
    """

    parser = ET.XMLPullParser(events=("start-ns",))
    parser.feed(raw)
    namespaces: dict[str, str] = {}
    for _, (prefix, uri) in parser.read_events():
        if _RESERVED_PREFIX.match(prefix):
            continue
        if uri not in namespaces or prefix == "":
            namespaces[uri] = prefix
    parser.close()
    return namespaces


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]
