"""Shared pytest fixtures for the KML → GeoJSON test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from lxml import etree

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"

KML_NS = "http://www.opengis.net/kml/2.2"
GX_NS = "http://www.google.com/kml/ext/2.2"

# ---------------------------------------------------------------------------
# Element factories
# ---------------------------------------------------------------------------

ElementFactory = Callable[..., etree._Element]


@pytest.fixture()
def kml_element() -> ElementFactory:
    """Return a factory parsing a body wrapped in a namespaced element.

    ``kml_element("<name>A</name>")`` yields a ``Placemark``; pass
    ``tag=`` for other wrappers.
    """

    def _build(body: str, *, tag: str = "Placemark") -> etree._Element:
        return etree.fromstring(
            f'<{tag} xmlns="{KML_NS}" xmlns:gx="{GX_NS}">{body}</{tag}>'.encode()
        )

    return _build


@pytest.fixture()
def kml_document() -> Callable[[str], str]:
    """Return a factory wrapping a body in a ``<kml><Document>`` envelope."""

    def _build(body: str) -> str:
        return (
            '<?xml version="1.0" encoding="UTF-8"?>'
            f'<kml xmlns="{KML_NS}" xmlns:gx="{GX_NS}"><Document>{body}</Document></kml>'
        )

    return _build


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


# ---------------------------------------------------------------------------
# Sample KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def point_kml(data_dir: Path) -> Path:
    """Path to a minimal single-Point KML without a Document wrapper."""
    return data_dir / "point.kml"


@pytest.fixture()
def styles_kml(data_dir: Path) -> Path:
    """Path to a KML with shared Styles, a StyleMap and an inline override."""
    return data_dir / "styles.kml"


@pytest.fixture()
def gxtrack_kml(data_dir: Path) -> Path:
    """Path to a KML with a single gx:Track."""
    return data_dir / "gxtrack.kml"


@pytest.fixture()
def gxmultitrack_kml(data_dir: Path) -> Path:
    """Path to a KML with a gx:MultiTrack holding two tracks."""
    return data_dir / "gxmultitrack.kml"


@pytest.fixture()
def mixed_kml(data_dir: Path) -> Path:
    """Path to a KML with folders, ExtendedData, time and mixed geometry."""
    return data_dir / "mixed.kml"


@pytest.fixture()
def malformed_kml(data_dir: Path) -> Path:
    """Path to a file that is not valid XML."""
    return data_dir / "malformed.kml"
