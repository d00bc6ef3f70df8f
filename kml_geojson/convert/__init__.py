"""KML → GeoJSON conversion engine.

Composable pipeline, one stage per module:
- **_xml**: lxml parsing and namespace-agnostic element access
- **_coordinates**: locale-invariant coordinate text parsing
- **_styles**: Style/StyleMap indexing, content hashing, resolution
- **_geometry**: recursive Point/LineString/Polygon/Track extraction
- **_placemark**: placemark → Feature property mapping

Styles are indexed once per document; each placemark is then converted
independently and the results are concatenated in document order.
Conversion is a pure function of its input: no state survives a call,
so independent documents may be converted concurrently.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from kml_geojson.convert._coordinates import parse_coordinate, parse_coordinates
from kml_geojson.convert._geometry import ExtractedGeometry, extract_geometries
from kml_geojson.convert._placemark import placemark_to_feature
from kml_geojson.convert._styles import StyleIndex, style_hash
from kml_geojson.convert._xml import child, descendants, parse_document
from kml_geojson.core.config import ConverterConfig
from kml_geojson.core.exceptions import (
    ConversionError,
    CoordinateParseError,
    KmlParseError,
)
from kml_geojson.models.feature import FeatureCollection
from kml_geojson.utils.helpers import dump_geojson, read_kml_bytes

if TYPE_CHECKING:
    from lxml.etree import _Element, _ElementTree

logger = logging.getLogger("kml_geojson.convert")

__all__ = [
    "ConversionError",
    "CoordinateParseError",
    "ExtractedGeometry",
    "KmlParseError",
    "StyleIndex",
    "convert_document",
    "convert_kml",
    "convert_kml_file",
    "extract_geometries",
    "kml_to_geojson",
    "parse_coordinate",
    "parse_coordinates",
    "parse_document",
    "placemark_to_feature",
    "style_hash",
]


def convert_document(document: _Element | _ElementTree) -> FeatureCollection:
    """Convert a parsed KML element tree to a FeatureCollection.

    Styles and placemarks are searched under the top-level ``Document``
    element when there is one, otherwise under the root.

    Raises:
        CoordinateParseError: If any present coordinate text is malformed.
    """
    root = document.getroot() if hasattr(document, "getroot") else document
    container = child(root, "Document")
    if container is None:
        container = root

    styles = StyleIndex.build(container)

    collection = FeatureCollection()
    placemark_count = 0
    for placemark in descendants(container, "Placemark"):
        placemark_count += 1
        feature = placemark_to_feature(placemark, styles)
        if feature is not None:
            collection.features.append(feature)

    logger.info(
        "Converted %d of %d placemark(s) to features",
        len(collection.features),
        placemark_count,
    )
    return collection


def convert_kml(source: str | bytes, config: ConverterConfig | None = None) -> FeatureCollection:
    """Parse KML text and convert it to a FeatureCollection.

    Raises:
        KmlParseError: If the input is not well-formed XML.
        CoordinateParseError: If any present coordinate text is malformed.
    """
    config = config or ConverterConfig()
    root = parse_document(source, huge_tree=config.huge_tree)
    return convert_document(root)


def kml_to_geojson(source: str | bytes, config: ConverterConfig | None = None) -> str:
    """Convert KML text to GeoJSON text.

    Raises:
        KmlParseError: If the input is not well-formed XML.
        CoordinateParseError: If any present coordinate text is malformed.
    """
    config = config or ConverterConfig()
    return dump_geojson(convert_kml(source, config), indent=config.indent)


def convert_kml_file(path: Path | str, config: ConverterConfig | None = None) -> str:
    """Read a ``.kml`` or ``.kmz`` file and convert it to GeoJSON text.

    Raises:
        KmlParseError: If the file cannot be read or is not valid KML.
        CoordinateParseError: If any present coordinate text is malformed.
    """
    path = Path(path)
    logger.info("Converting KML file: %s", path.name)
    return kml_to_geojson(read_kml_bytes(path), config)
