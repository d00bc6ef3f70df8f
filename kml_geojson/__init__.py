"""KML to GeoJSON conversion.

Transforms KML 2.2 documents (including Google's ``gx`` track extension)
into a GeoJSON ``FeatureCollection``: placemark geometry, resolved
styles, ExtendedData, time spans and track timestamps.
"""

from kml_geojson.convert import (
    convert_document,
    convert_kml,
    convert_kml_file,
    kml_to_geojson,
)
from kml_geojson.core.config import ConverterConfig
from kml_geojson.core.exceptions import (
    ConversionError,
    CoordinateParseError,
    KmlParseError,
)
from kml_geojson.models import Feature, FeatureCollection

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConverterConfig",
    "CoordinateParseError",
    "Feature",
    "FeatureCollection",
    "KmlParseError",
    "__version__",
    "convert_document",
    "convert_kml",
    "convert_kml_file",
    "kml_to_geojson",
]
