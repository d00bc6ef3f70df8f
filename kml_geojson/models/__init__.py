"""Data models for conversion output.

- Geometry: tagged union of Point, LineString, Polygon, GeometryCollection
- Feature: one converted placemark
- FeatureCollection: the conversion result envelope
"""

from kml_geojson.models.feature import (
    Feature,
    FeatureCollection,
    PropertyValue,
)
from kml_geojson.models.geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    Point,
    Polygon,
)

__all__ = [
    "Coordinate",
    "Feature",
    "FeatureCollection",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "Point",
    "Polygon",
    "PropertyValue",
]
