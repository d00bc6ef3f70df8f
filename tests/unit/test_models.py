"""Tests for the GeoJSON output models.

Covers:
- Each geometry writes its own ``type`` discriminant
- Feature omits an absent id and keeps key order
- FeatureCollection envelope
"""

from __future__ import annotations

from kml_geojson.models import (
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    Point,
    Polygon,
)


class TestGeometryModels:
    """Geometry to_dict."""

    def test_point(self) -> None:
        assert Point(coordinates=(1.0, 2.0)).to_dict() == {
            "type": "Point",
            "coordinates": [1.0, 2.0],
        }

    def test_line_string(self) -> None:
        line = LineString(coordinates=[(0.0, 0.0), (1.0, 1.0, 2.0)])
        assert line.to_dict() == {
            "type": "LineString",
            "coordinates": [[0.0, 0.0], [1.0, 1.0, 2.0]],
        }

    def test_polygon(self) -> None:
        polygon = Polygon(coordinates=[[(0.0, 0.0), (1.0, 0.0), (0.0, 0.0)]])
        assert polygon.to_dict()["coordinates"] == [[[0.0, 0.0], [1.0, 0.0], [0.0, 0.0]]]

    def test_geometry_collection(self) -> None:
        collection = GeometryCollection(
            geometries=[Point(coordinates=(1.0, 1.0)), LineString(coordinates=[(0.0, 0.0)])]
        )
        assert collection.to_dict() == {
            "type": "GeometryCollection",
            "geometries": [
                {"type": "Point", "coordinates": [1.0, 1.0]},
                {"type": "LineString", "coordinates": [[0.0, 0.0]]},
            ],
        }

    def test_type_is_not_a_field(self) -> None:
        assert Point(coordinates=(0.0, 0.0)) == Point((0.0, 0.0))


class TestFeatureModels:
    """Feature and FeatureCollection to_dict."""

    def test_feature_without_id(self) -> None:
        feature = Feature(geometry=Point(coordinates=(1.0, 2.0)), properties={"name": "A"})
        assert feature.to_dict() == {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [1.0, 2.0]},
            "properties": {"name": "A"},
        }

    def test_feature_with_id_key_order(self) -> None:
        feature = Feature(geometry=Point(coordinates=(1.0, 2.0)), id="p1")
        assert list(feature.to_dict()) == ["type", "id", "geometry", "properties"]

    def test_empty_id_is_kept(self) -> None:
        feature = Feature(geometry=Point(coordinates=(1.0, 2.0)), id="")
        assert feature.to_dict()["id"] == ""

    def test_feature_collection(self) -> None:
        feature = Feature(geometry=Point(coordinates=(1.0, 2.0)))
        collection = FeatureCollection(features=[feature])
        assert len(collection) == 1
        assert collection.to_dict() == {
            "type": "FeatureCollection",
            "features": [feature.to_dict()],
        }
