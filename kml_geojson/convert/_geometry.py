"""Recursive geometry extraction from Placemark and container elements.

Geometry types are visited in the fixed ``GEOMETRY_TYPES`` order and every
matching child of each type is converted, so a placemark holding both a
Point and a LineString yields two geometries, Point first, regardless of
their document order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kml_geojson.convert._coordinates import parse_coordinate, parse_coordinates
from kml_geojson.convert._xml import child, child_text, children, is_extension, text_of
from kml_geojson.core.constants import CONTAINER_TYPES, GEOMETRY_TYPES
from kml_geojson.models.geometry import LineString, Point, Polygon

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_geojson.models.geometry import Coordinate, Geometry


@dataclass(slots=True)
class ExtractedGeometry:
    """Geometries found under a node, plus per-track timestamp sequences."""

    geometries: list[Geometry] = field(default_factory=list)
    times: list[list[str]] = field(default_factory=list)

    @property
    def coord_times(self) -> list[str] | list[list[str]] | None:
        """Timestamps for the ``coordTimes`` property.

        A single track yields its own sequence; several tracks yield a
        sequence of sequences; no tracks yield ``None``.
        """
        if not self.times:
            return None
        if len(self.times) == 1:
            return self.times[0]
        return [list(t) for t in self.times]


@dataclass(slots=True)
class TrackCoords:
    """Parallel coordinate and timestamp sequences of one track."""

    coordinates: list[Coordinate] = field(default_factory=list)
    times: list[str] = field(default_factory=list)


def extract_geometries(node: _Element) -> ExtractedGeometry:
    """Resolve all geometries directly under *node*.

    A ``MultiGeometry`` or ``MultiTrack`` child (either namespace) takes
    over extraction entirely; siblings at this level are ignored.

    Raises:
        CoordinateParseError: If present coordinate text is malformed.
    """
    for container_name in CONTAINER_TYPES:
        container = child(node, container_name)
        if container is not None:
            return extract_geometries(container)

    result = ExtractedGeometry()
    for name, extension in GEOMETRY_TYPES:
        for element in children(node, name):
            if is_extension(element) != extension:
                continue
            if name == "Point":
                _add_point(element, result)
            elif name == "LineString":
                _add_line_string(element, result)
            elif name == "Polygon":
                _add_polygon(element, result)
            else:
                _add_track(element, result)
    return result


def read_track(track: _Element) -> TrackCoords:
    """Read ``coord`` and ``when`` children of a Track element.

    Default-namespace ``coord`` elements are used when present, otherwise
    the ``gx:coord`` ones.
    """
    coord_nodes = [c for c in children(track, "coord") if not is_extension(c)]
    if not coord_nodes:
        coord_nodes = [c for c in children(track, "coord") if is_extension(c)]

    coords = TrackCoords()
    for node in coord_nodes:
        coord = parse_coordinate(text_of(node))
        if coord is not None:
            coords.coordinates.append(coord)
    for when in children(track, "when"):
        coords.times.append(text_of(when) or "")
    return coords


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _add_point(element: _Element, result: ExtractedGeometry) -> None:
    coord = parse_coordinate(child_text(element, "coordinates"))
    if coord is not None:
        result.geometries.append(Point(coordinates=coord))


def _add_line_string(element: _Element, result: ExtractedGeometry) -> None:
    coords = parse_coordinates(child_text(element, "coordinates"))
    if coords:
        result.geometries.append(LineString(coordinates=coords))


def _add_polygon(element: _Element, result: ExtractedGeometry) -> None:
    # Inner rings are collected before the outer ring.
    rings: list[_Element] = []
    for boundary_name in ("innerBoundaryIs", "outerBoundaryIs"):
        for boundary in children(element, boundary_name):
            rings.extend(children(boundary, "LinearRing"))

    coordinates: list[list[Coordinate]] = []
    for ring in rings:
        ring_coords = parse_coordinates(child_text(ring, "coordinates"))
        if ring_coords:
            coordinates.append(ring_coords)

    if coordinates:
        result.geometries.append(Polygon(coordinates=coordinates))


def _add_track(element: _Element, result: ExtractedGeometry) -> None:
    track = read_track(element)
    if track.coordinates:
        result.geometries.append(LineString(coordinates=track.coordinates))
    if track.times:
        result.times.append(track.times)
