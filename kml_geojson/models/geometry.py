"""GeoJSON geometry models.

Each geometry is a frozen dataclass whose ``type`` class attribute is the
GeoJSON discriminant. ``to_dict()`` writes that discriminant itself, so
the emitter never inspects Python types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

Coordinate = tuple[float, ...]
"""A single position: ``(lon, lat)`` or ``(lon, lat, alt)``."""


@dataclass(frozen=True, slots=True)
class Point:
    """GeoJSON Point."""

    type: ClassVar[str] = "Point"

    coordinates: Coordinate

    def to_dict(self) -> dict[str, object]:
        return {"type": self.type, "coordinates": list(self.coordinates)}


@dataclass(frozen=True, slots=True)
class LineString:
    """GeoJSON LineString. Also used for ``Track`` geometry."""

    type: ClassVar[str] = "LineString"

    coordinates: list[Coordinate] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {"type": self.type, "coordinates": [list(c) for c in self.coordinates]}


@dataclass(frozen=True, slots=True)
class Polygon:
    """GeoJSON Polygon.

    Rings keep KML extraction order: inner boundaries precede the outer
    boundary.
    """

    type: ClassVar[str] = "Polygon"

    coordinates: list[list[Coordinate]] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.type,
            "coordinates": [[list(c) for c in ring] for ring in self.coordinates],
        }


@dataclass(frozen=True, slots=True)
class GeometryCollection:
    """GeoJSON GeometryCollection of two or more placemark geometries."""

    type: ClassVar[str] = "GeometryCollection"

    geometries: list[Geometry] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {"type": self.type, "geometries": [g.to_dict() for g in self.geometries]}


Geometry = Point | LineString | Polygon | GeometryCollection
