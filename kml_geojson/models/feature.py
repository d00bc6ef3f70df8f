"""Feature and FeatureCollection models.

A Feature pairs the geometry resolved from one KML Placemark with its
property bag. The property bag is an insertion-ordered dict; keys appear
only when the corresponding KML construct is present.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kml_geojson.models.geometry import Geometry

PropertyValue = (
    str | int | float | list[float] | list[str] | list[list[str]] | dict[str, str]
)
"""Values a property bag may hold.

Strings (names, colors, ExtendedData), numbers (opacity, scale, width),
``0``/``1`` flags, ``icon-offset`` pairs, ``coordTimes`` sequences and the
nested ``timespan``/``styleMapHash`` string mappings.
"""


@dataclass(slots=True)
class Feature:
    """A GeoJSON Feature converted from a KML Placemark.

    Attributes:
        geometry: Single geometry, or a GeometryCollection when the
            placemark resolved more than one.
        properties: Ordered property bag.
        id: The placemark's ``id`` attribute; ``None`` when absent.
    """

    geometry: Geometry
    properties: dict[str, PropertyValue] = field(default_factory=dict)
    id: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON mapping, omitting an absent ``id``."""
        result: dict[str, object] = {"type": "Feature"}
        if self.id is not None:
            result["id"] = self.id
        result["geometry"] = self.geometry.to_dict()
        result["properties"] = dict(self.properties)
        return result


@dataclass(slots=True)
class FeatureCollection:
    """GeoJSON FeatureCollection in placemark document order."""

    features: list[Feature] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "type": "FeatureCollection",
            "features": [f.to_dict() for f in self.features],
        }

    def __len__(self) -> int:
        return len(self.features)
