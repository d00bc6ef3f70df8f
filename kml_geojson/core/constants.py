"""Shared conversion constants — single source of truth.

Namespaces, the fixed geometry-type iteration order and the style
property key table used by the placemark transformer.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# XML namespaces
# ---------------------------------------------------------------------------

KML_NAMESPACE: str = "http://www.opengis.net/kml/2.2"
"""Default KML 2.2 namespace."""

GX_NAMESPACE: str = "http://www.google.com/kml/ext/2.2"
"""Google extension namespace (``gx:Track``, ``gx:MultiTrack``, ``gx:coord``)."""

# ---------------------------------------------------------------------------
# Geometry extraction
# ---------------------------------------------------------------------------

GEOMETRY_TYPES: tuple[tuple[str, bool], ...] = (
    ("Polygon", False),
    ("Point", False),
    ("LineString", False),
    ("Track", False),
    ("Track", True),
)
"""Geometry element names in extraction order.

The flag selects elements in the Google extension namespace (``True``)
or in any other namespace (``False``).
"""

CONTAINER_TYPES: tuple[str, ...] = ("MultiGeometry", "MultiTrack")
"""Geometry containers that replace extraction at their parent's level."""

# ---------------------------------------------------------------------------
# Style properties
# ---------------------------------------------------------------------------

STYLE_ELEMENTS: tuple[str, ...] = ("IconStyle", "LabelStyle", "LineStyle", "PolyStyle")
"""Sub-style elements that fall back to the referenced style."""

COLOR_KEYS: dict[str, str] = {
    "icon": "icon",
    "label": "label-color",
    "stroke": "stroke",
    "fill": "fill",
}
"""Property key receiving the decoded color, per style prefix."""

DEFAULT_STYLE_MAP_KEY: str = "normal"
"""StyleMap pair used to resolve a placemark's effective style."""
