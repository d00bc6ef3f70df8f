"""Placemark → GeoJSON Feature transformation.

Builds the property bag in a fixed order (text fields, style references,
time, icon/label/line/poly styles, ExtendedData, visibility, track
timestamps) and pairs it with the geometry resolved from the placemark.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from kml_geojson.convert._geometry import extract_geometries
from kml_geojson.convert._styles import inline_styles, normalize_style_url
from kml_geojson.convert._xml import child, child_text, children, text_of
from kml_geojson.core.constants import COLOR_KEYS
from kml_geojson.models.feature import Feature
from kml_geojson.models.geometry import GeometryCollection

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_geojson.convert._styles import StyleIndex
    from kml_geojson.models.feature import PropertyValue

logger = logging.getLogger("kml_geojson.convert")

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def placemark_to_feature(placemark: _Element, styles: StyleIndex) -> Feature | None:
    """Convert a Placemark element to a Feature.

    Returns ``None`` when the placemark has no resolvable geometry.

    Raises:
        CoordinateParseError: If present coordinate text is malformed.
    """
    extracted = extract_geometries(placemark)
    if not extracted.geometries:
        logger.debug(
            "Dropping placemark %r: no geometry resolved",
            placemark.get("id") or child_text(placemark, "name") or "",
        )
        return None

    properties: dict[str, PropertyValue] = {}

    for key in ("name", "address", "description"):
        value = child_text(placemark, key)
        if value and value.strip():
            properties[key] = value

    referenced: _Element | None = None
    style_url = child_text(placemark, "styleUrl")
    if style_url and style_url.strip():
        style_url = normalize_style_url(style_url.strip())
        properties["styleUrl"] = style_url
        referenced = styles.resolve(style_url, properties)

    _set_time(placemark, properties)

    sub_styles = inline_styles(placemark, referenced)
    if "IconStyle" in sub_styles:
        _set_icon_style(sub_styles["IconStyle"], properties)
    if "LabelStyle" in sub_styles:
        set_color(properties, sub_styles["LabelStyle"], "label")
        set_numeric(properties, sub_styles["LabelStyle"], "scale", "label-scale")
    if "LineStyle" in sub_styles:
        set_color(properties, sub_styles["LineStyle"], "stroke")
        set_numeric(properties, sub_styles["LineStyle"], "width", "stroke-width")
    if "PolyStyle" in sub_styles:
        _set_poly_style(sub_styles["PolyStyle"], properties)

    _set_extended_data(placemark, properties)

    visibility = child(placemark, "visibility")
    if visibility is not None:
        properties["visibility"] = text_of(visibility) or ""

    coord_times = extracted.coord_times
    if coord_times is not None:
        properties["coordTimes"] = coord_times

    if len(extracted.geometries) == 1:
        geometry = extracted.geometries[0]
    else:
        geometry = GeometryCollection(geometries=list(extracted.geometries))

    return Feature(geometry=geometry, properties=properties, id=placemark.get("id"))


# ---------------------------------------------------------------------------
# Style property rules
# ---------------------------------------------------------------------------


def set_color(properties: dict[str, PropertyValue], style: _Element, prefix: str) -> None:
    """Decode a KML color into ``<color key>`` and ``<prefix>-opacity``.

    Three and six hex digit values are stored verbatim. Eight digit values are
    ``aabbggrr``: the alpha byte becomes the opacity and the remaining bytes
    are reordered into ``#rrggbb``. Anything else is ignored.
    """
    value = (child_text(style, "color") or "").strip()
    if value.startswith("#"):
        value = value[1:]
    color_key = COLOR_KEYS[prefix]

    if not value or not set(value) <= _HEX_DIGITS:
        return
    if len(value) in (3, 6):
        properties[color_key] = value
    elif len(value) == 8:
        properties[f"{prefix}-opacity"] = int(value[0:2], 16) / 255
        properties[color_key] = f"#{value[6:8]}{value[4:6]}{value[2:4]}"


def set_numeric(
    properties: dict[str, PropertyValue], style: _Element, source: str, target: str
) -> None:
    """Copy a numeric child value into *target* when it parses to a finite number."""
    number = _parse_float(child_text(style, source))
    if number is not None:
        properties[target] = number


def _set_icon_style(style: _Element, properties: dict[str, PropertyValue]) -> None:
    set_color(properties, style, "icon")
    set_numeric(properties, style, "scale", "icon-scale")
    set_numeric(properties, style, "heading", "icon-heading")

    hotspot = child(style, "hotSpot")
    if hotspot is not None:
        left = _parse_float(hotspot.get("x"))
        top = _parse_float(hotspot.get("y"))
        if left is not None and top is not None:
            properties["icon-offset"] = [left, top]

    icon = child(style, "Icon")
    if icon is not None:
        href = child_text(icon, "href")
        if href and href.strip():
            properties["icon"] = href


def _set_poly_style(style: _Element, properties: dict[str, PropertyValue]) -> None:
    set_color(properties, style, "fill")

    fill = child_text(style, "fill")
    if fill and fill.strip() and "fill-opacity" not in properties:
        properties["fill-opacity"] = 1 if fill.strip() == "1" else 0

    outline = child_text(style, "outline")
    if outline and outline.strip() and "stroke-opacity" not in properties:
        properties["stroke-opacity"] = 1 if outline.strip() == "1" else 0


# ---------------------------------------------------------------------------
# Time and ExtendedData
# ---------------------------------------------------------------------------


def _set_time(placemark: _Element, properties: dict[str, PropertyValue]) -> None:
    time_span = child(placemark, "TimeSpan")
    if time_span is not None:
        span: dict[str, str] = {}
        for key in ("begin", "end"):
            value = child_text(time_span, key)
            if value is not None:
                span[key] = value
        if span:
            properties["timespan"] = span

    time_stamp = child(placemark, "TimeStamp")
    if time_stamp is not None:
        when = child_text(time_stamp, "when")
        if when is not None:
            properties["timestamp"] = when


def _set_extended_data(placemark: _Element, properties: dict[str, PropertyValue]) -> None:
    """Flatten ``Data`` and ``SchemaData/SimpleData`` into the property bag."""
    extended = child(placemark, "ExtendedData")
    if extended is None:
        return

    for data in children(extended, "Data"):
        name = data.get("name")
        if name:
            properties[name] = child_text(data, "value") or ""

    for schema_data in children(extended, "SchemaData"):
        for simple_data in children(schema_data, "SimpleData"):
            name = simple_data.get("name")
            if name:
                properties[name] = text_of(simple_data) or ""


def _parse_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None
