"""KML coordinate text parsing.

Coordinates are written as ``lon,lat[,alt]`` tuples separated by
whitespace. Numbers always use ``.`` as decimal point; ``float()`` never
consults the process locale, so parsing is locale-invariant.

A malformed number inside present coordinate text is fatal for the
whole conversion (``CoordinateParseError``), unlike missing optional
elements which are silently skipped.
"""

from __future__ import annotations

import math
import re

from kml_geojson.core.exceptions import CoordinateParseError
from kml_geojson.models.geometry import Coordinate

_COMPONENT_SEPARATORS = re.compile(r"[\s,]+")
_SPACED_COMMA = re.compile(r"\s*,\s*")
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_coordinate(text: str | None) -> Coordinate | None:
    """Parse one coordinate tuple; ``None`` if *text* holds no numbers.

    Raises:
        CoordinateParseError: If a token is not a number, or the tuple
            does not have 2 or 3 components.
    """
    if text is None:
        return None
    tokens = [t for t in _COMPONENT_SEPARATORS.split(text.strip()) if t]
    if not tokens:
        return None
    values = tuple(_to_float(token) for token in tokens)
    if len(values) not in (2, 3):
        msg = f"Coordinate {text.strip()!r} has {len(values)} component(s), expected 2 or 3"
        raise CoordinateParseError(msg, token=text.strip())
    return values


def parse_coordinates(text: str | None) -> list[Coordinate]:
    """Parse whitespace-separated coordinate tuples.

    Returns an empty list for absent or blank text.

    Raises:
        CoordinateParseError: If any tuple is malformed.
    """
    if text is None:
        return []
    coords: list[Coordinate] = []
    for chunk in _SPACED_COMMA.sub(",", text).split():
        coord = parse_coordinate(chunk)
        if coord is not None:
            coords.append(coord)
    return coords


def _to_float(token: str) -> float:
    # float() alone would also accept nan, inf and digit separators.
    if _DECIMAL.fullmatch(token) is None:
        msg = f"Malformed coordinate value {token!r}"
        raise CoordinateParseError(msg, token=token)
    value = float(token)
    if not math.isfinite(value):
        msg = f"Coordinate value {token!r} is out of range"
        raise CoordinateParseError(msg, token=token)
    return value
