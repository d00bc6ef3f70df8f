"""Input/output helpers around the conversion engine.

- ``dump_geojson``: serialise a FeatureCollection to GeoJSON text
- ``read_kml_bytes``: read a ``.kml`` file, or the main document of a ``.kmz``
"""

from __future__ import annotations

import json
import zipfile
from typing import TYPE_CHECKING

from kml_geojson.core.exceptions import KmlParseError

if TYPE_CHECKING:
    from pathlib import Path

    from kml_geojson.models.feature import FeatureCollection

_ZIP_MAGIC = b"PK\x03\x04"


def dump_geojson(collection: FeatureCollection, indent: int | None = 2) -> str:
    """Serialise *collection* to GeoJSON text.

    Keys keep model insertion order; absent values are never present in
    the mapping, so nothing is written as ``null``.
    """
    return json.dumps(
        collection.to_dict(), indent=indent, ensure_ascii=False, allow_nan=False
    )


def read_kml_bytes(path: Path) -> bytes:
    """Return the KML document bytes stored at *path*.

    KMZ archives are detected by content; ``doc.kml`` is preferred, else
    the first ``.kml`` member.

    Raises:
        KmlParseError: If the file cannot be read or a KMZ holds no KML.
    """
    try:
        content = path.read_bytes()
    except OSError as exc:
        msg = f"Cannot read KML file: {exc}"
        raise KmlParseError(msg) from exc

    if not content.startswith(_ZIP_MAGIC):
        return content

    try:
        with zipfile.ZipFile(path) as archive:
            members = [n for n in archive.namelist() if n.lower().endswith(".kml")]
            if not members:
                msg = f"No .kml document found in KMZ archive {path.name}"
                raise KmlParseError(msg)
            main = next(
                (n for n in members if n.lower().rsplit("/", 1)[-1] == "doc.kml"),
                members[0],
            )
            return archive.read(main)
    except zipfile.BadZipFile as exc:
        msg = f"Corrupt KMZ archive {path.name}: {exc}"
        raise KmlParseError(msg) from exc
