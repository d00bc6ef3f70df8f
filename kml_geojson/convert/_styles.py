"""Style and StyleMap indexing and resolution.

Every ``Style`` with an ``id`` is identified by a content hash of its
serialised subtree, so identical styles declared under different ids
share a hash. ``StyleMap`` elements indirect through their ``normal``
pair to the style actually applied to a placemark.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kml_geojson.convert._xml import child, child_text, children, descendants, serialize
from kml_geojson.core.constants import DEFAULT_STYLE_MAP_KEY, STYLE_ELEMENTS

if TYPE_CHECKING:
    from lxml.etree import _Element

    from kml_geojson.models.feature import PropertyValue

logger = logging.getLogger("kml_geojson.convert")


def style_hash(element: _Element) -> str:
    """Return a deterministic content hash of *element*'s serialised form."""
    return hashlib.md5(serialize(element), usedforsecurity=False).hexdigest()


def normalize_style_url(style_url: str) -> str:
    """Prefix a style reference with ``#`` unless it already has one."""
    return style_url if style_url.startswith("#") else f"#{style_url}"


@dataclass(slots=True)
class StyleIndex:
    """Per-document style lookup tables.

    Attributes:
        hashes: ``"#" + id`` → content hash, for Style and StyleMap elements.
        by_hash: content hash → the Style element it was computed from.
        style_maps: ``"#" + id`` → pair key (``normal``, ``highlight``) →
            referenced style URL.
    """

    hashes: dict[str, str] = field(default_factory=dict)
    by_hash: dict[str, _Element] = field(default_factory=dict)
    style_maps: dict[str, dict[str, str]] = field(default_factory=dict)

    @classmethod
    def build(cls, container: _Element) -> StyleIndex:
        """Index every Style and StyleMap under *container* in one pass."""
        index = cls()
        for style in descendants(container, "Style"):
            style_id = style.get("id")
            if not style_id:
                continue
            digest = style_hash(style)
            index.hashes[f"#{style_id}"] = digest
            index.by_hash[digest] = style

        for style_map in descendants(container, "StyleMap"):
            map_id = style_map.get("id")
            if not map_id:
                continue
            index.hashes[f"#{map_id}"] = style_hash(style_map)
            pairs: dict[str, str] = {}
            for pair in children(style_map, "Pair"):
                key = child_text(pair, "key")
                url = child_text(pair, "styleUrl")
                if key and url:
                    pairs[key.strip()] = url.strip()
            index.style_maps[f"#{map_id}"] = pairs

        logger.debug(
            "Indexed %d style(s) and %d style map(s)",
            len(index.by_hash),
            len(index.style_maps),
        )
        return index

    def resolve(self, style_url: str, properties: dict[str, PropertyValue]) -> _Element | None:
        """Record style hashes for *style_url* and return the referenced Style.

        Sets ``styleMapHash`` (the pair mapping) and ``styleHash`` in
        *properties* when the reference resolves. Returns ``None`` when
        no Style element backs the resolved hash.
        """
        digest: str | None = None
        if style_url in self.style_maps:
            pairs = self.style_maps[style_url]
            properties["styleMapHash"] = dict(pairs)
            normal = pairs.get(DEFAULT_STYLE_MAP_KEY)
            if normal is not None:
                digest = self.hashes.get(normalize_style_url(normal))
        elif style_url in self.hashes:
            digest = self.hashes[style_url]

        if digest is None:
            logger.debug("Style reference %s did not resolve", style_url)
            return None
        properties["styleHash"] = digest
        return self.by_hash.get(digest)


def inline_styles(placemark: _Element, referenced: _Element | None) -> dict[str, _Element]:
    """Collect sub-style elements for a placemark.

    Sub-styles from the placemark's own ``Style`` take precedence; any
    not declared inline fall back to the *referenced* style.
    """
    found: dict[str, _Element] = {}
    inline = child(placemark, "Style")
    for name in STYLE_ELEMENTS:
        element = child(inline, name) if inline is not None else None
        if element is None and referenced is not None:
            element = child(referenced, name)
        if element is not None:
            found[name] = element
    return found
