"""XML document parsing and namespace-agnostic element access.

KML mixes the default namespace with Google's extension namespace for
equivalent constructs (``Track`` exists in both), and real-world files
often omit or misdeclare namespaces. Child elements are therefore
resolved by local name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from lxml import etree

from kml_geojson.core.constants import GX_NAMESPACE
from kml_geojson.core.exceptions import KmlParseError

if TYPE_CHECKING:
    from lxml.etree import _Element

logger = logging.getLogger("kml_geojson.convert")


# ---------------------------------------------------------------------------
# Document parsing
# ---------------------------------------------------------------------------


def parse_document(source: str | bytes, *, huge_tree: bool = False) -> _Element:
    """Parse KML text into an lxml element tree and return its root.

    Raises:
        KmlParseError: If the input is empty or not well-formed XML.
    """
    # Text input is already decoded; its encoding declaration no longer applies.
    encoding = "utf-8" if isinstance(source, str) else None
    content = source.encode("utf-8") if isinstance(source, str) else source
    if not content.strip():
        msg = "KML document is empty"
        raise KmlParseError(msg)

    parser = etree.XMLParser(
        resolve_entities=False, no_network=True, huge_tree=huge_tree, encoding=encoding
    )
    try:
        return etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Not valid XML: {exc}"
        raise KmlParseError(msg) from exc


# ---------------------------------------------------------------------------
# Element access
# ---------------------------------------------------------------------------


def local_name(element: _Element) -> str:
    """Return the tag name of *element* without its namespace."""
    return etree.QName(element).localname


def is_extension(element: _Element) -> bool:
    """Whether *element* lives in the Google extension namespace."""
    return etree.QName(element).namespace == GX_NAMESPACE


def children(element: _Element, name: str) -> Iterator[_Element]:
    """Yield direct children of *element* named *name*, in document order."""
    for child in element:
        if isinstance(child.tag, str) and local_name(child) == name:
            yield child


def child(element: _Element, name: str) -> _Element | None:
    """Return the first direct child of *element* named *name*, or ``None``."""
    return next(children(element, name), None)


def descendants(element: _Element, name: str) -> Iterator[_Element]:
    """Yield *element* and its descendants named *name*, in document order."""
    for node in element.iter():
        if isinstance(node.tag, str) and local_name(node) == name:
            yield node


def text_of(element: _Element | None) -> str | None:
    """Return all text content of *element* (CDATA included), or ``None``."""
    if element is None:
        return None
    return "".join(element.itertext())


def child_text(element: _Element, name: str) -> str | None:
    """Return the text of the first child named *name*, or ``None``."""
    return text_of(child(element, name))


def serialize(element: _Element) -> bytes:
    """Serialise *element*'s subtree (without trailing text) to bytes."""
    return etree.tostring(element, with_tail=False)
