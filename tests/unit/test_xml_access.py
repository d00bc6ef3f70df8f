"""Tests for document parsing and namespace-agnostic element access.

Covers:
- Child lookup by local name across default, gx and absent namespaces
- Lazy, restartable child iteration in document order
- Comments and processing instructions are ignored
- Text extraction including CDATA
- Parse failures surface as KmlParseError
"""

from __future__ import annotations

import pytest
from lxml import etree

from kml_geojson.convert._xml import (
    child,
    child_text,
    children,
    descendants,
    is_extension,
    local_name,
    parse_document,
    text_of,
)
from kml_geojson.core.exceptions import KmlParseError


class TestChildLookup:
    """child / children resolve by local name."""

    def test_matches_across_namespaces(self, kml_element) -> None:
        placemark = kml_element("<gx:Track/><Track/>")
        tracks = list(children(placemark, "Track"))
        assert len(tracks) == 2
        assert is_extension(tracks[0]) is True
        assert is_extension(tracks[1]) is False

    def test_matches_without_namespace(self) -> None:
        placemark = etree.fromstring(b"<Placemark><name>A</name></Placemark>")
        assert child_text(placemark, "name") == "A"

    def test_first_child_or_none(self, kml_element) -> None:
        placemark = kml_element("<name>first</name><name>second</name>")
        assert child_text(placemark, "name") == "first"
        assert child(placemark, "address") is None
        assert child_text(placemark, "address") is None

    def test_only_direct_children(self, kml_element) -> None:
        placemark = kml_element("<Style><name>inner</name></Style>")
        assert child(placemark, "name") is None

    def test_iteration_is_restartable(self, kml_element) -> None:
        placemark = kml_element("<Point/><Point/><LineString/>")
        assert len(list(children(placemark, "Point"))) == 2
        assert len(list(children(placemark, "Point"))) == 2

    def test_document_order(self, kml_element) -> None:
        placemark = kml_element('<Data name="a"/><Data name="b"/><Data name="c"/>')
        assert [d.get("name") for d in children(placemark, "Data")] == ["a", "b", "c"]

    def test_comments_are_skipped(self, kml_element) -> None:
        placemark = kml_element("<!-- note --><?pi data?><name>A</name>")
        assert child_text(placemark, "name") == "A"
        assert [local_name(c) for c in children(placemark, "name")] == ["name"]


class TestDescendants:
    """descendants walks the full subtree."""

    def test_finds_nested_elements(self, kml_element) -> None:
        folder = kml_element(
            "<Placemark/><Folder><Placemark/><Folder><Placemark/></Folder></Folder>",
            tag="Folder",
        )
        assert len(list(descendants(folder, "Placemark"))) == 3

    def test_includes_element_itself(self, kml_element) -> None:
        placemark = kml_element("<name>A</name>")
        assert list(descendants(placemark, "Placemark")) == [placemark]


class TestText:
    """Text extraction."""

    def test_cdata_is_verbatim(self, kml_element) -> None:
        placemark = kml_element("<description><![CDATA[<b>bold</b> & more]]></description>")
        assert child_text(placemark, "description") == "<b>bold</b> & more"

    def test_mixed_content_is_concatenated(self, kml_element) -> None:
        placemark = kml_element("<description>a<b>b</b>c</description>")
        assert child_text(placemark, "description") == "abc"

    def test_empty_element_is_empty_string(self, kml_element) -> None:
        placemark = kml_element("<name/>")
        assert child_text(placemark, "name") == ""

    def test_none_element(self) -> None:
        assert text_of(None) is None


class TestParseDocument:
    """parse_document error handling."""

    def test_parses_str_with_encoding_declaration(self) -> None:
        root = parse_document('<?xml version="1.0" encoding="UTF-8"?><kml><name>é</name></kml>')
        assert child_text(root, "name") == "é"

    def test_str_ignores_declared_latin1_encoding(self) -> None:
        root = parse_document(
            "<?xml version='1.0' encoding='ISO-8859-1'?><kml><name>Café</name></kml>"
        )
        assert child_text(root, "name") == "Café"

    def test_parses_bytes(self) -> None:
        root = parse_document(b"<kml/>")
        assert local_name(root) == "kml"

    def test_bytes_honour_declared_latin1_encoding(self) -> None:
        root = parse_document(
            b"<?xml version='1.0' encoding='ISO-8859-1'?><kml><name>Caf\xe9</name></kml>"
        )
        assert child_text(root, "name") == "Café"

    def test_empty_input_raises(self) -> None:
        with pytest.raises(KmlParseError) as exc_info:
            parse_document("   ")
        assert "empty" in str(exc_info.value)

    def test_malformed_input_raises(self) -> None:
        with pytest.raises(KmlParseError) as exc_info:
            parse_document("<kml><Placemark></kml>")
        assert "Not valid XML" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, etree.XMLSyntaxError)
