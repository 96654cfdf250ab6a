"""Tests for description and source-metadata extraction."""

from __future__ import annotations

from reflectdoc.collaborators import SourceMetadata, resolve_description, resolve_source_metadata
from reflectdoc.models import parse_node


def test_description_joins_summary_and_body() -> None:
    node = parse_node({"name": "a", "comment": {"shortText": "Short.\n", "text": "\nLonger body.\n"}})

    assert resolve_description(node) == "Short.\n\nLonger body."


def test_description_absent_for_blank_or_missing_comment() -> None:
    assert resolve_description(parse_node({"name": "a"})) is None
    assert resolve_description(parse_node({"name": "a", "comment": {"shortText": "  "}})) is None


def test_source_metadata_uses_first_source() -> None:
    node = parse_node(
        {
            "name": "a",
            "sources": [
                {"fileName": "src/util/Widget.ts", "line": 8, "url": "https://example.test/Widget.ts#L8"},
                {"fileName": "src/other.ts", "line": 1},
            ],
        }
    )

    meta = resolve_source_metadata(node)

    assert meta == SourceMetadata(
        file="Widget.ts", path="src/util", line=8, url="https://example.test/Widget.ts#L8"
    )
    assert meta.as_dict()["file"] == "Widget.ts"


def test_source_metadata_absent_without_sources() -> None:
    assert resolve_source_metadata(parse_node({"name": "a"})) is None


def test_source_metadata_for_root_level_file() -> None:
    meta = resolve_source_metadata(parse_node({"name": "a", "sources": [{"fileName": "index.ts"}]}))

    assert meta == SourceMetadata(file="index.ts", path="")
    assert meta.as_dict() == {"file": "index.ts", "path": ""}
