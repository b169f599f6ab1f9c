"""Tests for the export JSON reader and file loader."""

import json
from pathlib import Path
from typing import Any

import pytest

from figma_codegen.core.importer.json_reader import parse_document_data, parse_node
from figma_codegen.core.importer.loader import load_document, load_text
from figma_codegen.models.node import Color, LayoutMode, NodeType


def test_parse_document_reads_tree_and_components(sample_export: dict[str, Any]) -> None:
    document = parse_document_data(sample_export)
    assert document.name == "Marketing Site"
    assert document.root.type is NodeType.DOCUMENT
    assert [c.node_id for c in document.components] == ["2:1", "9:9"]
    assert document.components[0].name == "Primary Button"
    assert document.components[0].description == "Main CTA"


def test_parse_node_maps_visual_attributes(sample_export: dict[str, Any]) -> None:
    document = parse_document_data(sample_export)
    card = document.root.find("1:1")
    assert card is not None
    assert card.layout_mode is LayoutMode.VERTICAL
    assert card.item_spacing == 8
    assert card.corner_radius == 8
    assert card.bounding_box is not None and card.bounding_box.width == 320
    assert card.fills[0].color == Color(1.0, 1.0, 1.0, 1.0)
    assert card.constraints is None

    title = document.root.find("1:2")
    assert title is not None
    assert title.style is not None
    assert title.style.font_family == "Inter"
    assert title.style.font_size == 24

    image = document.root.find("1:3")
    assert image is not None and image.is_image
    assert image.fills[0].image_ref == "img-1"


def test_children_keep_declared_order() -> None:
    node = parse_node(
        {
            "id": "a",
            "type": "FRAME",
            "children": [{"id": "c"}, {"id": "b"}, {"id": "d"}],
        }
    )
    assert [child.id for child in node.children] == ["c", "b", "d"]


def test_unknown_type_and_layout_fall_back() -> None:
    node = parse_node({"id": "x", "type": "STICKY", "layoutMode": "GRID"})
    assert node.type is NodeType.UNKNOWN
    assert node.layout_mode is LayoutMode.NONE


def test_duplicate_ids_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate node id"):
        parse_node({"id": "a", "children": [{"id": "b"}, {"id": "b"}]})


def test_missing_id_rejected() -> None:
    with pytest.raises(ValueError, match="without id"):
        parse_node({"name": "Nameless"})


def test_bare_node_becomes_root() -> None:
    document = parse_document_data({"id": "5:1", "name": "Solo", "type": "FRAME"})
    assert document.name == "Solo"
    assert document.root.id == "5:1"
    assert document.components == ()


def test_export_without_root_rejected() -> None:
    with pytest.raises(ValueError, match="neither"):
        parse_document_data({"components": {}})


def test_load_document_reads_file(export_file: Path) -> None:
    document = load_document(export_file)
    assert document.root.find("2:2") is not None


def test_load_document_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / "nope.json")


def test_load_document_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text(json.dumps([1, 2]), encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        load_document(path)


def test_load_text(tmp_path: Path) -> None:
    path = tmp_path / "custom.css"
    path.write_text(".x{color:red}", encoding="utf-8")
    assert load_text(path) == ".x{color:red}"
    assert load_text(None) == ""
