"""Shared test fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

from figma_codegen.core.importer.json_reader import parse_document_data
from figma_codegen.models.node import DesignDocument

WHITE = {"r": 1, "g": 1, "b": 1, "a": 1}
BLUE = {"r": 0.1, "g": 0.2, "b": 0.9, "a": 1}

SAMPLE_EXPORT: dict[str, Any] = {
    "name": "Marketing Site",
    "document": {
        "id": "0:0",
        "name": "Document",
        "type": "DOCUMENT",
        "children": [
            {
                "id": "0:1",
                "name": "Page 1",
                "type": "CANVAS",
                "children": [
                    {
                        "id": "1:1",
                        "name": "Card 1",
                        "type": "FRAME",
                        "absoluteBoundingBox": {"x": 0, "y": 0, "width": 320, "height": 200},
                        "fills": [{"type": "SOLID", "color": WHITE}],
                        "cornerRadius": 8,
                        "layoutMode": "VERTICAL",
                        "itemSpacing": 8,
                        "paddingLeft": 16,
                        "paddingRight": 16,
                        "paddingTop": 16,
                        "paddingBottom": 16,
                        "children": [
                            {
                                "id": "1:2",
                                "name": "Title",
                                "type": "TEXT",
                                "characters": "Welcome",
                                "style": {"fontFamily": "Inter", "fontSize": 24},
                            },
                            {
                                "id": "1:3",
                                "name": "Hero Image",
                                "type": "RECTANGLE",
                                "absoluteBoundingBox": {
                                    "x": 0,
                                    "y": 40,
                                    "width": 320,
                                    "height": 120,
                                },
                                "fills": [{"type": "IMAGE", "imageRef": "img-1"}],
                            },
                        ],
                    },
                    {
                        "id": "2:1",
                        "name": "Primary Button",
                        "type": "FRAME",
                        "fills": [{"type": "SOLID", "color": BLUE}],
                        "constraints": {"vertical": "TOP", "horizontal": "CENTER"},
                        "children": [
                            {
                                "id": "2:2",
                                "name": "Label",
                                "type": "TEXT",
                                "characters": "Submit",
                                "style": {"fontSize": 14},
                            },
                        ],
                    },
                ],
            },
        ],
    },
    "components": {
        "2:1": {"key": "btn", "name": "Primary Button", "description": "Main CTA"},
        "9:9": {"key": "gone", "name": "Deleted Thing"},
    },
}


@pytest.fixture
def sample_export() -> dict[str, Any]:
    """A fresh copy of the sample export, safe to mutate."""
    return json.loads(json.dumps(SAMPLE_EXPORT))


@pytest.fixture
def sample_document(sample_export: dict[str, Any]) -> DesignDocument:
    return parse_document_data(sample_export)


@pytest.fixture
def export_file(tmp_path: Path, sample_export: dict[str, Any]) -> Path:
    path = tmp_path / "design.json"
    path.write_text(json.dumps(sample_export), encoding="utf-8")
    return path
