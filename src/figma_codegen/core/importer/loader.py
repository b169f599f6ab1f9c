"""Load design documents from files on disk."""

import json
from pathlib import Path

from loguru import logger

from figma_codegen.core.importer.json_reader import parse_document_data
from figma_codegen.models.node import DesignDocument


def load_document(path: Path) -> DesignDocument:
    """Read and parse a JSON design export.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the JSON is not an object or has no root node.
    """
    if not path.exists():
        msg = f"Design export not found: {path}"
        raise FileNotFoundError(msg)

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        msg = f"Expected a JSON object in {path.name}, got {type(data).__name__}"
        raise ValueError(msg)

    document = parse_document_data(data)
    logger.debug(
        "Loaded {} ({} components declared)", document.name or path.name, len(document.components)
    )
    return document


def load_text(path: Path | None) -> str:
    """Read an optional custom-code fragment, empty when no path is given."""
    if path is None:
        return ""
    return path.read_text(encoding="utf-8")
