"""Design-document to component source generator."""

from figma_codegen.core.importer.json_reader import parse_document_data
from figma_codegen.core.importer.loader import load_document
from figma_codegen.engine import GenerationEngine, generate_artifacts
from figma_codegen.models.artifact import GeneratedArtifact
from figma_codegen.models.options import (
    CustomCodeInputs,
    Framework,
    GenerationOptions,
    Styling,
    UnsupportedOptionsError,
)
from figma_codegen.protocols import ArtifactSinkProtocol, ContrastEstimator
from figma_codegen.writer import ArtifactWriter

__all__ = [
    "ArtifactSinkProtocol",
    "ArtifactWriter",
    "ContrastEstimator",
    "CustomCodeInputs",
    "Framework",
    "GeneratedArtifact",
    "GenerationEngine",
    "GenerationOptions",
    "Styling",
    "UnsupportedOptionsError",
    "generate_artifacts",
    "load_document",
    "parse_document_data",
]
