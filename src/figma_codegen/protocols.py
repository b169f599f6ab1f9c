"""Protocols for pluggable collaborators of the generator."""

from typing import Protocol, runtime_checkable

from figma_codegen.models.artifact import GeneratedArtifact
from figma_codegen.models.node import DesignNode
from figma_codegen.models.options import GenerationOptions


@runtime_checkable
class ContrastEstimator(Protocol):
    """Estimates the text/background contrast ratio of a text node."""

    def estimate(self, node: DesignNode) -> float:
        """Return a WCAG-style contrast ratio (1.0 to 21.0)."""
        ...


@runtime_checkable
class ArtifactSinkProtocol(Protocol):
    """Destination for generated artifacts (files, memory, ...)."""

    def write_artifact(
        self, artifact: GeneratedArtifact, *, options: GenerationOptions
    ) -> list[str]:
        """Persist one artifact, returning the names written."""
        ...
