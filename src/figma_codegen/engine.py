"""Generation facade: select target nodes and build one artifact per node."""

import time

from loguru import logger

from figma_codegen.core.analysis.accessibility import analyze_accessibility
from figma_codegen.core.analysis.metadata import compute_metadata
from figma_codegen.core.analysis.responsive import analyze_responsive
from figma_codegen.core.analysis.summary import find_main_frames
from figma_codegen.core.injector import inject_markup, inject_style
from figma_codegen.core.markup.synthesizer import MarkupSynthesizer
from figma_codegen.core.naming import component_identifier
from figma_codegen.core.styles.dialects import emit_stylesheet
from figma_codegen.core.styles.extractor import extract_styles
from figma_codegen.models.artifact import GeneratedArtifact
from figma_codegen.models.node import DesignDocument, DesignNode
from figma_codegen.models.options import (
    CustomCodeInputs,
    GenerationOptions,
    validate_options,
)
from figma_codegen.protocols import ContrastEstimator


def select_targets(document: DesignDocument) -> list[tuple[DesignNode, str]]:
    """Resolve declared components, falling back to the document's main frames.

    Returns:
        (node, display name) pairs in declaration / depth-first order.
    """
    targets: list[tuple[DesignNode, str]] = []
    for component in document.components:
        node = document.root.find(component.node_id)
        if node is None:
            logger.warning(
                "Skipping component {!r}: node {} not found", component.name, component.node_id
            )
            continue
        targets.append((node, component.name))

    if targets:
        logger.debug("Generating {} declared components", len(targets))
        return targets

    frames = find_main_frames(document.root)
    logger.debug("No resolvable components, falling back to {} main frames", len(frames))
    return [(frame, frame.name) for frame in frames]


class GenerationEngine:
    """Turns design nodes into generated artifacts.

    One engine holds one immutable set of options; it keeps no state between
    calls, so an instance can be reused across documents.
    """

    def __init__(
        self,
        options: GenerationOptions,
        custom_code: CustomCodeInputs | None = None,
        *,
        contrast: ContrastEstimator | None = None,
    ) -> None:
        validate_options(options)
        self.options = options
        self.custom_code = custom_code or CustomCodeInputs()
        self.contrast = contrast
        self.synthesizer = MarkupSynthesizer(options)

    def generate(self, document: DesignDocument) -> list[GeneratedArtifact]:
        artifacts = [self.generate_node(node, name) for node, name in select_targets(document)]
        logger.debug("Generated {} artifacts from {!r}", len(artifacts), document.name)
        return artifacts

    def generate_node(self, node: DesignNode, display_name: str) -> GeneratedArtifact:
        """Build the artifact for a single target node."""
        started = time.perf_counter()
        options = self.options
        name = component_identifier(display_name)

        markup = self.synthesizer.synthesize(node, name)
        base_tag = self.synthesizer.tag_for(node)
        style = emit_stylesheet(
            extract_styles(node),
            options.styling,
            name,
            tag="img" if base_tag == "Image" else base_tag,
        )
        type_description = (
            self.synthesizer.type_description(node, name) if options.typescript else None
        )
        accessibility = (
            analyze_accessibility(node, contrast=self.contrast) if options.accessibility else None
        )
        responsive = analyze_responsive(node) if options.responsive else None

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        metadata = compute_metadata(node, options, generation_ms=elapsed_ms)
        logger.debug("Generated {} from node {} in {} ms", name, node.id, elapsed_ms)

        return GeneratedArtifact(
            id=node.id,
            name=name,
            markup=inject_markup(markup, self.custom_code, options.framework),
            style=inject_style(style, self.custom_code),
            metadata=metadata,
            type_description=type_description,
            accessibility=accessibility,
            responsive=responsive,
        )


def generate_artifacts(
    document: DesignDocument,
    options: GenerationOptions | None = None,
    custom_code: CustomCodeInputs | None = None,
    *,
    contrast: ContrastEstimator | None = None,
) -> list[GeneratedArtifact]:
    """Generate one artifact per target node of ``document``.

    Raises:
        UnsupportedOptionsError: If ``options`` cannot be honoured; raised before
            any node is processed.
    """
    engine = GenerationEngine(options or GenerationOptions(), custom_code, contrast=contrast)
    return engine.generate(document)
