"""Component classification, complexity and fidelity estimates."""

from figma_codegen.config import (
    CORE_DEPENDENCIES,
    IMAGE_DEPENDENCIES,
    STYLED_DEPENDENCY,
    TYPES_DEPENDENCIES,
)
from figma_codegen.core.markup.synthesizer import has_media
from figma_codegen.models.artifact import ComponentType, Complexity, GenerationMetadata
from figma_codegen.models.node import DesignNode
from figma_codegen.models.options import GenerationOptions, Styling


_FAITHFUL_TYPES = (ComponentType.BUTTON, ComponentType.TEXT, ComponentType.CARD)


def detect_component_type(node: DesignNode) -> ComponentType:
    name = node.name.lower()
    if "button" in name:
        return ComponentType.BUTTON
    if "card" in name:
        return ComponentType.CARD
    if "text" in name or node.is_text:
        return ComponentType.TEXT
    if "input" in name:
        return ComponentType.INPUT
    if len(node.children) > 3:
        return ComponentType.LAYOUT
    return ComponentType.COMPLEX


def complexity_score(node: DesignNode) -> int:
    score = len(node.children)
    if node.effects:
        score += 2
    if len(node.fills) > 1:
        score += 1
    return score


def calculate_complexity(node: DesignNode) -> Complexity:
    score = complexity_score(node)
    if score <= 3:
        return Complexity.SIMPLE
    if score <= 8:
        return Complexity.MEDIUM
    return Complexity.COMPLEX


def estimate_accuracy(node: DesignNode) -> int:
    accuracy = 85
    if calculate_complexity(node) is Complexity.SIMPLE:
        accuracy += 10
    if len(node.children) > 5:
        accuracy -= 5
    if detect_component_type(node) in _FAITHFUL_TYPES:
        accuracy += 5
    return min(100, max(70, accuracy))


def extract_dependencies(node: DesignNode, options: GenerationOptions) -> tuple[str, ...]:
    """Packages the generated source needs, in a fixed order."""
    deps = list(CORE_DEPENDENCIES[options.framework])
    if options.typescript:
        deps += TYPES_DEPENDENCIES[options.framework]
    if has_media(node):
        deps += IMAGE_DEPENDENCIES[options.framework]
    if options.styling is Styling.STYLED_COMPONENTS:
        deps.append(STYLED_DEPENDENCY)
    return tuple(deps)


def compute_metadata(
    node: DesignNode, options: GenerationOptions, *, generation_ms: int = 0
) -> GenerationMetadata:
    return GenerationMetadata(
        source_node_id=node.id,
        component_type=detect_component_type(node),
        complexity=calculate_complexity(node),
        estimated_accuracy=estimate_accuracy(node),
        dependencies=extract_dependencies(node, options),
        generation_ms=generation_ms,
    )
