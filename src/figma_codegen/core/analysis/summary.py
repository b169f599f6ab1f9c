"""Document-level statistics."""

from collections import Counter
from dataclasses import dataclass

from figma_codegen.models.node import DesignDocument, DesignNode, NodeType


@dataclass(frozen=True)
class DocumentSummary:
    """Counts describing a design document."""

    total_nodes: int
    node_type_counts: tuple[tuple[str, int], ...]
    component_count: int
    frame_candidates: int


def find_main_frames(root: DesignNode) -> list[DesignNode]:
    """Frames with at least one child, in depth-first order."""
    return [n for n in root.walk() if n.type is NodeType.FRAME and n.children]


def summarize_document(document: DesignDocument) -> DocumentSummary:
    counts: Counter[str] = Counter()
    for node in document.root.walk():
        counts[node.type.value] += 1
    return DocumentSummary(
        total_nodes=sum(counts.values()),
        node_type_counts=tuple(counts.items()),
        component_count=len(document.components),
        frame_candidates=len(find_main_frames(document.root)),
    )
