"""Fake collaborators and node builders for tests."""

from figma_codegen.models.artifact import GeneratedArtifact
from figma_codegen.models.node import (
    BoundingBox,
    Color,
    DesignNode,
    NodeType,
    Paint,
    TextStyle,
)
from figma_codegen.models.options import GenerationOptions


class FakeSink:
    """In-memory ArtifactSinkProtocol that records every artifact it receives."""

    def __init__(self) -> None:
        self.artifacts: list[GeneratedArtifact] = []

    def write_artifact(
        self, artifact: GeneratedArtifact, *, options: GenerationOptions
    ) -> list[str]:
        self.artifacts.append(artifact)
        return [artifact.name]


class FixedContrastEstimator:
    """Returns the same ratio for every node and records what it was asked about."""

    def __init__(self, ratio: float) -> None:
        self.ratio = ratio
        self.seen: list[str] = []

    def estimate(self, node: DesignNode) -> float:
        self.seen.append(node.id)
        return self.ratio


def make_text(
    name: str = "Label",
    characters: str = "Hello",
    *,
    node_id: str = "t1",
    font_size: float | None = 16,
    fills: tuple[Paint, ...] = (),
) -> DesignNode:
    return DesignNode(
        id=node_id,
        name=name,
        type=NodeType.TEXT,
        characters=characters,
        style=TextStyle(font_size=font_size),
        fills=fills,
    )


def make_image(
    name: str = "Photo", *, node_id: str = "img1", width: float = 120, height: float = 80
) -> DesignNode:
    return DesignNode(
        id=node_id,
        name=name,
        type=NodeType.RECTANGLE,
        bounding_box=BoundingBox(0, 0, width, height),
        fills=(Paint(type="IMAGE", image_ref="ref-1"),),
    )


def make_frame(
    name: str = "Frame",
    children: tuple[DesignNode, ...] = (),
    *,
    node_id: str = "f1",
    **kwargs: object,
) -> DesignNode:
    return DesignNode(id=node_id, name=name, type=NodeType.FRAME, children=children, **kwargs)  # type: ignore[arg-type]


def make_children(count: int, prefix: str = "c") -> tuple[DesignNode, ...]:
    """``count`` childless rectangles with unique ids."""
    return tuple(
        DesignNode(id=f"{prefix}{i}", name=f"Box {i}", type=NodeType.RECTANGLE)
        for i in range(count)
    )


def solid(r: float, g: float, b: float, opacity: float | None = None) -> Paint:
    return Paint(type="SOLID", color=Color(r, g, b), opacity=opacity)
