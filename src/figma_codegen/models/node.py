"""Domain models for design documents."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum


class NodeType(StrEnum):
    """Design node kinds as exported by the design tool."""

    DOCUMENT = "DOCUMENT"
    CANVAS = "CANVAS"
    FRAME = "FRAME"
    GROUP = "GROUP"
    VECTOR = "VECTOR"
    BOOLEAN_OPERATION = "BOOLEAN_OPERATION"
    STAR = "STAR"
    LINE = "LINE"
    ELLIPSE = "ELLIPSE"
    REGULAR_POLYGON = "REGULAR_POLYGON"
    RECTANGLE = "RECTANGLE"
    TEXT = "TEXT"
    SLICE = "SLICE"
    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, raw: str | None) -> "NodeType":
        """Map a raw type string to a member, UNKNOWN if unrecognised."""
        try:
            return cls(raw)
        except ValueError:
            return cls.UNKNOWN


class LayoutMode(StrEnum):
    """Auto-layout flow direction."""

    NONE = "NONE"
    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


@dataclass(frozen=True)
class Color:
    """RGBA color with channels in the 0-1 range."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class Paint:
    """A fill or stroke."""

    type: str
    color: Color | None = None
    opacity: float | None = None
    visible: bool = True
    image_ref: str | None = None

    @property
    def is_image(self) -> bool:
        return self.type == "IMAGE"


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class LayoutConstraint:
    """Alignment constraints relative to the parent frame."""

    vertical: str = "TOP"
    horizontal: str = "LEFT"

    @property
    def is_default(self) -> bool:
        return self.vertical == "TOP" and self.horizontal == "LEFT"


@dataclass(frozen=True)
class TextStyle:
    font_family: str | None = None
    font_size: float | None = None
    line_height_px: float | None = None
    letter_spacing: float | None = None


@dataclass(frozen=True)
class Effect:
    """A shadow or blur."""

    type: str
    visible: bool = True
    radius: float | None = None


@dataclass(frozen=True)
class DesignNode:
    """A single node in a design document tree.

    Children are owned by their parent and kept in render order.
    """

    id: str
    name: str
    type: NodeType
    children: tuple["DesignNode", ...] = ()
    bounding_box: BoundingBox | None = None
    fills: tuple[Paint, ...] = ()
    strokes: tuple[Paint, ...] = ()
    background_color: Color | None = None
    corner_radius: float | None = None
    layout_mode: LayoutMode = LayoutMode.NONE
    item_spacing: float | None = None
    padding_left: float | None = None
    padding_right: float | None = None
    padding_top: float | None = None
    padding_bottom: float | None = None
    constraints: LayoutConstraint | None = None
    characters: str | None = None
    style: TextStyle | None = None
    effects: tuple[Effect, ...] = ()

    @property
    def is_image(self) -> bool:
        """True if any fill paints an image."""
        return any(fill.is_image for fill in self.fills)

    @property
    def is_text(self) -> bool:
        return self.type is NodeType.TEXT

    def walk(self) -> Iterator["DesignNode"]:
        """Yield this node and all descendants in pre-order."""
        stack: list[DesignNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def find(self, node_id: str) -> "DesignNode | None":
        """Return the descendant (or self) with the given id."""
        return next((n for n in self.walk() if n.id == node_id), None)


@dataclass(frozen=True)
class ComponentDescriptor:
    """A named component declared by the document."""

    node_id: str
    name: str
    key: str = ""
    description: str = ""


@dataclass(frozen=True)
class DesignDocument:
    """A parsed design file: the node tree plus its declared components."""

    name: str
    root: DesignNode
    components: tuple[ComponentDescriptor, ...] = field(default=())
