"""Parse design-tool JSON exports into domain models."""

from typing import Any

from figma_codegen.models.node import (
    BoundingBox,
    Color,
    ComponentDescriptor,
    DesignDocument,
    DesignNode,
    Effect,
    LayoutConstraint,
    LayoutMode,
    NodeType,
    Paint,
    TextStyle,
)


def _color(raw: dict[str, Any] | None) -> Color | None:
    if not raw:
        return None
    return Color(
        r=float(raw.get("r", 0)),
        g=float(raw.get("g", 0)),
        b=float(raw.get("b", 0)),
        a=float(raw.get("a", 1)),
    )


def _paints(raw: list[dict[str, Any]] | None) -> tuple[Paint, ...]:
    return tuple(
        Paint(
            type=p.get("type", "SOLID"),
            color=_color(p.get("color")),
            opacity=p.get("opacity"),
            visible=p.get("visible", True),
            image_ref=p.get("imageRef"),
        )
        for p in raw or []
    )


def _bounding_box(raw: dict[str, Any] | None) -> BoundingBox | None:
    if not raw:
        return None
    return BoundingBox(
        x=raw.get("x", 0),
        y=raw.get("y", 0),
        width=raw.get("width", 0),
        height=raw.get("height", 0),
    )


def _text_style(raw: dict[str, Any] | None) -> TextStyle | None:
    if not raw:
        return None
    return TextStyle(
        font_family=raw.get("fontFamily"),
        font_size=raw.get("fontSize"),
        line_height_px=raw.get("lineHeightPx"),
        letter_spacing=raw.get("letterSpacing"),
    )


def _layout_mode(raw: str | None) -> LayoutMode:
    try:
        return LayoutMode(raw or "NONE")
    except ValueError:
        return LayoutMode.NONE


def parse_node(data: dict[str, Any], *, _seen: set[str] | None = None) -> DesignNode:
    """Parse a raw node dict (and its subtree) into a DesignNode.

    Raises:
        ValueError: If the node has no id or an id repeats within the subtree.
    """
    seen = _seen if _seen is not None else set()
    node_id = data.get("id")
    if not node_id:
        msg = f"Node without id: {data.get('name')!r}"
        raise ValueError(msg)
    if node_id in seen:
        msg = f"Duplicate node id: {node_id!r}"
        raise ValueError(msg)
    seen.add(node_id)

    constraints = data.get("constraints")
    children = tuple(parse_node(child, _seen=seen) for child in data.get("children", []))

    return DesignNode(
        id=node_id,
        name=data.get("name", ""),
        type=NodeType.parse(data.get("type")),
        children=children,
        bounding_box=_bounding_box(data.get("absoluteBoundingBox")),
        fills=_paints(data.get("fills")),
        strokes=_paints(data.get("strokes")),
        background_color=_color(data.get("backgroundColor")),
        corner_radius=data.get("cornerRadius"),
        layout_mode=_layout_mode(data.get("layoutMode")),
        item_spacing=data.get("itemSpacing"),
        padding_left=data.get("paddingLeft"),
        padding_right=data.get("paddingRight"),
        padding_top=data.get("paddingTop"),
        padding_bottom=data.get("paddingBottom"),
        constraints=(
            LayoutConstraint(
                vertical=constraints.get("vertical", "TOP"),
                horizontal=constraints.get("horizontal", "LEFT"),
            )
            if constraints
            else None
        ),
        characters=data.get("characters"),
        style=_text_style(data.get("style")),
        effects=tuple(
            Effect(type=e.get("type", ""), visible=e.get("visible", True), radius=e.get("radius"))
            for e in data.get("effects", [])
        ),
    )


def parse_document_data(data: dict[str, Any]) -> DesignDocument:
    """Parse a file export into a DesignDocument.

    Accepts either a full file body (``{"document": ..., "components": ...}``)
    or a bare node dict, which becomes the root.

    Args:
        data: Raw export data.

    Returns:
        The parsed document with its declared components in declaration order.
    """
    if "document" in data:
        raw_root = data["document"]
        name = data.get("name") or raw_root.get("name", "")
    elif "id" in data:
        raw_root = data
        name = data.get("name", "")
    else:
        msg = "Export has neither a 'document' key nor a root node id"
        raise ValueError(msg)

    root = parse_node(raw_root)
    components = tuple(
        ComponentDescriptor(
            node_id=node_id,
            name=raw.get("name", ""),
            key=raw.get("key", ""),
            description=raw.get("description", ""),
        )
        for node_id, raw in (data.get("components") or {}).items()
    )
    return DesignDocument(name=name, root=root, components=components)
