"""Read a node's visual attributes into a normalized style record."""

from dataclasses import dataclass
from typing import NamedTuple

from figma_codegen.models.node import Color, DesignNode, LayoutMode


class Rgba(NamedTuple):
    """Color with 0-255 channels and 0-1 alpha."""

    r: int
    g: int
    b: int
    a: float

    def css(self) -> str:
        return f"rgba({self.r}, {self.g}, {self.b}, {format_number(self.a)})"


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return str(round(value, 2))


def px(value: float) -> str:
    return f"{format_number(value)}px"


@dataclass(frozen=True)
class StyleRecord:
    """Normalized styles of one node. ``None`` means the attribute is absent."""

    width: float | None = None
    height: float | None = None
    flex_direction: str | None = None
    gap: float | None = None
    background: Rgba | None = None
    color: Rgba | None = None
    border_radius: float | None = None
    padding_top: float | None = None
    padding_right: float | None = None
    padding_bottom: float | None = None
    padding_left: float | None = None
    font_family: str | None = None
    font_size: float | None = None
    line_height: float | None = None
    letter_spacing: float | None = None

    @property
    def is_empty(self) -> bool:
        return not self.declarations()

    def declarations(self) -> list[tuple[str, str]]:
        """Ordered (camelCase property, css value) pairs."""
        out: list[tuple[str, str]] = []
        if self.width is not None:
            out.append(("width", px(self.width)))
        if self.height is not None:
            out.append(("height", px(self.height)))
        if self.flex_direction is not None:
            out.append(("display", "flex"))
            out.append(("flexDirection", self.flex_direction))
        if self.gap is not None:
            out.append(("gap", px(self.gap)))
        if self.background is not None:
            out.append(("backgroundColor", self.background.css()))
        if self.color is not None:
            out.append(("color", self.color.css()))
        if self.border_radius is not None:
            out.append(("borderRadius", px(self.border_radius)))
        for side in ("top", "right", "bottom", "left"):
            value = getattr(self, f"padding_{side}")
            if value is not None:
                out.append((f"padding{side.capitalize()}", px(value)))
        if self.font_family is not None:
            out.append(("fontFamily", f"'{self.font_family}'"))
        if self.font_size is not None:
            out.append(("fontSize", px(self.font_size)))
        if self.line_height is not None:
            out.append(("lineHeight", px(self.line_height)))
        if self.letter_spacing is not None:
            out.append(("letterSpacing", px(self.letter_spacing)))
        return out


def to_rgba(color: Color, opacity: float | None = None) -> Rgba:
    """Scale 0-1 channels to 0-255; an explicit paint opacity overrides alpha."""
    alpha = opacity if opacity is not None else color.a
    return Rgba(round(color.r * 255), round(color.g * 255), round(color.b * 255), alpha)


def _solid_fill(node: DesignNode) -> Rgba | None:
    for fill in node.fills:
        if fill.visible and fill.type == "SOLID" and fill.color is not None:
            return to_rgba(fill.color, fill.opacity)
    return None


def _background(node: DesignNode) -> Rgba | None:
    if node.background_color is not None:
        return to_rgba(node.background_color)
    # Text fills paint the glyphs, not a background.
    if node.is_text:
        return None
    return _solid_fill(node)


def _present(value: float | None) -> float | None:
    """Zero and missing values both produce no rule."""
    return value if value else None


def extract_styles(node: DesignNode) -> StyleRecord:
    """Build the style record for a single node (children are not inspected)."""
    box = node.bounding_box
    flowing = node.layout_mode is not LayoutMode.NONE
    text = node.style if node.is_text else None

    return StyleRecord(
        width=_present(box.width) if box else None,
        height=_present(box.height) if box else None,
        flex_direction=(
            ("row" if node.layout_mode is LayoutMode.HORIZONTAL else "column") if flowing else None
        ),
        gap=_present(node.item_spacing) if flowing else None,
        background=_background(node),
        color=_solid_fill(node) if node.is_text else None,
        border_radius=_present(node.corner_radius),
        padding_top=_present(node.padding_top),
        padding_right=_present(node.padding_right),
        padding_bottom=_present(node.padding_bottom),
        padding_left=_present(node.padding_left),
        font_family=text.font_family if text else None,
        font_size=_present(text.font_size) if text else None,
        line_height=_present(text.line_height_px) if text else None,
        letter_spacing=_present(text.letter_spacing) if text else None,
    )
