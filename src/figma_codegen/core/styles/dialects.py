"""Render style records in the supported stylesheet dialects."""

import math

from figma_codegen.config import MAX_SPACING_STEP, RADIUS_CLASSES
from figma_codegen.core.naming import camel_to_kebab, scope_class
from figma_codegen.core.styles.extractor import Rgba, StyleRecord, px
from figma_codegen.models.options import Styling


def spacing_step(value: float) -> str:
    """Map pixels onto the 4px spacing scale, bracketed beyond the last step."""
    divided = value / 4
    if divided > MAX_SPACING_STEP:
        return f"[{px(value)}]"
    return str(max(0, math.floor(divided)))


def radius_class(radius: float) -> str:
    for bound, name in RADIUS_CLASSES:
        if radius <= bound:
            return name
    return f"rounded-[{px(radius)}]"


def color_token(color: Rgba) -> str:
    """Coarse palette bucket for a color."""
    r, g, b = color.r / 255, color.g / 255, color.b / 255
    if r > 0.9 and g > 0.9 and b > 0.9:
        return "white"
    if r < 0.1 and g < 0.1 and b < 0.1:
        return "black"
    if r > 0.8 and g < 0.3 and b < 0.3:
        return "red-500"
    if r < 0.3 and g > 0.8 and b < 0.3:
        return "green-500"
    if r < 0.3 and g < 0.3 and b > 0.8:
        return "blue-500"
    return "gray-500"


def utility_classes(record: StyleRecord) -> list[str]:
    """Utility class tokens for a style record, in a stable order."""
    classes: list[str] = []
    if record.flex_direction is not None:
        classes += ["flex", "flex-row" if record.flex_direction == "row" else "flex-col"]
    if record.gap is not None:
        classes.append(f"gap-{spacing_step(record.gap)}")
    for prefix, value in (
        ("pl", record.padding_left),
        ("pr", record.padding_right),
        ("pt", record.padding_top),
        ("pb", record.padding_bottom),
    ):
        if value is not None:
            classes.append(f"{prefix}-{spacing_step(value)}")
    if record.width is not None:
        classes.append(f"w-[{px(record.width)}]")
    if record.height is not None:
        classes.append(f"h-[{px(record.height)}]")
    if record.background is not None:
        classes.append(f"bg-{color_token(record.background)}")
    if record.color is not None:
        classes.append(f"text-{color_token(record.color)}")
    if record.border_radius is not None:
        classes.append(radius_class(record.border_radius))
    if record.font_size is not None:
        classes.append(f"text-[{px(record.font_size)}]")
    if record.font_family is not None:
        classes.append(f"font-['{record.font_family.replace(' ', '_')}']")
    if record.line_height is not None:
        classes.append(f"leading-[{px(record.line_height)}]")
    if record.letter_spacing is not None:
        classes.append(f"tracking-[{px(record.letter_spacing)}]")
    return classes


def css_body(record: StyleRecord, *, indent: str = "  ") -> str:
    return "\n".join(
        f"{indent}{camel_to_kebab(prop)}: {value};" for prop, value in record.declarations()
    )


def css_rule(record: StyleRecord, selector: str) -> str:
    body = css_body(record)
    return f"{selector} {{\n{body}\n}}" if body else f"{selector} {{\n}}"


def styled_name(component_name: str) -> str:
    return f"Styled{component_name}"


def emit_stylesheet(
    record: StyleRecord,
    styling: Styling,
    component_name: str,
    *,
    tag: str = "div",
) -> str:
    """Render the component's style block in the requested dialect.

    Args:
        record: Styles of the component root.
        styling: Target dialect.
        component_name: Sanitized component name; the scope name derives from it.
        tag: Root element tag, used by the styled-components declaration.
    """
    selector = f".{scope_class(component_name)}"
    match styling:
        case Styling.TAILWIND:
            classes = " ".join(utility_classes(record))
            if not classes:
                return f"/* Tailwind classes: none */\n\n{selector} {{\n}}"
            return f"/* Tailwind classes: {classes} */\n\n{selector} {{\n  @apply {classes};\n}}"
        case Styling.CSS_MODULES | Styling.PLAIN_CSS:
            return css_rule(record, selector)
        case Styling.STYLED_COMPONENTS:
            body = css_body(record)
            if body:
                body += "\n"
            return (
                'import styled from "styled-components"\n\n'
                f"export const {styled_name(component_name)} = styled.{tag}`\n{body}`"
            )


def react_inline_style(record: StyleRecord) -> str:
    """``{{ width: "120px" }}`` expression for a JSX ``style`` attribute."""
    entries = ", ".join(f'{prop}: "{value}"' for prop, value in record.declarations())
    return f"{{{{ {entries} }}}}" if entries else ""


def inline_style(record: StyleRecord) -> str:
    """Plain ``style`` attribute value."""
    return "; ".join(f"{camel_to_kebab(prop)}: {value}" for prop, value in record.declarations())

