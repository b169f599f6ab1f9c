"""Recursive markup synthesis for React, Vue and static HTML output."""

import html
import json
from dataclasses import dataclass
from enum import Enum

from figma_codegen.config import HEADING_FONT_SIZE, HEADING_KEYWORDS, HEADING_TAG
from figma_codegen.core.naming import node_class, scope_class
from figma_codegen.core.styles.dialects import (
    inline_style,
    react_inline_style,
    styled_name,
    utility_classes,
)
from figma_codegen.core.styles.extractor import extract_styles, format_number
from figma_codegen.models.node import DesignNode, NodeType
from figma_codegen.models.options import Framework, GenerationOptions, Styling


class ElementKind(Enum):
    TEXT = "text"
    HEADING = "heading"
    CONTAINER = "container"
    MEDIA = "media"


@dataclass(frozen=True)
class Prop:
    name: str
    type: str
    optional: bool

    def declaration(self) -> str:
        return f"{self.name}{'?' if self.optional else ''}: {self.type};"


_REF_TYPES = {
    "span": "HTMLSpanElement",
    HEADING_TAG: "HTMLHeadingElement",
    "img": "HTMLImageElement",
    "Image": "HTMLImageElement",
}


def is_heading(node: DesignNode) -> bool:
    """Text named like a title, or set larger than body copy."""
    if not node.is_text:
        return False
    name = node.name.lower()
    if any(keyword in name for keyword in HEADING_KEYWORDS):
        return True
    size = node.style.font_size if node.style else None
    return size is not None and size > HEADING_FONT_SIZE


def element_kind(node: DesignNode) -> ElementKind:
    match node.type:
        case NodeType.TEXT:
            return ElementKind.HEADING if is_heading(node) else ElementKind.TEXT
        case NodeType.RECTANGLE | NodeType.ELLIPSE if node.is_image:
            return ElementKind.MEDIA
        case (
            NodeType.FRAME
            | NodeType.GROUP
            | NodeType.COMPONENT
            | NodeType.COMPONENT_SET
            | NodeType.INSTANCE
        ):
            return ElementKind.CONTAINER
        case _:
            # Shapes, vectors and unrecognised types become plain containers.
            return ElementKind.CONTAINER


def is_media(node: DesignNode) -> bool:
    """True if the node renders as an image element."""
    return element_kind(node) is ElementKind.MEDIA


def has_media(node: DesignNode) -> bool:
    return any(is_media(n) for n in node.walk())


def infer_props(node: DesignNode, framework: Framework) -> list[Prop]:
    """Props implied by the nodes of a subtree, deduplicated in a fixed order."""
    has_text = any(n.is_text for n in node.walk())
    props: list[Prop] = []
    if has_text:
        child_type = "React.ReactNode" if framework is Framework.REACT else "string"
        props.append(Prop("children", child_type, optional=True))
    if has_media(node):
        props += [
            Prop("src", "string", optional=False),
            Prop("alt", "string", optional=False),
            Prop("width", "number", optional=False),
            Prop("height", "number", optional=False),
        ]
    props.append(Prop("className", "string", optional=True))
    return props


def _interface(name: str, props: list[Prop], *, exported: bool = False) -> str:
    body = "\n".join(f"  {p.declaration()}" for p in props)
    return f"{'export ' if exported else ''}interface {name}Props {{\n{body}\n}}"


class MarkupSynthesizer:
    """Builds a complete component declaration from a node subtree."""

    def __init__(self, options: GenerationOptions) -> None:
        self.options = options

    # --- tags and attributes -------------------------------------------

    def tag_for(self, node: DesignNode) -> str:
        match element_kind(node):
            case ElementKind.TEXT:
                return "span"
            case ElementKind.HEADING:
                return HEADING_TAG
            case ElementKind.MEDIA:
                if self.options.framework is Framework.REACT and self.options.optimize_images:
                    return "Image"
                return "img"
            case ElementKind.CONTAINER:
                return "div"

    def _class_attr(self, node: DesignNode, component_name: str, depth: int) -> str:
        framework = self.options.framework
        attr = "className" if framework is Framework.REACT else "class"
        styling = self.options.styling

        if styling is Styling.TAILWIND:
            value = " ".join(utility_classes(extract_styles(node)))
        elif depth > 0:
            value = node_class(node.name)
        elif styling is Styling.STYLED_COMPONENTS:
            return ""
        elif styling is Styling.CSS_MODULES:
            scope = scope_class(component_name)
            if framework is Framework.VUE:
                return f":class=\"styles['{scope}']\""
            return f'className={{styles["{scope}"]}}'
        else:
            value = scope_class(component_name)

        return f'{attr}="{value}"' if value else ""

    def _style_attr(self, node: DesignNode) -> str:
        if not self.options.inline_styles:
            return ""
        record = extract_styles(node)
        if self.options.framework is Framework.REACT:
            expr = react_inline_style(record)
            return f"style={expr}" if expr else ""
        value = inline_style(record)
        return f'style="{value}"' if value else ""

    def _media_attrs(self, node: DesignNode) -> list[str]:
        match self.options.framework:
            case Framework.REACT:
                return ["src={src}", "alt={alt}", "width={width}", "height={height}"]
            case Framework.VUE:
                return [':src="src"', ':alt="alt"', ':width="width"', ':height="height"']
            case Framework.HTML:
                attrs = ['src=""', f'alt="{html.escape(node.name)}"']
                if node.bounding_box is not None:
                    attrs.append(f'width="{format_number(node.bounding_box.width)}"')
                    attrs.append(f'height="{format_number(node.bounding_box.height)}"')
                return attrs

    def _text(self, node: DesignNode) -> str:
        content = node.characters or ""
        if self.options.framework is Framework.REACT:
            return "{" + json.dumps(content, ensure_ascii=False) + "}"
        text = html.escape(content).replace("\n", "<br />")
        if self.options.framework is Framework.VUE:
            # Entity-encoded braces are never read as template interpolation.
            text = text.replace("{", "&#123;").replace("}", "&#125;")
        return text

    # --- tree ----------------------------------------------------------

    def render_element(
        self, node: DesignNode, component_name: str, depth: int, indent: str = ""
    ) -> list[str]:
        """Render a node and its subtree as indented lines (pre-order)."""
        pad = indent + "  " * depth
        kind = element_kind(node)
        tag = self.tag_for(node)
        if depth == 0 and self.options.styling is Styling.STYLED_COMPONENTS:
            tag = styled_name(component_name)

        attrs = [self._class_attr(node, component_name, depth), self._style_attr(node)]
        if kind is ElementKind.MEDIA:
            attrs += self._media_attrs(node)
        attr_text = "".join(f" {a}" for a in attrs if a)
        void_close = f"></{tag}>" if self.options.framework is Framework.HTML else " />"

        if kind in (ElementKind.TEXT, ElementKind.HEADING):
            return [f"{pad}<{tag}{attr_text}>", f"{pad}  {self._text(node)}", f"{pad}</{tag}>"]
        if kind is ElementKind.MEDIA:
            return [f"{pad}<{tag}{attr_text} />"]
        if not node.children:
            return [f"{pad}<{tag}{attr_text}{void_close}"]

        lines = [f"{pad}<{tag}{attr_text}>"]
        for child in node.children:
            lines += self.render_element(child, component_name, depth + 1, indent)
        lines.append(f"{pad}</{tag}>")
        return lines

    # --- declarations --------------------------------------------------

    def _imports(self, node: DesignNode, component_name: str) -> list[str]:
        framework = self.options.framework
        styling = self.options.styling
        imports: list[str] = []
        if framework is Framework.REACT:
            imports.append('import React from "react"')
            if self.options.optimize_images and has_media(node):
                imports.append('import Image from "next/image"')
        if framework is Framework.HTML:
            if styling is not Styling.TAILWIND:
                imports.append(f'<link rel="stylesheet" href="{component_name}.css" />')
            return imports

        match styling:
            case Styling.CSS_MODULES:
                imports.append(f'import styles from "./{component_name}.module.css"')
            case Styling.PLAIN_CSS:
                imports.append(f'import "./{component_name}.css"')
            case Styling.STYLED_COMPONENTS:
                styled = styled_name(component_name)
                imports.append(f'import {{ {styled} }} from "./{component_name}.styles"')
            case Styling.TAILWIND:
                pass
        return imports

    def synthesize(self, node: DesignNode, component_name: str) -> str:
        """Return the full component source for ``node``."""
        match self.options.framework:
            case Framework.REACT:
                return self._react(node, component_name)
            case Framework.VUE:
                return self._vue(node, component_name)
            case Framework.HTML:
                return self._html(node, component_name)

    def _react(self, node: DesignNode, name: str) -> str:
        props = infer_props(node, Framework.REACT)
        params = ", ".join(p.name for p in props)
        parts = ["\n".join(self._imports(node, name))]
        if self.options.typescript and props:
            parts.append(_interface(name, props))
            signature = f"export const {name}: React.FC<{name}Props> = ({{ {params} }}) => {{"
        else:
            signature = f"export const {name} = ({{ {params} }}) => {{"
        tree = "\n".join(self.render_element(node, name, 0, indent="    "))
        parts.append(f"{signature}\n  return (\n{tree}\n  )\n}}")
        parts.append(f"export default {name}")
        return "\n\n".join(parts) + "\n"

    def _vue(self, node: DesignNode, name: str) -> str:
        props = infer_props(node, Framework.VUE)
        script_lines = self._imports(node, name)
        if script_lines:
            script_lines.append("")
        if self.options.typescript:
            script_lines += [_interface(name, props), "", f"defineProps<{name}Props>()"]
            opening = '<script setup lang="ts">'
        else:
            names = ", ".join(json.dumps(p.name) for p in props)
            script_lines.append(f"defineProps([{names}])")
            opening = "<script setup>"
        script_lines.append(f'defineOptions({{ name: "{name}" }})')
        script = "\n".join([opening, *script_lines, "</script>"])
        tree = "\n".join(self.render_element(node, name, 0, indent="  "))
        return f"{script}\n\n<template>\n{tree}\n</template>\n"

    def _html(self, node: DesignNode, name: str) -> str:
        parts = self._imports(node, name)
        parts.append(f"<!-- {name} -->")
        parts += self.render_element(node, name, 0)
        return "\n".join(parts) + "\n"

    def type_description(self, node: DesignNode, component_name: str) -> str:
        """Standalone props interface plus a ref type for the root element."""
        props = infer_props(node, self.options.framework)
        ref_type = _REF_TYPES.get(self.tag_for(node), "HTMLDivElement")
        return (
            f"{_interface(component_name, props, exported=True)}\n\n"
            f"export type {component_name}Ref = {ref_type};\n"
        )
