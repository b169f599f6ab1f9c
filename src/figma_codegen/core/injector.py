"""Append caller-supplied fragments to generated source."""

from figma_codegen.models.options import CustomCodeInputs, Framework

MARKUP_LABEL = "CUSTOM MARKUP"
STYLE_LABEL = "CUSTOM STYLE"
ADVANCED_LABEL = "ADVANCED STYLE"


def _markers(label: str, framework: Framework | None) -> tuple[str, str]:
    begin, end = f"=== {label} ===", f"=== END {label} ==="
    match framework:
        case None:
            return f"/* {begin} */", f"/* {end} */"
        case Framework.REACT:
            return f"// {begin}", f"// {end}"
        case Framework.VUE | Framework.HTML:
            return f"<!-- {begin} -->", f"<!-- {end} -->"


def wrap_fragment(fragment: str, label: str, framework: Framework | None = None) -> str:
    """Delimit ``fragment`` with begin/end comments; the text itself is untouched."""
    begin, end = _markers(label, framework)
    return f"{begin}\n{fragment}\n{end}"


def inject_markup(markup: str, custom: CustomCodeInputs, framework: Framework) -> str:
    if not custom.markup:
        return markup
    base = markup.rstrip("\n")
    return f"{base}\n\n{wrap_fragment(custom.markup, MARKUP_LABEL, framework)}\n"


def inject_style(style: str, custom: CustomCodeInputs) -> str:
    sections = [style]
    if custom.style:
        sections.append(wrap_fragment(custom.style, STYLE_LABEL))
    if custom.advanced_style:
        sections.append(wrap_fragment(custom.advanced_style, ADVANCED_LABEL))
    return "\n\n".join(sections)
