"""Tests for custom code injection."""

from figma_codegen.core.injector import inject_markup, inject_style, wrap_fragment
from figma_codegen.models.options import CustomCodeInputs, Framework


def test_custom_style_between_markers() -> None:
    style = inject_style(".card {\n}", CustomCodeInputs(style=".x{color:red}"))
    assert style == (
        ".card {\n}\n\n"
        "/* === CUSTOM STYLE === */\n.x{color:red}\n/* === END CUSTOM STYLE === */"
    )


def test_advanced_style_follows_custom_style() -> None:
    custom = CustomCodeInputs(style=".a{}", advanced_style="@keyframes spin {}")
    style = inject_style(".card {\n}", custom)
    assert style.index("CUSTOM STYLE") < style.index("ADVANCED STYLE")
    assert "/* === ADVANCED STYLE === */\n@keyframes spin {}\n/* === END ADVANCED STYLE === */" in style


def test_empty_fragments_leave_output_unchanged() -> None:
    assert inject_style(".card {\n}", CustomCodeInputs()) == ".card {\n}"
    assert inject_markup("<div />\n", CustomCodeInputs(), Framework.REACT) == "<div />\n"


def test_markup_markers_follow_framework_comment_syntax() -> None:
    custom = CustomCodeInputs(markup="export const extra = 1")
    react = inject_markup("export default Card\n", custom, Framework.REACT)
    assert react == (
        "export default Card\n\n"
        "// === CUSTOM MARKUP ===\nexport const extra = 1\n// === END CUSTOM MARKUP ===\n"
    )
    vue = inject_markup("</template>\n", CustomCodeInputs(markup="<p>hi</p>"), Framework.VUE)
    assert "<!-- === CUSTOM MARKUP === -->\n<p>hi</p>\n<!-- === END CUSTOM MARKUP === -->" in vue


def test_fragment_text_is_verbatim() -> None:
    fragment = "  weird {{ }} <text> `tick`\n"
    wrapped = wrap_fragment(fragment, "CUSTOM STYLE")
    assert fragment in wrapped
