"""Configuration constants for figma-codegen."""

from figma_codegen.models.options import Framework

# Accessibility scoring.
MISSING_ALT_PENALTY: int = 15
LOW_CONTRAST_PENALTY: int = 10
MIN_CONTRAST_RATIO: float = 4.5
AA_MIN_SCORE: int = 80
A_MIN_SCORE: int = 60

# Substrings of a lower-cased node name that mark it as interactive.
INTERACTIVE_KEYWORDS: tuple[str, ...] = ("button", "link", "input", "click")

# Text nodes above this font size, or named like this, render as headings.
HEADING_FONT_SIZE: float = 20
HEADING_KEYWORDS: tuple[str, ...] = ("title", "heading", "header")
HEADING_TAG: str = "h2"

BREAKPOINTS: tuple[str, ...] = ("mobile", "tablet", "desktop")

# Utility-class spacing scale: px / 4, bracketed arbitrary value beyond this step.
MAX_SPACING_STEP: int = 96

# Corner radius buckets, checked in order: (upper bound px, class).
RADIUS_CLASSES: tuple[tuple[float, str], ...] = (
    (2, "rounded-sm"),
    (4, "rounded"),
    (6, "rounded-md"),
    (8, "rounded-lg"),
    (12, "rounded-xl"),
    (16, "rounded-2xl"),
)

# Inferred dependency identifiers.
CORE_DEPENDENCIES: dict[Framework, tuple[str, ...]] = {
    Framework.REACT: ("react",),
    Framework.VUE: ("vue",),
    Framework.HTML: (),
}
TYPES_DEPENDENCIES: dict[Framework, tuple[str, ...]] = {
    Framework.REACT: ("@types/react",),
    Framework.VUE: ("vue-tsc",),
    Framework.HTML: (),
}
IMAGE_DEPENDENCIES: dict[Framework, tuple[str, ...]] = {
    Framework.REACT: ("next/image",),
    Framework.VUE: ("@nuxt/image",),
    Framework.HTML: (),
}
STYLED_DEPENDENCY: str = "styled-components"
