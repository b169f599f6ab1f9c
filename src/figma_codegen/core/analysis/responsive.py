"""Responsiveness inference."""

from figma_codegen.config import BREAKPOINTS
from figma_codegen.models.artifact import ResponsiveReport
from figma_codegen.models.node import DesignNode, LayoutMode


def breakpoint_placeholder(breakpoint: str) -> str:
    return f"/* {breakpoint} responsive styles */"


def analyze_responsive(node: DesignNode) -> ResponsiveReport:
    """A node adapts if it uses auto-layout or is pinned other than top-left."""
    flowing = node.layout_mode in (LayoutMode.HORIZONTAL, LayoutMode.VERTICAL)
    constrained = node.constraints is not None and not node.constraints.is_default
    mobile, tablet, desktop = (breakpoint_placeholder(bp) for bp in BREAKPOINTS)
    return ResponsiveReport(
        mobile=mobile,
        tablet=tablet,
        desktop=desktop,
        has_responsive_design=flowing or constrained,
    )
