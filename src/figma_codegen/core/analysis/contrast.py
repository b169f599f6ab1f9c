"""Text contrast estimation."""

from figma_codegen.models.node import Color, DesignNode

WHITE = Color(1.0, 1.0, 1.0)


def _channel(value: float) -> float:
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    return 0.2126 * _channel(color.r) + 0.7152 * _channel(color.g) + 0.0722 * _channel(color.b)


def contrast_ratio(foreground: Color, background: Color) -> float:
    """WCAG 2.x contrast ratio between two opaque colors, 1.0 to 21.0."""
    lighter, darker = sorted(
        (relative_luminance(foreground), relative_luminance(background)), reverse=True
    )
    return (lighter + 0.05) / (darker + 0.05)


class PlaceholderContrastEstimator:
    """Reports every text node as exactly meeting the AA body-text ratio."""

    ratio: float = 4.5

    def estimate(self, node: DesignNode) -> float:
        return self.ratio


class FillContrastEstimator:
    """Compares a text node's first solid fill against a fixed background."""

    def __init__(self, background: Color = WHITE) -> None:
        self.background = background

    def estimate(self, node: DesignNode) -> float:
        for fill in node.fills:
            if fill.visible and fill.type == "SOLID" and fill.color is not None:
                return contrast_ratio(fill.color, self.background)
        # Unfilled text renders black by default.
        return contrast_ratio(Color(0.0, 0.0, 0.0), self.background)
