"""Accessibility checks over a node subtree."""

from figma_codegen.config import (
    A_MIN_SCORE,
    AA_MIN_SCORE,
    INTERACTIVE_KEYWORDS,
    LOW_CONTRAST_PENALTY,
    MIN_CONTRAST_RATIO,
    MISSING_ALT_PENALTY,
)
from figma_codegen.core.analysis.contrast import PlaceholderContrastEstimator
from figma_codegen.core.markup.synthesizer import is_media
from figma_codegen.models.artifact import AccessibilityIssue, AccessibilityReport, Severity
from figma_codegen.models.node import DesignNode
from figma_codegen.protocols import ContrastEstimator

INTERACTIVE_SUGGESTIONS = (
    "Ensure keyboard navigation support",
    "Add ARIA labels for screen readers",
    "Use proper focus states",
)
CONTRAST_SUGGESTION = "Verify text contrast meets WCAG AA standards"


def compliance_tier(score: int) -> str:
    if score >= AA_MIN_SCORE:
        return "AA"
    if score >= A_MIN_SCORE:
        return "A"
    return "Non-compliant"


def is_interactive(node: DesignNode) -> bool:
    name = node.name.lower()
    return any(keyword in name for keyword in INTERACTIVE_KEYWORDS)


def analyze_accessibility(
    node: DesignNode,
    *,
    contrast: ContrastEstimator | None = None,
) -> AccessibilityReport:
    """Score a subtree for known accessibility gaps.

    Nodes are checked in pre-order; issues and suggestions keep that order and
    suggestions are not repeated.

    Args:
        node: Root of the subtree to inspect.
        contrast: Contrast estimator for text nodes (placeholder by default).

    Returns:
        Report with a 0-100 score and its compliance tier.
    """
    estimator = contrast or PlaceholderContrastEstimator()
    issues: list[AccessibilityIssue] = []
    suggestions: list[str] = []
    score = 100

    def suggest(text: str) -> None:
        if text not in suggestions:
            suggestions.append(text)

    for current in node.walk():
        if is_media(current):
            issues.append(
                AccessibilityIssue(
                    severity=Severity.ERROR,
                    message="Image missing alt text",
                    element=current.name,
                    fix="Add alt attribute with descriptive text",
                )
            )
            score -= MISSING_ALT_PENALTY

        if current.is_text:
            if estimator.estimate(current) < MIN_CONTRAST_RATIO:
                issues.append(
                    AccessibilityIssue(
                        severity=Severity.WARNING,
                        message="Low text contrast",
                        element=current.name,
                        fix="Increase contrast between text and background",
                    )
                )
                score -= LOW_CONTRAST_PENALTY
            else:
                suggest(CONTRAST_SUGGESTION)

        if is_interactive(current):
            for text in INTERACTIVE_SUGGESTIONS:
                suggest(text)

    score = max(0, score)
    return AccessibilityReport(
        score=score,
        issues=tuple(issues),
        suggestions=tuple(suggestions),
        compliance=compliance_tier(score),
    )
