"""Generated artifacts and the reports attached to them."""

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from typing import Any


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ComponentType(StrEnum):
    BUTTON = "button"
    CARD = "card"
    TEXT = "text"
    INPUT = "input"
    LAYOUT = "layout"
    COMPLEX = "complex"


class Complexity(StrEnum):
    SIMPLE = "simple"
    MEDIUM = "medium"
    COMPLEX = "complex"


@dataclass(frozen=True)
class AccessibilityIssue:
    severity: Severity
    message: str
    element: str
    fix: str


@dataclass(frozen=True)
class AccessibilityReport:
    """Scored accessibility findings for one component."""

    score: int
    issues: tuple[AccessibilityIssue, ...]
    suggestions: tuple[str, ...]
    compliance: str


@dataclass(frozen=True)
class ResponsiveReport:
    mobile: str
    tablet: str
    desktop: str
    has_responsive_design: bool


@dataclass(frozen=True)
class GenerationMetadata:
    """Classification and fidelity estimate for one component.

    ``generation_ms`` is wall-clock time and is excluded from equality.
    """

    source_node_id: str
    component_type: ComponentType
    complexity: Complexity
    estimated_accuracy: int
    dependencies: tuple[str, ...]
    generation_ms: int = field(default=0, compare=False)


@dataclass(frozen=True)
class GeneratedArtifact:
    """Synthesized source text and reports for one target node."""

    id: str
    name: str
    markup: str
    style: str
    metadata: GenerationMetadata
    type_description: str | None = None
    accessibility: AccessibilityReport | None = None
    responsive: ResponsiveReport | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation with camelCase report keys."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "markup": self.markup,
            "style": self.style,
        }
        if self.type_description is not None:
            data["typeDescription"] = self.type_description
        if self.accessibility is not None:
            data["accessibility"] = {
                "score": self.accessibility.score,
                "issues": [asdict(issue) for issue in self.accessibility.issues],
                "suggestions": list(self.accessibility.suggestions),
                "complianceTier": self.accessibility.compliance,
            }
        if self.responsive is not None:
            data["responsive"] = {
                "mobile": self.responsive.mobile,
                "tablet": self.responsive.tablet,
                "desktop": self.responsive.desktop,
                "hasResponsiveDesign": self.responsive.has_responsive_design,
            }
        data["metadata"] = {
            "sourceNodeId": self.metadata.source_node_id,
            "componentType": self.metadata.component_type.value,
            "complexityTier": self.metadata.complexity.value,
            "estimatedAccuracy": self.metadata.estimated_accuracy,
            "generationDurationMs": self.metadata.generation_ms,
            "dependencies": list(self.metadata.dependencies),
        }
        return data
