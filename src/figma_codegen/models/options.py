"""Generation options and caller-supplied custom code."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeVar


E = TypeVar("E", bound=StrEnum)


class UnsupportedOptionsError(ValueError):
    """Raised when generation options cannot be honoured."""


class Framework(StrEnum):
    REACT = "react"
    VUE = "vue"
    HTML = "html"


class Styling(StrEnum):
    TAILWIND = "tailwind"
    CSS_MODULES = "css-modules"
    STYLED_COMPONENTS = "styled-components"
    PLAIN_CSS = "plain-css"


@dataclass(frozen=True)
class GenerationOptions:
    """Settings for one generation call."""

    framework: Framework = Framework.REACT
    styling: Styling = Styling.TAILWIND
    typescript: bool = True
    accessibility: bool = True
    responsive: bool = True
    optimize_images: bool = True
    inline_styles: bool = False

    def __post_init__(self) -> None:
        # Accept plain strings for the enum fields.
        object.__setattr__(self, "framework", _enum_value(Framework, self.framework, "framework"))
        object.__setattr__(self, "styling", _enum_value(Styling, self.styling, "styling"))

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "GenerationOptions":
        """Build options from a JSON-style dict.

        Accepts camelCase (``optimizeImages``) or snake_case keys. Unknown keys
        are ignored; unknown enum values raise UnsupportedOptionsError.
        """
        normalized = {_snake(key): value for key, value in data.items()}
        kwargs: dict[str, Any] = {}
        for choice in ("framework", "styling"):
            if choice in normalized:
                kwargs[choice] = normalized[choice]
        for flag in (
            "typescript",
            "accessibility",
            "responsive",
            "optimize_images",
            "inline_styles",
        ):
            if flag in normalized:
                kwargs[flag] = bool(normalized[flag])
        return cls(**kwargs)


@dataclass(frozen=True)
class CustomCodeInputs:
    """Raw fragments appended verbatim to the generated output."""

    markup: str = ""
    style: str = ""
    advanced_style: str = ""


def validate_options(options: GenerationOptions) -> None:
    """Raise UnsupportedOptionsError for combinations that cannot be generated."""
    if options.styling is Styling.STYLED_COMPONENTS and options.framework is not Framework.REACT:
        msg = f"Styling {options.styling.value!r} requires the react framework, got {options.framework.value!r}"
        raise UnsupportedOptionsError(msg)
    if options.styling is Styling.CSS_MODULES and options.framework is Framework.HTML:
        msg = "Styling 'css-modules' is not available for static html output"
        raise UnsupportedOptionsError(msg)
    if options.typescript and options.framework is Framework.HTML:
        msg = "TypeScript output is not available for static html; pass typescript=False"
        raise UnsupportedOptionsError(msg)


def _snake(key: str) -> str:
    out: list[str] = []
    for ch in key:
        if ch.isupper():
            out.append("_")
        out.append(ch.lower())
    return "".join(out)


def _enum_value(enum_cls: type[E], value: Any, label: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        msg = f"Unsupported {label} {value!r}; expected one of: {allowed}"
        raise UnsupportedOptionsError(msg) from None
