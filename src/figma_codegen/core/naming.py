"""Identifier and class-name helpers."""

import re

DEFAULT_COMPONENT_NAME = "Component"

# Bindings imported by generated modules; a component may not reuse them.
RESERVED_NAMES = ("React", "Image")


def sanitize_component_name(name: str) -> str:
    """Turn an arbitrary node name into a valid component identifier.

    Non-alphanumerics are dropped, a leading digit gets a ``Component`` prefix
    and the first letter is upper-cased. Idempotent.

    >>> sanitize_component_name("primary button")
    'Primarybutton'
    >>> sanitize_component_name("123abc")
    'Component123abc'
    """
    cleaned = re.sub(r"[^A-Za-z0-9]", "", name)
    if not cleaned:
        return DEFAULT_COMPONENT_NAME
    if cleaned[0].isdigit():
        cleaned = DEFAULT_COMPONENT_NAME + cleaned
    return cleaned[0].upper() + cleaned[1:]


def component_identifier(name: str) -> str:
    """Sanitized name that cannot shadow a generated import.

    >>> component_identifier("image")
    'ImageComponent'
    """
    identifier = sanitize_component_name(name)
    if identifier in RESERVED_NAMES:
        return identifier + DEFAULT_COMPONENT_NAME
    return identifier


def camel_to_kebab(value: str) -> str:
    """``backgroundColor`` -> ``background-color``."""
    return re.sub(r"(?<=[a-z0-9])([A-Z])", r"-\1", value).lower()


def scope_class(component_name: str) -> str:
    """Class name keying a component's style block."""
    return camel_to_kebab(component_name)


def node_class(name: str) -> str:
    """Class name for a nested element, derived from its node name."""
    slug = re.sub(r"\s+", "-", name.strip().lower())
    return re.sub(r"[^a-z0-9-]", "", slug)
