from __future__ import annotations

import re

from .errors import ElementNameError

# Simplified XML Name production: no namespaces, no leading digit/dash/dot.
_ELEMENT_NAME_PATTERN = re.compile(r"[^\W\d][\w.\-]*")


def hyphenate(key: object) -> str:
    """snake_case key -> hyphen-case element name."""
    return str(key).replace("_", "-")


def underscorize(name: str) -> str:
    """hyphen-case element name -> snake_case key."""
    return name.replace("-", "_")


def to_element_name(key: object) -> str:
    """Convert a mapping key to an element name, rejecting keys XML cannot carry."""
    name = hyphenate(key)
    if not _ELEMENT_NAME_PATTERN.fullmatch(name):
        raise ElementNameError(key)
    return name


def to_key(element_name: str) -> str:
    return underscorize(element_name)


__all__ = ["hyphenate", "underscorize", "to_element_name", "to_key"]
