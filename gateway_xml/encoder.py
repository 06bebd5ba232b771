from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .logging import log_extra
from .naming import to_element_name

logger = logging.getLogger(__name__)

DOCTYPE = '<?xml version="1.0" encoding="UTF-8" ?>'

# `&` must stay first.
XML_ESCAPE_ENTITIES = (
    ("&", "&amp;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def escape_xml_entities(value: Any) -> Any:
    """Return a copy of `value` with every string escaped for XML text."""
    if isinstance(value, str):
        for char, entity in XML_ESCAPE_ENTITIES:
            value = value.replace(char, entity)
        return value
    if isinstance(value, Mapping):
        return {key: escape_xml_entities(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [escape_xml_entities(item) for item in value]
    return value


def _scalar_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _generate_entry(key: Any, value: Any) -> list[str]:
    name = to_element_name(key)
    if isinstance(value, Mapping):
        return [f"<{name}>\n{generate(value)}\n</{name}>"]
    if isinstance(value, (list, tuple)):
        # Sequences become repeated siblings; no array marker is written.
        lines: list[str] = []
        for item in value:
            lines.extend(_generate_entry(key, item))
        return lines
    return [f"<{name}>{_scalar_text(value)}</{name}>"]


def generate(data: Any) -> str:
    """Serialize already-escaped data to newline-joined XML elements."""
    if isinstance(data, Mapping):
        lines: list[str] = []
        for key, value in data.items():
            lines.extend(_generate_entry(key, value))
        return "\n".join(lines)
    if isinstance(data, (list, tuple)):
        return "\n".join(generate(item) for item in data)
    return _scalar_text(data)


def encode(data: Mapping[str, Any]) -> str:
    """Convert a mapping into its XML text, prefixed with the XML declaration.

    >>> encode({"a": {"b": 1, "c": "Two & 3"}})
    '<?xml version="1.0" encoding="UTF-8" ?>\\n<a>\\n<b>1</b>\\n<c>Two &amp; 3</c>\\n</a>'
    """
    if not isinstance(data, Mapping):
        raise TypeError(f"Expected a mapping to encode, got {type(data).__name__}")

    if len(data) > 1:
        logger.warning(
            "Encoding %d top-level keys produces more than one root element: %s",
            len(data),
            ", ".join(str(key) for key in data),
            extra=log_extra(),
        )

    body = generate(escape_xml_entities(data))
    xml_text = "\n".join([DOCTYPE, body]) if body else DOCTYPE
    logger.debug(
        "Encoded XML root=%s length=%d",
        ",".join(str(key) for key in data),
        len(xml_text),
        extra=log_extra(),
    )
    return xml_text


dump = encode

__all__ = ["DOCTYPE", "XML_ESCAPE_ENTITIES", "dump", "encode", "escape_xml_entities", "generate"]
