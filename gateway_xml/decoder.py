from __future__ import annotations

import logging
import re
from typing import Any

from .errors import CoercionError
from .logging import log_extra
from .xml_utils import ElementNode, parse_element_tree

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _single_text(node: ElementNode) -> str | None:
    if len(node.children) == 1 and isinstance(node.children[0], str):
        return node.children[0]
    return None


def _to_integer(node: ElementNode, text: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(text):
        logger.warning("Cannot coerce <%s> text %r to integer", node.name, text, extra=log_extra())
        raise CoercionError(node.name, text)
    return int(text)


def _reduce_children(node: ElementNode) -> dict[str, Any] | str:
    # The parser merges text around comments and PIs into one fragment, so
    # several fragments only come from hand-built nodes.
    if node.is_text_only():
        return "".join(node.texts)

    # Text mixed in with child elements is ignored; nulls are dropped.
    mapping: dict[str, Any] = {}
    for child in node.elements:
        value = transform(child)
        if value is not None:
            mapping[child.name] = value
    return mapping


def transform(node: ElementNode) -> Any:
    """Reduce one parsed element to its data value.

    Type attributes are honoured first (`integer`, `array`, `boolean`), then
    `nil="true"`. Without a recognised marker a lone text child is returned
    verbatim, an empty element becomes ``""`` and anything else becomes a
    mapping of its child elements.
    """
    kind = node.attributes.get("type")
    text = _single_text(node)

    if kind == "integer" and text is not None:
        return _to_integer(node, text)
    if kind == "array":
        items = (transform(child) for child in node.elements)
        return [item for item in items if item is not None]
    if kind == "boolean" and text is not None:
        return text == "true"
    if node.attributes.get("nil") == "true" and not node.children:
        return None
    if text is not None:
        return text
    if not node.children:
        return ""
    return _reduce_children(node)


def decode(xml_text: str | bytes) -> dict[str, Any]:
    """Convert an XML document into a mapping keyed by the root element.

    Type annotation attributes are respected, all other attributes are ignored.

    >>> decode("<a><b type='integer'>1</b><c>2</c></a>")
    {'a': {'b': 1, 'c': '2'}}
    """
    if not xml_text:
        return {}

    root = parse_element_tree(xml_text)
    logger.debug("Decoding XML root=%s length=%d", root.name, len(xml_text), extra=log_extra())
    return {root.name: transform(root)}


load = decode

__all__ = ["CoercionError", "decode", "load", "transform"]
