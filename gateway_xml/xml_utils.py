from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union
from xml.etree import ElementTree as ET

from .errors import XMLParseError
from .naming import to_key


@dataclass
class ElementNode:
    """Parsed element reduced to what the decoder looks at.

    `children` keeps document order and holds nested nodes and stripped,
    non-empty text fragments.
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Union["ElementNode", str]] = field(default_factory=list)

    @property
    def elements(self) -> list["ElementNode"]:
        return [child for child in self.children if isinstance(child, ElementNode)]

    @property
    def texts(self) -> list[str]:
        return [child for child in self.children if isinstance(child, str)]

    def is_text_only(self) -> bool:
        return bool(self.children) and all(isinstance(child, str) for child in self.children)


def parse_xml_document(xml_text: str | bytes) -> ET.Element:
    try:
        return ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise XMLParseError(str(exc)) from exc


def _text_fragment(text: str | None) -> list[str]:
    stripped = (text or "").strip()
    return [stripped] if stripped else []


def to_element_node(element: ET.Element) -> ElementNode:
    """Convert an ElementTree element into an ElementNode, keys already underscorized."""

    children: list[ElementNode | str] = _text_fragment(element.text)
    for child in element:
        children.append(to_element_node(child))
        children.extend(_text_fragment(child.tail))

    return ElementNode(
        name=to_key(element.tag),
        attributes=dict(element.attrib),
        children=children,
    )


def parse_element_tree(xml_text: str | bytes) -> ElementNode:
    return to_element_node(parse_xml_document(xml_text))


__all__ = [
    "ElementNode",
    "XMLParseError",
    "parse_element_tree",
    "parse_xml_document",
    "to_element_node",
]
