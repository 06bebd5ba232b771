from __future__ import annotations


class GatewayXMLError(Exception):
    """Base error for the gateway XML codec."""


class XMLParseError(GatewayXMLError):
    """Raised when inbound XML payloads cannot be parsed."""


class CoercionError(GatewayXMLError, ValueError):
    """Raised when a `type` attribute cannot be applied to the element text."""

    def __init__(self, element: str, text: str, expected: str = "integer") -> None:
        self.element = element
        self.text = text
        self.expected = expected
        super().__init__(f"<{element} type=\"{expected}\"> has non-{expected} text {text!r}")


class ElementNameError(GatewayXMLError, ValueError):
    """Raised when a mapping key cannot be used as an XML element name."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"Key {key!r} cannot be converted to an XML element name")


__all__ = ["GatewayXMLError", "XMLParseError", "CoercionError", "ElementNameError"]
