"""XML codec for payment gateway payloads: nested mappings <-> element trees."""

from .config import GatewayXMLSettings, get_settings
from .decoder import decode, load
from .encoder import dump, encode
from .errors import CoercionError, ElementNameError, GatewayXMLError, XMLParseError
from .logging import configure_logging

__all__ = [
    "CoercionError",
    "ElementNameError",
    "GatewayXMLError",
    "GatewayXMLSettings",
    "XMLParseError",
    "configure_logging",
    "decode",
    "dump",
    "encode",
    "get_settings",
    "load",
]
