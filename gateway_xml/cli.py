"""Command-line front end: JSON <-> gateway XML.

Usage:
    python -m gateway_xml encode [FILE]
    python -m gateway_xml decode [FILE]

Without FILE the input is read from stdin.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from .config import get_settings
from .decoder import decode
from .encoder import encode
from .errors import GatewayXMLError
from .logging import configure_logging

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gateway-xml",
        description="Convert between JSON data and gateway XML.",
    )
    parser.add_argument("--log-level", default=None, help="Override GATEWAY_XML_LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Read a JSON object, print XML")
    encode_parser.add_argument("file", nargs="?", type=Path, help="JSON input (default: stdin)")

    decode_parser = subparsers.add_parser("decode", help="Read XML, print JSON")
    decode_parser.add_argument("file", nargs="?", type=Path, help="XML input (default: stdin)")
    return parser


def _read_bytes(path: Path | None) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    return path.read_bytes()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        print(f"gateway-xml: invalid settings: {problems}", file=sys.stderr)
        return 1
    configure_logging(args.log_level or settings.log_level, stream=sys.stderr)

    try:
        # XML goes to the parser as bytes so the declared encoding applies.
        source = _read_bytes(args.file)
        if args.command == "encode":
            data = json.loads(source.decode(settings.input_encoding))
            if not isinstance(data, dict):
                print("gateway-xml: JSON input must be an object", file=sys.stderr)
                return 1
            output = encode(data)
        else:
            output = json.dumps(decode(source), indent=settings.json_indent, ensure_ascii=False)
    except (GatewayXMLError, json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        LOGGER.debug("Conversion failed", exc_info=True)
        print(f"gateway-xml: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
