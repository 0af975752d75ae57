"""Interface for ``python -m keypath_parse``."""

from __future__ import annotations

import json
import sys
from argparse import ArgumentParser
from pathlib import Path
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version
from .converters import DEFAULT_DATE_FORMAT
from .errors import ParseError
from .mappings import ParseMapping


__all__ = ["main"]

_TYPES = ("any", "int", "float", "bool", "str", "date", "url")


def _parse(mapping: ParseMapping, key_path: str, value_type: str, optional: bool) -> Any:
    getters = {
        "any": (mapping.parse_with, mapping.parse_optional_with, (lambda node: node,)),
        "int": (mapping.parse_int, mapping.parse_optional_int, ()),
        "float": (mapping.parse_float, mapping.parse_optional_float, ()),
        "bool": (mapping.parse_bool, mapping.parse_optional_bool, ()),
        "str": (mapping.parse_str, mapping.parse_optional_str, ()),
        "date": (mapping.parse_date, mapping.parse_optional_date, ()),
        "url": (mapping.parse_url, mapping.parse_optional_url, ()),
    }
    required, optional_getter, args = getters[value_type]
    getter = optional_getter if optional else required
    return getter(key_path, *args)


def _render(value: Any, value_type: str) -> str:
    if value is None:
        return "null"
    if value_type == "date":
        return value.isoformat()
    if value_type == "url":
        return value.geturl()
    return json.dumps(value)


def main(args: Sequence[str] | None = None) -> int:
    """Argument parser for the CLI."""
    parser = ArgumentParser(description="Print a typed value from a JSON file by key path.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("file", type=Path, help="JSON file to read")
    _ = parser.add_argument("key_path", help="dot-delimited key path, e.g. user.address.city")
    _ = parser.add_argument("-t", "--type", dest="value_type", choices=_TYPES, default="any")
    _ = parser.add_argument("--date-format", default=DEFAULT_DATE_FORMAT, help="LDML date pattern")
    _ = parser.add_argument("--sep", default=".", help="key path separator")
    _ = parser.add_argument("--optional", action="store_true", help="print null for absent or null values")
    options = parser.parse_args(args)

    try:
        document = json.loads(options.file.read_text(encoding="utf-8"))
        mapping = ParseMapping(document, sep=options.sep, date_format=options.date_format)
        value = _parse(mapping, options.key_path, options.value_type, options.optional)
    except (ParseError, OSError, TypeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(_render(value, options.value_type))
    return 0


if __name__ == "__main__":
    sys.exit(main())
