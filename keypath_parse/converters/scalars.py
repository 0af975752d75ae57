"""String reinterpretation of scalar values."""

from __future__ import annotations

import re


_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT_SPECIAL_PATTERN = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)

_TRUE_STRINGS = frozenset({"true", "yes", "1", "y"})
_FALSE_STRINGS = frozenset({"false", "no", "0", "n"})


def parse_int_string(value: str) -> int | None:
    """Parse a plain decimal integer such as ``"456"`` or ``"-7"``.

    Surrounding whitespace, underscores and non-ASCII digits are rejected,
    unlike ``int()``.
    """
    if _INT_PATTERN.fullmatch(value) is None:
        return None
    return int(value)


def parse_float_string(value: str) -> float | None:
    """Parse a decimal or exponent float, or ``inf``/``nan``."""
    if _FLOAT_PATTERN.fullmatch(value) is None and _FLOAT_SPECIAL_PATTERN.fullmatch(value) is None:
        return None
    return float(value)


def parse_fuzzy_bool(value: str) -> bool | None:
    """Interpret true/yes/1/y and false/no/0/n, ignoring case."""
    lowered = value.lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    return None
