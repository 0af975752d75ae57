"""Typed accessor mapping and the self-constructing type contract."""

from .parse import ParseMapping
from .protocol import Parsable


__all__ = ["ParseMapping", "Parsable"]
