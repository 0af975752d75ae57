"""Errors raised by key path accessors."""

from __future__ import annotations

import types
from typing import Any


__all__ = ["KeyPathNotFoundError", "NotParseableError", "ParseError", "TypeMismatchError"]


def type_name(tp: Any) -> str:
    """Render a type (or generic alias such as ``list[dict]``) for messages."""
    if isinstance(tp, types.GenericAlias):
        return repr(tp)
    return getattr(tp, "__qualname__", repr(tp))


class ParseError(Exception):
    """Base error for all key path parse failures."""

    def __init__(self, key_path: str, message: str) -> None:
        super().__init__(message)
        self.key_path = key_path
        self.message = message

    def __str__(self) -> str:
        return self.message


class KeyPathNotFoundError(ParseError, LookupError):
    """Raised when a key path resolves to nothing."""

    def __init__(self, key_path: str) -> None:
        super().__init__(key_path, f"Key path not found: {key_path}")


class TypeMismatchError(ParseError, TypeError):
    """Raised when a value exists but cannot be converted to the requested type."""

    def __init__(self, key_path: str, expected: Any, actual: Any, value: Any) -> None:
        super().__init__(
            key_path,
            f"Key path '{key_path}', expected type {type_name(expected)}, "
            f"actual type {type_name(actual)}, value {value!r}",
        )
        self.expected = expected
        self.actual = actual
        self.value = value


class NotParseableError(ParseError, ValueError):
    """Raised when a string value fails a format-specific parse."""

    def __init__(self, key_path: str, target: Any) -> None:
        super().__init__(key_path, f"Key path '{key_path}' not parseable to type {type_name(target)}")
        self.target = target
