"""Dot-delimited key paths and their resolution against a document."""

from __future__ import annotations

from typing import Any, Final

from keypath_parse.errors import KeyPathNotFoundError

from .nodes import NodeKind, node_kind


__all__ = ["MISSING", "KeyPath", "lookup", "resolve"]


class _Missing:
    """Marker for a key path that resolves to nothing."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


class KeyPath:
    """A key path split into its segments."""

    def __init__(self, path: str, sep: str = ".") -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.path = path
        self.sep = sep
        self.parts: tuple[str, ...] = tuple(path.split(sep)) if path else ()

    def __repr__(self) -> str:
        return f"KeyPath({self.path!r}, sep={self.sep!r})"

    def __str__(self) -> str:
        return self.path


def lookup(document: Any, path: str, sep: str = ".") -> Any:
    """Return the node at path, or ``MISSING`` when any segment is absent.

    Only mappings are descended into; an intermediate list, scalar or
    ``None`` ends the lookup. A ``None`` at the final segment is returned
    as-is.
    """
    key_path = KeyPath(path, sep)
    if not key_path.parts:
        return MISSING

    node = document
    for part in key_path.parts:
        if node_kind(node) is not NodeKind.MAPPING:
            return MISSING
        if part not in node:
            return MISSING
        node = node[part]
    return node


def resolve(document: Any, path: str, sep: str = ".") -> Any:
    """Return the node at path, raising ``KeyPathNotFoundError`` when absent."""
    node = lookup(document, path, sep)
    if node is MISSING:
        raise KeyPathNotFoundError(path)
    return node
