"""Node kind inspection for JSON-like documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any


class NodeKind(Enum):
    """Kind of a single document node."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"
    OTHER = "other"

    @classmethod
    def for_type(cls, tp: Any) -> NodeKind | None:
        """Return the kind a requested Python type stands for, or None when it has none."""
        return _KIND_BY_TYPE.get(tp)


_KIND_BY_TYPE: dict[Any, NodeKind] = {
    dict: NodeKind.MAPPING,
    list: NodeKind.SEQUENCE,
    str: NodeKind.STRING,
    int: NodeKind.INTEGER,
    float: NodeKind.FLOAT,
    bool: NodeKind.BOOLEAN,
    type(None): NodeKind.NULL,
}


def node_kind(value: Any) -> NodeKind:
    """Classify a node.

    ``bool`` is checked before ``int`` so that ``True`` is never an integer,
    and strings/bytes are never treated as sequences.
    """
    if value is None:
        return NodeKind.NULL
    if isinstance(value, bool):
        return NodeKind.BOOLEAN
    if isinstance(value, int):
        return NodeKind.INTEGER
    if isinstance(value, float):
        return NodeKind.FLOAT
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return NodeKind.SEQUENCE
    return NodeKind.OTHER


def matches_type(value: Any, tp: Any) -> bool:
    """Return True when value is exactly of the requested type."""
    kind = NodeKind.for_type(tp)
    if kind is not None:
        return node_kind(value) is kind
    return isinstance(value, tp)
