"""Key path splitting, node inspection and resolution."""

from .nodes import NodeKind, matches_type, node_kind
from .path import MISSING, KeyPath, lookup, resolve


__all__ = ["MISSING", "KeyPath", "NodeKind", "lookup", "matches_type", "node_kind", "resolve"]
