"""Contract for types that construct themselves from a mapping node."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable


if TYPE_CHECKING:
    from .parse import ParseMapping


@runtime_checkable
class Parsable(Protocol):
    """A type that can build an instance of itself from a mapping node.

    ``from_json`` receives the node wrapped in a :class:`ParseMapping` and
    signals failure by raising; the exception reaches the caller unchanged.
    """

    @classmethod
    def from_json(cls, json: ParseMapping) -> Self:
        """Construct an instance from a mapping node."""
        ...
