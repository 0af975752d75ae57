"""Read-only mapping facade with typed key path getters."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from datetime import datetime, tzinfo
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar, override
from urllib.parse import SplitResult

from keypath_parse.converters import (
    DEFAULT_DATE_FORMAT,
    parse_date_string,
    parse_float_string,
    parse_fuzzy_bool,
    parse_int_string,
    parse_url_string,
    to_strptime,
)
from keypath_parse.errors import KeyPathNotFoundError, NotParseableError, TypeMismatchError
from keypath_parse.key_path import MISSING, NodeKind, lookup, matches_type, node_kind, resolve


if TYPE_CHECKING:
    from .protocol import Parsable


logger = logging.getLogger(__name__)

_T = TypeVar("_T")
_E = TypeVar("_E", bound=Enum)
_P = TypeVar("_P", bound="Parsable")


def _to_plain(value: Any) -> Any:
    if isinstance(value, ParseMapping):
        return value.to_dict()
    kind = node_kind(value)
    if kind is NodeKind.MAPPING:
        return {k: _to_plain(v) for k, v in value.items()}
    if kind is NodeKind.SEQUENCE:
        return [_to_plain(item) for item in value]
    return value


def _raw_value_type(enum_cls: type[Enum]) -> type:
    raw_types = {type(member.value) for member in enum_cls}
    if not raw_types:
        msg = f"enum {enum_cls.__name__} has no members"
        raise TypeError(msg)
    if len(raw_types) > 1:
        msg = f"enum {enum_cls.__name__} mixes raw value types"
        raise TypeError(msg)
    raw_type = raw_types.pop()
    if raw_type not in (str, int):
        msg = f"enum {enum_cls.__name__} raw values must be str or int, not {raw_type.__name__}"
        raise TypeError(msg)
    return raw_type


class ParseMapping(Mapping[str, Any]):
    """Typed, read-only access to a JSON-like document by dot-delimited key path.

    Every ``parse_*`` getter either returns a value of the requested type or
    raises a :class:`~keypath_parse.errors.ParseError`. The matching
    ``parse_optional_*`` getter returns None instead when the path is absent
    or holds an explicit None, and otherwise behaves identically.

    Numbers and booleans that arrive as strings are accepted by
    :meth:`parse_int`, :meth:`parse_float` and :meth:`parse_bool`, but only
    when the string really parses.
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        sep: str = ".",
        date_format: str = DEFAULT_DATE_FORMAT,
        tz: tzinfo | None = None,
    ) -> None:
        super().__init__()
        if isinstance(data, ParseMapping):
            data = data._data
        if node_kind(data) is not NodeKind.MAPPING:
            msg = f"data must be a mapping, not {type(data).__name__}"
            raise TypeError(msg)
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        if not date_format:
            msg = "date_format must not be empty"
            raise ValueError(msg)
        _ = to_strptime(date_format)

        self._data = data
        self.sep = sep
        self.date_format = date_format
        self.tz = tz

    @override
    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    @override
    def __len__(self) -> int:
        return len(self._data)

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def to_dict(self) -> dict[str, Any]:
        """Return a detached plain-dict snapshot of the document."""
        return {key: _to_plain(value) for key, value in self._data.items()}

    def _child(self, data: Mapping[str, Any]) -> ParseMapping:
        return ParseMapping(data, sep=self.sep, date_format=self.date_format, tz=self.tz)

    def _resolve(self, key_path: str) -> Any:
        try:
            return resolve(self._data, key_path, self.sep)
        except KeyPathNotFoundError:
            logger.debug("Key path %r not found", key_path)
            raise

    def _is_absent(self, key_path: str) -> bool:
        node = lookup(self._data, key_path, self.sep)
        return node is MISSING or node is None

    def _reinterpret(self, key_path: str, node: Any, expected: type[_T], converter: Callable[[str], _T | None]) -> _T:
        if node_kind(node) is NodeKind.STRING:
            logger.debug("Reinterpreting string at %r as %s", key_path, expected.__name__)
            parsed = converter(node)
            if parsed is not None:
                return parsed
        raise TypeMismatchError(key_path, expected=expected, actual=type(node), value=node)

    # General

    def parse(self, key_path: str, tp: type[_T]) -> _T:
        """Return the node at key_path when it is exactly of type ``tp``.

        ``bool`` never satisfies ``int`` and ``int`` never satisfies
        ``float``; ``dict`` and ``list`` accept any mapping and sequence.
        """
        node = self._resolve(key_path)
        if not matches_type(node, tp):
            raise TypeMismatchError(key_path, expected=tp, actual=type(node), value=node)
        return node

    def parse_with(self, key_path: str, parser: Callable[[Any], _T]) -> _T:
        """Pass the raw node at key_path, of any type, to ``parser``."""
        return parser(self._resolve(key_path))

    # Scalars

    def parse_int(self, key_path: str) -> int:
        node = self._resolve(key_path)
        if node_kind(node) is NodeKind.INTEGER:
            return node
        return self._reinterpret(key_path, node, int, parse_int_string)

    def parse_float(self, key_path: str) -> float:
        """Return a float; integers widen, numeric strings are parsed."""
        node = self._resolve(key_path)
        if node_kind(node) in (NodeKind.FLOAT, NodeKind.INTEGER):
            return float(node)
        return self._reinterpret(key_path, node, float, parse_float_string)

    def parse_bool(self, key_path: str) -> bool:
        """Return a bool; the strings true/yes/1/y and false/no/0/n are accepted in any case."""
        node = self._resolve(key_path)
        if node_kind(node) is NodeKind.BOOLEAN:
            return node
        return self._reinterpret(key_path, node, bool, parse_fuzzy_bool)

    def parse_str(self, key_path: str) -> str:
        return self.parse(key_path, str)

    # Formatted strings

    def parse_date(self, key_path: str, date_format: str | None = None, tz: tzinfo | None = None) -> datetime:
        """Parse a date string with an LDML pattern, by default ``yyyy-MM-dd'T'HH:mm:ssZ``.

        The result is always timezone-aware. Patterns without an offset field
        are read in ``tz``, then the mapping's ``tz``, then local time.
        """
        value = self.parse_str(key_path)
        parsed = parse_date_string(
            value,
            date_format if date_format is not None else self.date_format,
            tz if tz is not None else self.tz,
        )
        if parsed is None:
            raise NotParseableError(key_path, datetime)
        return parsed

    def parse_url(self, key_path: str) -> SplitResult:
        value = self.parse_str(key_path)
        parsed = parse_url_string(value)
        if parsed is None:
            raise NotParseableError(key_path, SplitResult)
        return parsed

    def parse_enum(self, key_path: str, enum_cls: type[_E]) -> _E:
        """Look up the enum member whose value equals the node at key_path.

        The node must be exactly of the enum's raw value type (``str`` or
        ``int``); no string reinterpretation takes place.
        Only declared members match, so ``Flag`` combinations are rejected.
        """
        raw_type = _raw_value_type(enum_cls)
        raw = self.parse(key_path, raw_type)
        members = {member.value: member for member in enum_cls.__members__.values()}
        member = members.get(raw)
        if member is None:
            raise TypeMismatchError(key_path, expected=raw_type, actual=type(raw), value=raw)
        return member

    # Self-constructing types

    def parse_parsable(self, key_path: str, cls: type[_P]) -> _P:
        node = self.parse(key_path, dict)
        return cls.from_json(self._child(node))

    def parse_parsable_list(self, key_path: str, cls: type[_P]) -> list[_P]:
        """Build one ``cls`` per mapping in the sequence at key_path, in order.

        The first element that fails to construct fails the whole call.
        """
        node = self._resolve(key_path)
        if node_kind(node) is not NodeKind.SEQUENCE or any(
            node_kind(item) is not NodeKind.MAPPING for item in node
        ):
            raise TypeMismatchError(key_path, expected=list[dict], actual=type(node), value=node)
        return [cls.from_json(self._child(item)) for item in node]

    # Optional variants

    def _optional(self, key_path: str, getter: Callable[..., _T], *args: Any) -> _T | None:
        if self._is_absent(key_path):
            return None
        return getter(key_path, *args)

    def parse_optional(self, key_path: str, tp: type[_T]) -> _T | None:
        return self._optional(key_path, self.parse, tp)

    def parse_optional_with(self, key_path: str, parser: Callable[[Any], _T]) -> _T | None:
        return self._optional(key_path, self.parse_with, parser)

    def parse_optional_int(self, key_path: str) -> int | None:
        return self._optional(key_path, self.parse_int)

    def parse_optional_float(self, key_path: str) -> float | None:
        return self._optional(key_path, self.parse_float)

    def parse_optional_bool(self, key_path: str) -> bool | None:
        return self._optional(key_path, self.parse_bool)

    def parse_optional_str(self, key_path: str) -> str | None:
        return self._optional(key_path, self.parse_str)

    def parse_optional_date(
        self, key_path: str, date_format: str | None = None, tz: tzinfo | None = None
    ) -> datetime | None:
        return self._optional(key_path, self.parse_date, date_format, tz)

    def parse_optional_url(self, key_path: str) -> SplitResult | None:
        return self._optional(key_path, self.parse_url)

    def parse_optional_enum(self, key_path: str, enum_cls: type[_E]) -> _E | None:
        return self._optional(key_path, self.parse_enum, enum_cls)

    def parse_optional_parsable(self, key_path: str, cls: type[_P]) -> _P | None:
        return self._optional(key_path, self.parse_parsable, cls)

    def parse_optional_parsable_list(self, key_path: str, cls: type[_P]) -> list[_P] | None:
        return self._optional(key_path, self.parse_parsable_list, cls)
