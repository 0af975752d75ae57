"""Date parsing with LDML-style patterns such as ``yyyy-MM-dd'T'HH:mm:ssZ``."""

from __future__ import annotations

from datetime import datetime, tzinfo
from functools import lru_cache


DEFAULT_DATE_FORMAT = "yyyy-MM-dd'T'HH:mm:ssZ"

_DIRECTIVES: dict[str, str] = {
    "yyyy": "%Y",
    "yy": "%y",
    "y": "%Y",
    "MMMM": "%B",
    "MMM": "%b",
    "MM": "%m",
    "M": "%m",
    "dd": "%d",
    "d": "%d",
    "EEEE": "%A",
    "EEE": "%a",
    "HH": "%H",
    "H": "%H",
    "hh": "%I",
    "h": "%I",
    "mm": "%M",
    "m": "%M",
    "ss": "%S",
    "s": "%S",
    "S": "%f",
    "SS": "%f",
    "SSS": "%f",
    "SSSSSS": "%f",
    "a": "%p",
    "Z": "%z",
    "ZZ": "%z",
    "ZZZ": "%z",
    "ZZZZZ": "%z",
    "X": "%z",
    "XX": "%z",
    "XXX": "%z",
    "x": "%z",
    "xx": "%z",
    "xxx": "%z",
}


def _literal(text: str) -> str:
    return text.replace("%", "%%")


@lru_cache(maxsize=64)
def to_strptime(pattern: str) -> str:
    """Translate an LDML date pattern into a ``strptime`` format string.

    Letters are pattern fields, text inside single quotes is literal and
    ``''`` is a literal quote. Any other character is copied through.
    """
    if not pattern:
        msg = "date pattern must not be empty"
        raise ValueError(msg)
    out: list[str] = []
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "'":
            if pattern.startswith("''", i):
                out.append("'")
                i += 2
                continue
            end = i + 1
            buf: list[str] = []
            while end < len(pattern):
                if pattern.startswith("''", end):
                    buf.append("'")
                    end += 2
                    continue
                if pattern[end] == "'":
                    break
                buf.append(pattern[end])
                end += 1
            else:
                msg = f"unterminated quote in date pattern: {pattern}"
                raise ValueError(msg)
            out.append(_literal("".join(buf)))
            i = end + 1
        elif ch.isascii() and ch.isalpha():
            end = i
            while end < len(pattern) and pattern[end] == ch:
                end += 1
            field = pattern[i:end]
            if field not in _DIRECTIVES:
                msg = f"unsupported date pattern field: {field}"
                raise ValueError(msg)
            out.append(_DIRECTIVES[field])
            i = end
        else:
            out.append(_literal(ch))
            i += 1
    return "".join(out)


def parse_date_string(value: str, pattern: str = DEFAULT_DATE_FORMAT, tz: tzinfo | None = None) -> datetime | None:
    """Parse value with pattern, returning an aware datetime or None on mismatch.

    A pattern without an offset field is interpreted in ``tz``, or in local
    time when no ``tz`` is given.
    """
    directive = to_strptime(pattern)
    try:
        parsed = datetime.strptime(value, directive)  # noqa: DTZ007
        if parsed.tzinfo is not None:
            return parsed
        if tz is not None:
            return parsed.replace(tzinfo=tz)
        return parsed.astimezone()
    except (ValueError, OverflowError):
        return None
