"""URL syntax checks."""

from __future__ import annotations

import re
from urllib.parse import SplitResult, urlsplit


_URL_CHARACTERS = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_url_string(value: str) -> SplitResult | None:
    """Split value into URL components, or return None when it is not a valid URL.

    Empty strings, characters outside RFC 3986 (including whitespace) and
    malformed percent escapes are rejected. Relative references are valid.
    """
    if _URL_CHARACTERS.fullmatch(value) is None:
        return None
    if _BAD_PERCENT_ESCAPE.search(value) is not None:
        return None
    try:
        return urlsplit(value)
    except ValueError:
        return None
