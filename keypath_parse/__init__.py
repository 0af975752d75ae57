"""keypath-parse - typed values out of JSON-like data by dot-delimited key path"""

from ._version import version as __version__
from .converters import DEFAULT_DATE_FORMAT
from .errors import KeyPathNotFoundError, NotParseableError, ParseError, TypeMismatchError
from .key_path import MISSING, KeyPath, NodeKind, lookup, resolve
from .mappings import Parsable, ParseMapping


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "MISSING",
    "KeyPath",
    "KeyPathNotFoundError",
    "NodeKind",
    "NotParseableError",
    "ParseError",
    "ParseMapping",
    "Parsable",
    "TypeMismatchError",
    "__version__",
    "lookup",
    "resolve",
]
