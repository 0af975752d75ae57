"""Converters used when a node has to be reinterpreted from a string."""

from .dates import DEFAULT_DATE_FORMAT, parse_date_string, to_strptime
from .scalars import parse_float_string, parse_fuzzy_bool, parse_int_string
from .urls import parse_url_string


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "parse_date_string",
    "parse_float_string",
    "parse_fuzzy_bool",
    "parse_int_string",
    "parse_url_string",
    "to_strptime",
]
