"""Helper utilities."""

from .numeric import DEFAULT_DELIMITERS, ValueKind, classify_value, is_numeric
from .percent import parse_int_prefix, value_according_percent
from .ranges import (
    IterationControl,
    range_each,
    range_each_reverse,
    range_each_reverse_from,
    range_each_to,
)

__all__ = [
    "DEFAULT_DELIMITERS",
    "ValueKind",
    "classify_value",
    "is_numeric",
    "parse_int_prefix",
    "value_according_percent",
    "IterationControl",
    "range_each",
    "range_each_to",
    "range_each_reverse",
    "range_each_reverse_from",
]
