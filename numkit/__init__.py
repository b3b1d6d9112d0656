"""numkit core package.

Small numeric helpers: a numeric value classifier, inclusive range
iteration with early stop and a truncating percentage calculator. The
helpers live in :mod:`numkit.helpers` and are re-exported here.
"""

from .helpers import (
    IterationControl,
    ValueKind,
    classify_value,
    is_numeric,
    parse_int_prefix,
    range_each,
    range_each_reverse,
    range_each_reverse_from,
    range_each_to,
    value_according_percent,
)

__all__ = [
    "IterationControl",
    "ValueKind",
    "classify_value",
    "is_numeric",
    "parse_int_prefix",
    "range_each",
    "range_each_reverse",
    "range_each_reverse_from",
    "range_each_to",
    "value_according_percent",
]
