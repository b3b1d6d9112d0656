"""Percentage helpers."""

from __future__ import annotations

import math
import re
from typing import Any

from .numeric import JS_WHITESPACE

_INT_PREFIX_RE = re.compile(r"([+-]?[0-9]+)")


def parse_int_prefix(text: Any) -> int | float:
    """Return the leading base-10 integer of ``text`` or ``nan``.

    Leading whitespace and a sign are accepted; parsing stops at the first
    character that is not a digit so ``"33.7"`` yields ``33``.
    """

    match = _INT_PREFIX_RE.match(str(text).lstrip(JS_WHITESPACE))
    if match is None:
        return math.nan
    return int(match.group(1))


def _truncate(number: float) -> int | float:
    if not math.isfinite(number):
        return math.nan
    return math.trunc(number)


def _to_float(number: Any) -> float:
    # Integers beyond float range saturate to infinity like parseInt does
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


def value_according_percent(value: float, percent: int | float | str) -> int | float:
    """Return ``percent`` of ``value`` truncated toward zero.

    ``percent`` may be a number or a string such as ``"33%"``. Malformed
    percent strings and results outside the float range produce ``nan``
    instead of raising.

    >>> value_according_percent(7, "33%")
    2
    """

    if isinstance(percent, str):
        parsed = parse_int_prefix(percent.replace("%", "", 1))
    else:
        parsed = _truncate(_to_float(percent))
    if isinstance(parsed, float):
        return math.nan
    return _truncate(_to_float(value) * _to_float(parsed) / 100)


__all__ = ["parse_int_prefix", "value_according_percent"]
