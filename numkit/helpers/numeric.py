"""Numeric value classification helpers."""

from __future__ import annotations

import math
import numbers
import re
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Any, Iterable

from numkit.logutils import logger

DEFAULT_DELIMITERS: tuple[str, ...] = (",",)

_DATE_TYPES = (date, time, timedelta)

# Whitespace and line terminators as understood by ECMAScript trim() and \s
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)
_WS_CLASS = "[" + "".join(f"\\u{ord(c):04x}" for c in JS_WHITESPACE) + "]"


class ValueKind(Enum):
    """Kind of value as seen by :func:`is_numeric`."""

    NUMBER = "number"
    TEXT = "text"
    OBJECT = "object"
    OTHER = "other"


def classify_value(value: Any) -> ValueKind:
    """Return the :class:`ValueKind` that ``value`` is dispatched on."""

    if value is None or isinstance(value, bool):
        return ValueKind.OTHER
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, (bytes, bytearray, complex) + _DATE_TYPES):
        return ValueKind.OTHER
    if hasattr(value, "__float__") or hasattr(value, "__index__"):
        return ValueKind.OBJECT
    return ValueKind.OTHER


@lru_cache(maxsize=64)
def _numeric_pattern(delimiters: tuple[str, ...]) -> re.Pattern[str]:
    # "." always comes first; duplicates keep their first position
    unique = dict.fromkeys((".", *delimiters))
    delimiter = "|".join(re.escape(d) for d in unique)
    return re.compile(
        rf"[+-]?{_WS_CLASS}*((({delimiter})?[0-9]+(({delimiter})[0-9]+)?(e[+-]?[0-9]+)?)|(0x[a-f0-9]+))",
        re.IGNORECASE,
    )


def _number_is_numeric(value: numbers.Real | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, numbers.Rational):
        return True
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return True


def _text_is_numeric(value: str, delimiters: tuple[str, ...]) -> bool:
    if not value:
        return False
    if len(value) == 1:
        return "0" <= value <= "9"
    return _numeric_pattern(delimiters).fullmatch(value.strip(JS_WHITESPACE)) is not None


def _object_is_numeric(value: Any) -> bool:
    try:
        float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        logger.debug(f"{type(value).__name__} does not coerce to float: {exc}")
        return False
    return True


def is_numeric(value: Any, additional_delimiters: Iterable[str] = DEFAULT_DELIMITERS) -> bool:
    """Return ``True`` when ``value`` should be treated as a number.

    Numbers must be finite. Text is accepted when it spells a decimal
    number, optionally signed and with an exponent, using ``.`` or one of
    ``additional_delimiters`` as decimal separator, or a ``0x`` hexadecimal
    literal. Examples of accepted text::

        0.001   .001   - 10000   1e+26   22e-26   .45e+26   0xabcdef   0,5

    Other objects count as numeric when they coerce to ``float``, except
    date and time values.
    """

    kind = classify_value(value)
    if kind is ValueKind.NUMBER:
        return _number_is_numeric(value)
    if kind is ValueKind.TEXT:
        return _text_is_numeric(value, tuple(additional_delimiters))
    if kind is ValueKind.OBJECT:
        return _object_is_numeric(value)
    return False


__all__ = ["ValueKind", "classify_value", "is_numeric", "DEFAULT_DELIMITERS"]
