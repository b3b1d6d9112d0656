"""Callback driven iteration over inclusive integer ranges."""

from __future__ import annotations

from enum import Enum
import operator
from typing import Any, Callable, Iterable, SupportsIndex


class IterationControl(Enum):
    """Signal returned by a range callback."""

    CONTINUE = "continue"
    STOP = "stop"


Iteratee = Callable[[int], Any]


def _should_stop(result: Any) -> bool:
    # Only the explicit signal (or literal False) halts; 0/None/"" continue
    return result is IterationControl.STOP or result is False


def _drive(indices: Iterable[int], iteratee: Iteratee) -> None:
    for index in indices:
        if _should_stop(iteratee(index)):
            break


def range_each(range_from: SupportsIndex, range_to: SupportsIndex, iteratee: Iteratee) -> None:
    """Call ``iteratee`` for every index from ``range_from`` up to ``range_to``.

    Both bounds are inclusive. Nothing is called when ``range_from`` is
    greater than ``range_to``. Returning :attr:`IterationControl.STOP` (or
    ``False``) from ``iteratee`` ends the iteration early.
    """

    _drive(range(range_from, operator.index(range_to) + 1), iteratee)


def range_each_to(range_to: SupportsIndex, iteratee: Iteratee) -> None:
    """Same as :func:`range_each` starting at ``0``."""

    range_each(0, range_to, iteratee)


def range_each_reverse(
    range_from: SupportsIndex, range_to: SupportsIndex, iteratee: Iteratee
) -> None:
    """Call ``iteratee`` for every index from ``range_from`` down to ``range_to``.

    Both bounds are inclusive; nothing is called when ``range_from`` is
    smaller than ``range_to``.
    """

    _drive(range(range_from, operator.index(range_to) - 1, -1), iteratee)


def range_each_reverse_from(range_from: SupportsIndex, iteratee: Iteratee) -> None:
    """Same as :func:`range_each_reverse` ending at ``0``."""

    range_each_reverse(range_from, 0, iteratee)


__all__ = [
    "IterationControl",
    "range_each",
    "range_each_to",
    "range_each_reverse",
    "range_each_reverse_from",
]
