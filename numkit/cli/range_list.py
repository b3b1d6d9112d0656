"""Print the indices visited by the range helpers."""

from __future__ import annotations

import argparse

from numkit import config
from numkit.helpers.ranges import (
    IterationControl,
    range_each,
    range_each_reverse,
    range_each_reverse_from,
    range_each_to,
)
from numkit.logutils import log_result, logger, setup_logging


@log_result
def collect(start: int, end: int | None, *, reverse: bool = False, limit: int = 1000) -> list[int]:
    """Return visited indices, stopping once ``limit`` have been seen."""
    visited: list[int] = []

    def _visit(index: int) -> IterationControl:
        visited.append(index)
        if len(visited) >= limit:
            logger.warning("Range output truncated after %d indices", limit)
            return IterationControl.STOP
        return IterationControl.CONTINUE

    if reverse:
        if end is None:
            range_each_reverse_from(start, _visit)
        else:
            range_each_reverse(start, end, _visit)
    elif end is None:
        range_each_to(start, _visit)
    else:
        range_each(start, end, _visit)
    return visited


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List the indices of an inclusive range")
    parser.add_argument("start", type=int, help="First bound (the end when used alone)")
    parser.add_argument("end", type=int, nargs="?", help="Second bound")
    parser.add_argument("--reverse", action="store_true", help="Iterate in descending order")
    args = parser.parse_args(argv)

    setup_logging()
    limit = int(config.get("RANGE_OUTPUT_LIMIT", 1000))
    for index in collect(args.start, args.end, reverse=args.reverse, limit=limit):
        print(index)
    return 0


if __name__ == "__main__":
    import sys

    raise SystemExit(main(sys.argv[1:]))
