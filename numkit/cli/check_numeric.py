"""Report which values :func:`numkit.helpers.numeric.is_numeric` accepts."""

from __future__ import annotations

import argparse

from tabulate import tabulate

from numkit import config
from numkit.helpers.numeric import is_numeric
from numkit.logutils import log_result, logger, setup_logging


@log_result
def evaluate(values: list[str], delimiters: list[str]) -> list[tuple[str, bool]]:
    """Return ``(value, verdict)`` pairs for ``values``."""
    return [(value, is_numeric(value, delimiters)) for value in values]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check whether values are numeric")
    parser.add_argument("values", nargs="+", help="Values to classify")
    parser.add_argument(
        "--delimiter",
        action="append",
        dest="delimiters",
        help="Extra decimal delimiter (repeatable, defaults to NUMERIC_DELIMITERS)",
    )
    args = parser.parse_args(argv)

    setup_logging()
    delimiters = args.delimiters or list(config.get("NUMERIC_DELIMITERS", [","]))
    logger.debug("Checking %d values with delimiters %s", len(args.values), delimiters)
    rows = evaluate(args.values, delimiters)
    print(tabulate(rows, headers=["value", "numeric"], tablefmt="github"))
    return 0 if all(ok for _, ok in rows) else 1


if __name__ == "__main__":
    import sys

    raise SystemExit(main(sys.argv[1:]))
