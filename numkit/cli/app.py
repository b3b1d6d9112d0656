"""Unified command line entry point using ``argparse``."""
from __future__ import annotations

import argparse

from . import check_numeric
from . import percent_calc
from . import range_list


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="numkit command line utilities")
    sub = parser.add_subparsers(dest="cmd")

    sub_num = sub.add_parser("is-numeric", help="Check whether values are numeric")
    sub_num.add_argument("values", nargs="+")
    sub_num.add_argument("--delimiter", action="append", dest="delimiters")
    sub_num.set_defaults(
        func=lambda a: check_numeric.main(
            [f"--delimiter={d}" for d in a.delimiters or []] + ["--", *a.values]
        )
    )

    sub_pct = sub.add_parser("percent", help="Calculate a percentage of a value")
    sub_pct.add_argument("value")
    sub_pct.add_argument("percent")
    sub_pct.set_defaults(func=lambda a: percent_calc.main(["--", a.value, a.percent]))

    sub_range = sub.add_parser("range", help="List the indices of an inclusive range")
    sub_range.add_argument("start")
    sub_range.add_argument("end", nargs="?")
    sub_range.add_argument("--reverse", action="store_true")
    sub_range.set_defaults(
        func=lambda a: range_list.main(
            [p for p in [a.start, a.end] if p is not None]
            + (["--reverse"] if a.reverse else [])
        )
    )

    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        return args.func(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
