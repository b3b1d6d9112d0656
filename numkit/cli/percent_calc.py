"""Calculate a truncated percentage of a value."""

from __future__ import annotations

import argparse
import math

from numkit.helpers.numeric import is_numeric
from numkit.helpers.percent import value_according_percent
from numkit.logutils import log_result, setup_logging


def _number(text: str) -> float:
    if not is_numeric(text, ()):
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    cleaned = "".join(text.split())
    if "0x" in cleaned.lower():
        return float(int(cleaned, 16))
    return float(cleaned)


@log_result
def calculate(value: float, percent: str) -> int | float:
    return value_according_percent(value, percent)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Calculate PERCENT of VALUE")
    parser.add_argument("value", type=_number, help="Base value")
    parser.add_argument("percent", help="Percentage, e.g. 33 or 33%%")
    args = parser.parse_args(argv)

    setup_logging()
    result = calculate(args.value, args.percent)
    if isinstance(result, float) and math.isnan(result):
        print("NaN")
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    import sys

    raise SystemExit(main(sys.argv[1:]))
