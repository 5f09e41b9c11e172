# simulations/accuracy.py

from __future__ import annotations

import argparse
import sys
from typing import Optional

from morris_counting.counters import MAX_EXP
from morris_counting.random_source import SOURCE_KINDS

from .common import (
    DEFAULT_MAX_COUNTER_VALUE,
    DEFAULT_TOTAL_COUNTERS,
    DEFAULT_TRIALS,
    format_accuracy,
    format_stats_line,
)
from .run import run_experiment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Measure how often Morris counters preserve the ordering of their true counts."
    )
    parser.add_argument("--total-counters", type=int, default=DEFAULT_TOTAL_COUNTERS,
                        help="population size (default: %(default)s)")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS,
                        help="number of pair comparisons (default: %(default)s)")
    parser.add_argument("--max-counter-value", type=int, default=DEFAULT_MAX_COUNTER_VALUE,
                        help="inclusive upper bound of each true count (default: %(default)s)")
    parser.add_argument("--max-exp", type=int, default=MAX_EXP,
                        help="saturation exponent of the Morris counters (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (default: random)")
    parser.add_argument("--source", choices=SOURCE_KINDS, default="mersenne",
                        help="random source (default: %(default)s)")
    parser.add_argument("--verbose", action="store_true",
                        help="print a summary line to stderr")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        result = run_experiment(
            total_counters=args.total_counters,
            trials=args.trials,
            max_counter_value=args.max_counter_value,
            max_exp=args.max_exp,
            seed=args.seed,
            source_kind=args.source,
        )
    except ValueError as e:
        # exits with status 2 before any work is done
        parser.error(str(e))

    print(format_accuracy(result))
    if args.verbose:
        print(format_stats_line(result), file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
