# simulations/compare.py

from __future__ import annotations

import argparse
import sys
from typing import Optional

import matplotlib.pyplot as plt

from morris_counting.counters import MAX_EXP

from .common import ExperimentResult, common_x_range, format_stats_line
from .run import run_pair


# Keep the tool intentionally opinionated:
# - the seed is fixed unless passed explicitly
# - populations are smaller than the accuracy CLI's so plots stay readable
DEFAULT_SEED = 42
DEFAULT_TOTAL_COUNTERS = 5_000
DEFAULT_TRIALS = 100_000


def _scatter(r: ExperimentResult, xmin: int, xmax: int, ylabel: Optional[str] = None) -> None:
    plt.scatter(r.true_counts, r.estimates, s=4, alpha=0.3)
    # saturation ceiling, only drawn when some counter reached it
    if r.stats.saturated_fraction > 0:
        plt.axhline(1 << (r.spec.max_exp - 1), color="grey", linestyle="--", linewidth=1)
    plt.title(f"{r.label} ({r.accuracy_pct:.2f}% agree)")
    plt.xlabel("True count")
    if ylabel:
        plt.ylabel(ylabel)
    plt.xlim(xmin, xmax)


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare order agreement for two true-count ranges (same x-axis plots)."
    )
    parser.add_argument("--max-counter-value-a", type=int, required=True, help="e.g. 256")
    parser.add_argument("--max-counter-value-b", type=int, required=True, help="e.g. 512")
    parser.add_argument("--total-counters", type=int, default=DEFAULT_TOTAL_COUNTERS,
                        help="population size (default: %(default)s)")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS,
                        help="number of pair comparisons (default: %(default)s)")
    parser.add_argument("--max-exp", type=int, default=MAX_EXP,
                        help="saturation exponent (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="RNG seed (default: %(default)s)")
    parser.add_argument("--save", default=None, help="write the figure to this path instead of showing it")

    args = parser.parse_args(argv)

    try:
        ra, rb = run_pair(
            max_counter_value_a=args.max_counter_value_a,
            max_counter_value_b=args.max_counter_value_b,
            total_counters=args.total_counters,
            trials=args.trials,
            max_exp=args.max_exp,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))

    # Print stats
    print(format_stats_line(ra))
    print(format_stats_line(rb))

    # Plot with same x-axis
    xmin, xmax = common_x_range([ra, rb])

    plt.figure(figsize=(12, 4))

    plt.subplot(1, 2, 1)
    _scatter(ra, xmin, xmax, ylabel="Morris estimate")

    plt.subplot(1, 2, 2)
    _scatter(rb, xmin, xmax)

    plt.suptitle(
        f"Compare: {ra.label} vs {rb.label}  "
        f"(counters={args.total_counters}, trials={args.trials}, max_exp={args.max_exp})"
    )
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])

    if args.save:
        plt.savefig(args.save)
        plt.close()
        print(f"Figure written: {args.save}")
    else:
        plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
