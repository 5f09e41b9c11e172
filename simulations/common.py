# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
import time

from morris_counting.counters import MAX_EXP


# Defaults of the reference configuration.
DEFAULT_TOTAL_COUNTERS = 100_000
DEFAULT_TRIALS = 1_000_000
DEFAULT_MAX_COUNTER_VALUE = 512


class ConfigurationError(ValueError):
    """Experiment parameters that make the run impossible or meaningless."""


@dataclass(frozen=True)
class ExperimentSpec:
    """
    Parameters of one order-agreement experiment.
    """
    total_counters: int = DEFAULT_TOTAL_COUNTERS
    trials: int = DEFAULT_TRIALS
    max_counter_value: int = DEFAULT_MAX_COUNTER_VALUE
    max_exp: int = MAX_EXP

    def __post_init__(self) -> None:
        # two distinct indices must exist
        if self.total_counters < 2:
            raise ConfigurationError("total_counters must be >= 2")
        if self.trials <= 0:
            raise ConfigurationError("trials must be > 0")
        if self.max_counter_value < 1:
            raise ConfigurationError("max_counter_value must be >= 1")
        if self.max_exp < 1:
            raise ConfigurationError("max_exp must be >= 1")


@dataclass(frozen=True)
class PopulationStats:
    """
    Summary of a built population (true counts vs what the counters report).
    """
    max_true: int
    mean_true: float
    mean_estimate: float
    mean_unbiased: float
    saturated_fraction: float


def summarize_population(
    true_counts: List[int],
    estimates: List[int],
    max_exp: int = MAX_EXP,
) -> PopulationStats:
    """
    Compute means over the population. The unbiased estimate is recovered
    from estimate() as 2 * estimate - 1 (zero stays zero).
    """
    if not true_counts:
        raise ValueError("true_counts must be non-empty")
    if len(true_counts) != len(estimates):
        raise ValueError("true_counts and estimates must have the same length")

    n = len(true_counts)
    ceiling = 1 << (max_exp - 1)

    total_true = 0
    total_est = 0
    total_unbiased = 0
    saturated = 0
    for c, e in zip(true_counts, estimates):
        total_true += c
        total_est += e
        total_unbiased += 2 * e - 1 if e > 0 else 0
        if e == ceiling:
            saturated += 1

    return PopulationStats(
        max_true=max(true_counts),
        mean_true=total_true / n,
        mean_estimate=total_est / n,
        mean_unbiased=total_unbiased / n,
        saturated_fraction=saturated / n,
    )


@dataclass
class ExperimentResult:
    """
    Outcome of one run: the agreement tally plus the population it came from.
    """
    label: str
    spec: ExperimentSpec
    agreements: int
    true_counts: List[int]
    estimates: List[int]
    collisions: int = 0

    stats: PopulationStats = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.stats = summarize_population(
            self.true_counts, self.estimates, max_exp=self.spec.max_exp
        )

        if len(self.true_counts) != self.spec.total_counters:
            raise ValueError(
                f"population size mismatch: expected {self.spec.total_counters}, "
                f"got {len(self.true_counts)}"
            )
        if not (0 <= self.agreements <= self.spec.trials):
            raise ValueError(
                f"agreements must be in [0, {self.spec.trials}], got {self.agreements}"
            )

    @property
    def accuracy_pct(self) -> float:
        return (self.agreements / self.spec.trials) * 100


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.time()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.time() - self._start


def common_x_range(results: List[ExperimentResult]) -> Tuple[int, int]:
    """
    Shared (xmin, xmax) over the true counts of several results, so scatter
    plots line up on the same x-axis.
    """
    if not results:
        raise ValueError("results must be non-empty")

    xmin = min(results[0].true_counts)
    xmax = results[0].stats.max_true
    for r in results[1:]:
        lo = min(r.true_counts)
        if lo < xmin:
            xmin = lo
        if r.stats.max_true > xmax:
            xmax = r.stats.max_true
    return xmin, xmax


def format_accuracy(r: ExperimentResult) -> str:
    """The single line the accuracy CLI prints, e.g. '69.4128%'."""
    return f"{r.accuracy_pct}%"


def format_stats_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    s = r.stats
    return (
        f"{r.label}: accuracy={r.accuracy_pct:.3f}%, trials={r.spec.trials}, "
        f"collisions={r.collisions}, mean_true={s.mean_true:.3f}, "
        f"mean_est={s.mean_estimate:.3f}, saturated={s.saturated_fraction:.3f}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
