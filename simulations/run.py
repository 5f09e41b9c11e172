# simulations/run.py

from __future__ import annotations

from typing import Optional

from morris_counting.counters import MAX_EXP
from morris_counting.random_source import make_source

from .common import (
    DEFAULT_MAX_COUNTER_VALUE,
    DEFAULT_TOTAL_COUNTERS,
    DEFAULT_TRIALS,
    ExperimentResult,
    ExperimentSpec,
)
from .experiment import simulate_order_agreement


def run_experiment(
    total_counters: int = DEFAULT_TOTAL_COUNTERS,
    trials: int = DEFAULT_TRIALS,
    max_counter_value: int = DEFAULT_MAX_COUNTER_VALUE,
    max_exp: int = MAX_EXP,
    seed: Optional[int] = None,
    source_kind: str = "mersenne",
    label: Optional[str] = None,
) -> ExperimentResult:
    """
    Run a single order-agreement experiment and return an ExperimentResult.

    Parameters
    ----------
    total_counters:
        Population size (>= 2).
    trials:
        Number of counted comparisons (> 0).
    max_counter_value:
        Inclusive upper bound of each entity's true count (>= 1).
    max_exp:
        Saturation exponent of every MorrisCounter.
    seed:
        RNG seed; None draws one from system entropy.
    source_kind:
        'mersenne' (seedable) or 'system'.
    label:
        Name used in summary lines; defaults to 'max=<max_counter_value>'.

    Returns
    -------
    ExperimentResult
    """
    # validated before the source exists, so a bad config consumes nothing
    spec = ExperimentSpec(
        total_counters=total_counters,
        trials=trials,
        max_counter_value=max_counter_value,
        max_exp=max_exp,
    )
    source = make_source(source_kind, seed)

    result = simulate_order_agreement(spec, source, label=label or f"max={max_counter_value}")
    result.meta["seed"] = seed
    return result


def run_pair(
    max_counter_value_a: int,
    max_counter_value_b: int,
    total_counters: int = DEFAULT_TOTAL_COUNTERS,
    trials: int = DEFAULT_TRIALS,
    max_exp: int = MAX_EXP,
    seed: int = 42,
):
    """
    Convenience helper: run two true-count ranges under the same seed.

    Returns (result_a, result_b).
    """
    ra = run_experiment(
        total_counters=total_counters,
        trials=trials,
        max_counter_value=max_counter_value_a,
        max_exp=max_exp,
        seed=seed,
    )
    rb = run_experiment(
        total_counters=total_counters,
        trials=trials,
        max_counter_value=max_counter_value_b,
        max_exp=max_exp,
        seed=seed,
    )
    return ra, rb
