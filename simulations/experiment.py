# simulations/experiment.py

from __future__ import annotations

from typing import List, Tuple

from morris_counting.counters import ExactCounter, MorrisCounter
from morris_counting.paired_counter import PairedCounter
from morris_counting.random_source import UniformRandomSource, draw_index

from .common import ExperimentSpec, ExperimentResult, Timer


def build_population(spec: ExperimentSpec, source: UniformRandomSource) -> List[PairedCounter]:
    """
    Build spec.total_counters paired counters with random true counts.

    Entity i draws its true count from [1, max_counter_value] and runs all of
    its increments before entity i + 1 starts, so a seeded source always
    yields the same population.
    """
    population: List[PairedCounter] = []
    for _ in range(spec.total_counters):
        value = 1 + draw_index(source, spec.max_counter_value)
        pair = PairedCounter(ExactCounter(), MorrisCounter(source, max_exp=spec.max_exp))
        for _ in range(value):
            pair.increment()
        population.append(pair)
    return population


def run_trials(
    population: List[PairedCounter],
    trials: int,
    source: UniformRandomSource,
) -> Tuple[int, int]:
    """
    Compare `trials` random pairs of distinct entities.

    Self-pairs are redrawn and do not count towards the budget. Returns
    (agreements, collisions).
    """
    n = len(population)
    if n < 2:
        raise ValueError("population must hold at least two counters")

    agreements = 0
    collisions = 0
    done = 0
    while done < trials:
        i1 = draw_index(source, n)
        i2 = draw_index(source, n)
        if i1 == i2:
            collisions += 1
            continue
        done += 1
        if population[i1].order_agrees(population[i2]):
            agreements += 1
    return agreements, collisions


def simulate_order_agreement(
    spec: ExperimentSpec,
    source: UniformRandomSource,
    label: str = "morris",
) -> ExperimentResult:
    """
    Build the population, run the trial loop and package the outcome.
    """
    with Timer() as t:
        population = build_population(spec, source)
        agreements, collisions = run_trials(population, spec.trials, source)

    return ExperimentResult(
        label=label,
        spec=spec,
        agreements=agreements,
        true_counts=[p.exact.value() for p in population],
        estimates=[p.approx.value() for p in population],
        collisions=collisions,
        runtime_s=t.elapsed_s,
        meta={"source": source.kind},
    )
