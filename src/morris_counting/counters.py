import math
from typing import Protocol

from .random_source import UniformRandomSource


# Largest exponent a MorrisCounter may reach; the estimate tops out at 2^(9-1).
MAX_EXP = 9


class Counter(Protocol):
    """Anything that can be incremented and read back as an integer."""

    def increment(self) -> None:
        ...

    def value(self) -> int:
        ...


def is_greater(a: int, b: int) -> bool:
    """Strict comparison of two counter readings; ties are not greater."""
    return a > b


class ExactCounter:
    """Plain integer counter used as ground truth."""

    def __init__(self) -> None:
        self.count = 0

    def increment(self) -> None:
        self.count += 1

    def value(self) -> int:
        return self.count


class MorrisCounter:
    """
    MorrisCounter (approximate counter)

    Stores a single bounded exponent instead of the count itself. From state
    k an increment advances to k + 1 with probability 2^-k, so reaching state
    k takes on the order of 2^k real increments:

        exponent:  0   1   2   3   ...  max_exp
        estimate:  0   1   2   4   ...  2^(max_exp - 1)

    The threshold at state 0 is 1.0, so the first increment always fires.
    Once the exponent equals max_exp the counter is saturated: increments are
    no-ops and consume no randomness.

    The random source is passed in explicitly and may be shared by many
    counters. Errors raised by the source propagate unchanged.
    """

    def __init__(
        self,
        source: UniformRandomSource,
        max_exp: int = MAX_EXP,
        exponent: int = 0,
    ):
        if max_exp < 1:
            raise ValueError("max_exp must be >= 1")
        if exponent < 0 or exponent > max_exp:
            raise ValueError(f"exponent must be in [0, {max_exp}]")

        self.source = source
        self.max_exp = max_exp
        self.exponent = exponent

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def increment(self) -> None:
        if self.exponent == self.max_exp:
            return
        r = self.source.next_uniform()
        # 2^-exponent; underflows to 0.0 for very large exponents
        if r < math.ldexp(1.0, -self.exponent):
            self.exponent += 1

    def estimate(self) -> int:
        if self.exponent == 0:
            return 0
        return 1 << (self.exponent - 1)

    def value(self) -> int:
        return self.estimate()

    # ------------------------------------------------------------
    # Introspection (read-only)
    # ------------------------------------------------------------

    def unbiased_estimate(self) -> int:
        """
        Classical Morris estimator 2^exponent - 1. Its expectation equals the
        number of increments as long as the counter has not saturated.
        Equal to 2 * estimate() - 1 once the counter has left state 0.
        """
        return (1 << self.exponent) - 1

    def saturated(self) -> bool:
        return self.exponent == self.max_exp
