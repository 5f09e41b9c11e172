import random
from typing import Optional


class RandomSourceError(RuntimeError):
    """Raised when a random source breaks its [0, 1) contract."""


class UniformRandomSource:
    """
    UniformRandomSource

    Supplies independent uniform draws in the half-open range [0, 1).

    Subclasses implement _draw(); next_uniform() checks every value before
    handing it out. A draw of exactly 1.0 (or anything outside the range) is
    a defect in the generator and is raised as RandomSourceError instead of
    being clamped, since clamping would hide broken randomness.

    Sources are single-threaded and carry their own generator state; nothing
    here touches the module-level `random` generator.
    """

    kind = "abstract"

    def next_uniform(self) -> float:
        r = self._draw()
        if not (0.0 <= r < 1.0):
            raise RandomSourceError(
                f"{self.kind} source produced {r!r}, outside [0, 1)"
            )
        return r

    def _draw(self) -> float:
        raise NotImplementedError


class SeededRandomSource(UniformRandomSource):
    """
    Mersenne Twister stream. The same seed gives the same sequence of draws
    on every run. seed=None seeds from system entropy.
    """

    kind = "mersenne"

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def _draw(self) -> float:
        return self._rng.random()


class SystemRandomSource(UniformRandomSource):
    """Operating-system entropy. Not reproducible and cannot be seeded."""

    kind = "system"

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def _draw(self) -> float:
        return self._rng.random()


# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------

def draw_index(source: UniformRandomSource, n: int) -> int:
    """
    Return an integer in [0, n) from a single uniform draw.

    Integer sampling goes through the same source as the counters so an
    experiment consumes one sequential stream.
    """
    if n <= 0:
        raise ValueError("n must be > 0")
    # r * n can round up to n for r just below 1.0
    return min(int(source.next_uniform() * n), n - 1)


SOURCE_KINDS = ("mersenne", "system")


def make_source(kind: str = "mersenne", seed: Optional[int] = None) -> UniformRandomSource:
    name = kind.strip().lower()
    if name == "mersenne":
        return SeededRandomSource(seed)
    if name == "system":
        if seed is not None:
            raise ValueError("the system source cannot be seeded")
        return SystemRandomSource()
    raise ValueError(f"unknown source kind '{kind}'. Available: {sorted(SOURCE_KINDS)}")
