from typing import Tuple

from .counters import Counter, is_greater


class PairedCounter:
    """
    One exact and one approximate counter driven by the same increments.

    Both sides only need the Counter protocol (increment + value). Each
    instance owns its two counters; they must not be shared with another
    PairedCounter. Labels are only used for display.
    """

    def __init__(
        self,
        exact: Counter,
        approx: Counter,
        labels: Tuple[str, str] = ("exact", "morris"),
    ):
        self.exact = exact
        self.approx = approx
        self.labels = labels

    def increment(self) -> None:
        self.exact.increment()
        self.approx.increment()

    def order_agrees(self, other: "PairedCounter") -> bool:
        """
        True when the approximate ordering matches the exact ordering.

        Both sides use strict "greater than", so a tie on both sides agrees
        while a tie on only one side disagrees.
        """
        exact_greater = is_greater(self.exact.value(), other.exact.value())
        approx_greater = is_greater(self.approx.value(), other.approx.value())
        return exact_greater == approx_greater

    def __repr__(self) -> str:
        return (
            f"[{self.labels[0]}:{self.exact.value()}, "
            f"{self.labels[1]}:{self.approx.value()}]"
        )
