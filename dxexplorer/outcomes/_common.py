"""Shared result type and rounding rule for outcome grids."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


COHORT_SIZE = 100

KIND_LABELS = {
    "tp": "True positive",
    "fn": "False negative",
    "tn": "True negative",
    "fp": "False positive",
    "active": "With condition",
    "muted": "Without condition",
}


def round_half_up(x: float) -> int:
    """Round a non-negative value, halves away from zero (62.5 -> 63)."""
    return math.floor(x + 0.5)


def percent_label(rate: float | None) -> str:
    """Whole-percent label for a rate, rounded like the grid counts; ``None`` or NaN gives "—"."""
    if rate is None or math.isnan(rate):
        return "—"
    return f"{round_half_up(rate * 100)}%"


@dataclass(frozen=True)
class OutcomeCounts:
    """Partition of a cohort into two outcome classes.

    Attributes
    ----------
    correct : int
        Members in the first class (true positives, true negatives, or
        highlighted cells).
    incorrect : int
        Members in the second class.  ``correct + incorrect == total``.
    total : int
        Cohort size.
    correct_kind, incorrect_kind : str
        Class labels, e.g. ``'tp'`` / ``'fn'``.
    rate : float or None
        The rate the counts were derived from; ``None`` when no rate was
        available.
    """

    correct: int
    incorrect: int
    total: int
    correct_kind: str
    incorrect_kind: str
    rate: float | None

    def cells(self) -> NDArray[np.str_]:
        """One label per cohort member, correct class first."""
        return np.array(
            [self.correct_kind] * self.correct + [self.incorrect_kind] * self.incorrect
        )

    def summary(self) -> str:
        """Human-readable summary."""
        rate = percent_label(self.rate)
        return (
            f"Rate {rate} of {self.total}: "
            f"{KIND_LABELS[self.correct_kind]} {self.correct}, "
            f"{KIND_LABELS[self.incorrect_kind]} {self.incorrect}"
        )
