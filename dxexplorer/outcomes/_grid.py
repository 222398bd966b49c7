"""Whole-number outcome counts for a fixed cohort.

A rate is rounded once (half away from zero) to give the first class;
the second class is the complement, so the two always sum to ``total``.
At ``total=100`` a rate of 0.005 shows one highlighted member and 0.004
shows none.
"""

from __future__ import annotations

import math

from dxexplorer.outcomes._common import COHORT_SIZE, OutcomeCounts, round_half_up


def derive_counts(rate: float | None, total: int = COHORT_SIZE) -> tuple[int, int]:
    """Split ``total`` members into ``(correct, incorrect)`` at ``rate``.

    Parameters
    ----------
    rate : float or None
        Proportion in the first class.  Clamped to ``[0, 1]``; NaN and
        ``None`` count as 0.
    total : int
        Cohort size, a positive integer.

    Returns
    -------
    tuple of int
        ``(c, total - c)`` with ``c = round_half_up(rate * total)``.
    """
    if isinstance(total, bool) or not isinstance(total, int) or total < 1:
        raise ValueError(f"total must be a positive integer, got {total!r}")

    if rate is None or math.isnan(rate):
        r = 0.0
    else:
        r = min(1.0, max(0.0, float(rate)))

    correct = min(total, round_half_up(r * total))
    return correct, total - correct


def _counts(
    rate: float | None, total: int, correct_kind: str, incorrect_kind: str,
) -> OutcomeCounts:
    correct, incorrect = derive_counts(rate, total)
    return OutcomeCounts(
        correct=correct,
        incorrect=incorrect,
        total=total,
        correct_kind=correct_kind,
        incorrect_kind=incorrect_kind,
        rate=None if rate is None else float(rate),
    )


def disease_cohort(sensitivity: float | None, total: int = COHORT_SIZE) -> OutcomeCounts:
    """True positives and false negatives among ``total`` people with the condition."""
    return _counts(sensitivity, total, "tp", "fn")


def non_disease_cohort(specificity: float | None, total: int = COHORT_SIZE) -> OutcomeCounts:
    """True negatives and false positives among ``total`` people without it."""
    return _counts(specificity, total, "tn", "fp")


def probability_grid(probability: float | None, total: int = COHORT_SIZE) -> OutcomeCounts:
    """Highlighted members out of ``total`` at the given probability."""
    return _counts(probability, total, "active", "muted")
