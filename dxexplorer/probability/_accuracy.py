"""Likelihood ratios and predictive values from sensitivity/specificity.

Predictive values are post-test probabilities: PPV is the probability of
the condition after a positive result (prior updated by LR+), and NPV is
the probability of no condition after a negative one (1 minus the prior
updated by LR−).
"""

from __future__ import annotations

import math

from dxexplorer.probability._odds import post_test_probability


def _check_rate(name: str, value: float) -> None:
    if not 0 <= value <= 1:
        raise ValueError(f"{name} must be in [0, 1], got {value}")


def _ratio(num: float, den: float) -> float:
    return num / den if den > 0 else math.inf


def likelihood_ratios(sensitivity: float, specificity: float) -> tuple[float, float]:
    """Return ``(LR+, LR−)``; a zero denominator gives ``inf``."""
    _check_rate("sensitivity", sensitivity)
    _check_rate("specificity", specificity)
    return (
        float(_ratio(sensitivity, 1 - specificity)),
        float(_ratio(1 - sensitivity, specificity)),
    )


def predictive_values(
    sensitivity: float,
    specificity: float,
    prevalence: float,
) -> tuple[float, float]:
    """Return ``(PPV, NPV)`` at ``prevalence`` (a probability, not a percent).

    A value is NaN when no one in the cohort receives that result, e.g.
    PPV with zero sensitivity and perfect specificity.
    """
    _check_rate("sensitivity", sensitivity)
    _check_rate("specificity", specificity)
    _check_rate("prevalence", prevalence)

    lr_pos, lr_neg = likelihood_ratios(sensitivity, specificity)

    # share of the cohort testing positive / negative
    positives = sensitivity * prevalence + (1 - specificity) * (1 - prevalence)
    negatives = (1 - sensitivity) * prevalence + specificity * (1 - prevalence)

    ppv = post_test_probability(prevalence, lr_pos) if positives > 0 else math.nan
    npv = 1 - post_test_probability(prevalence, lr_neg) if negatives > 0 else math.nan
    return float(ppv), float(npv)
