"""Probability/odds conversion and likelihood-ratio updating.

Every function accepts a scalar or an array (broadcast with numpy) and
never raises on numeric input: probabilities are clamped to ``[0, 1]``
before and after each conversion, so no NaN or overflow reaches the
result.  Scalar inputs give a ``float`` back.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _clamp01(x: ArrayLike) -> NDArray[np.floating]:
    """Clamp to [0, 1]; NaN maps to 0."""
    x = np.asarray(x, dtype=np.float64)
    return np.clip(np.nan_to_num(x, nan=0.0, posinf=1.0, neginf=0.0), 0.0, 1.0)


def _clean_odds(o: ArrayLike) -> NDArray[np.floating]:
    """Negative or NaN odds map to 0; ``+inf`` is kept."""
    o = np.asarray(o, dtype=np.float64)
    o = np.nan_to_num(o, nan=0.0, posinf=np.inf, neginf=0.0)
    return np.maximum(o, 0.0)


def _clean_lr(lr: ArrayLike) -> NDArray[np.floating]:
    """Negative ratios map to 0; NaN maps to the neutral ratio 1."""
    lr = np.asarray(lr, dtype=np.float64)
    lr = np.nan_to_num(lr, nan=1.0, posinf=np.inf, neginf=0.0)
    return np.maximum(lr, 0.0)


def _to_odds(p: NDArray[np.floating]) -> NDArray[np.floating]:
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.where(p >= 1.0, np.inf, p / (1.0 - p))


def _to_prob(o: NDArray[np.floating]) -> NDArray[np.floating]:
    with np.errstate(invalid="ignore"):
        p = np.where(np.isinf(o), 1.0, o / (1.0 + o))
    return np.clip(p, 0.0, 1.0)


def _result(x: NDArray[np.floating], *inputs: ArrayLike) -> float | NDArray[np.floating]:
    if all(np.ndim(a) == 0 for a in inputs):
        return float(x)
    return x


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def probability_to_odds(p: ArrayLike) -> float | NDArray[np.floating]:
    """Convert a probability to odds, ``p / (1 - p)``.

    ``p`` is clamped to ``[0, 1]`` first.  ``p = 0`` gives 0 and ``p = 1``
    gives ``inf``.
    """
    return _result(_to_odds(_clamp01(p)), p)


def odds_to_probability(o: ArrayLike) -> float | NDArray[np.floating]:
    """Convert odds to a probability, ``o / (1 + o)``, clamped to ``[0, 1]``.

    Negative or NaN odds give 0; infinite odds give exactly 1.
    """
    return _result(_to_prob(_clean_odds(o)), o)


def post_test_probability(
    prevalence: ArrayLike,
    likelihood_ratio: ArrayLike,
) -> float | NDArray[np.floating]:
    """Update a pre-test probability with a likelihood ratio.

    The prior is clamped to ``[0, 1]``, converted to odds, multiplied by
    the likelihood ratio, and converted back.

    Parameters
    ----------
    prevalence : float or array
        Pre-test probability of the condition.
    likelihood_ratio : float or array
        LR+ for a positive result, LR− for a negative one.  May be 0 or
        very large.  Negative values are treated as 0 and NaN as the
        neutral ratio 1.

    Returns
    -------
    float or array
        Post-test probability, always finite and in ``[0, 1]``.  A ratio
        of exactly 1 returns the clamped prior unchanged.  A certain prior
        (0 or 1) is never revised, including by a ratio of 0 or ``inf``.
    """
    pre = _clamp01(prevalence)
    lr = _clean_lr(likelihood_ratio)

    odds = _to_odds(pre)
    with np.errstate(invalid="ignore", over="ignore"):
        post_odds = odds * lr
    # inf * 0 and 0 * inf: the certain prior wins
    post_odds = np.where(np.isnan(post_odds), np.where(pre >= 1.0, np.inf, 0.0), post_odds)

    post = np.where(lr == 1.0, pre, _to_prob(post_odds))
    return _result(post, prevalence, likelihood_ratio)
