"""
Bayesian updating with likelihood ratios.

Pre-test probability -> odds -> odds x LR -> post-test probability, with
clamping at every step so the result is always a finite value in [0, 1].
Also the textbook LR and PPV/NPV formulas for a single operating point.
"""

from dxexplorer.probability._odds import (
    probability_to_odds,
    odds_to_probability,
    post_test_probability,
)
from dxexplorer.probability._accuracy import likelihood_ratios, predictive_values

__all__ = [
    "probability_to_odds",
    "odds_to_probability",
    "post_test_probability",
    "likelihood_ratios",
    "predictive_values",
]
