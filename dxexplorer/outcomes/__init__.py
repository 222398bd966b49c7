"""
Outcome grids for a fixed cohort.

Turns sensitivity, specificity or a post-test probability into whole
counts out of 100 (true/false positives and negatives, or highlighted
members) for icon-grid displays.
"""

from dxexplorer.outcomes._common import (
    COHORT_SIZE,
    OutcomeCounts,
    percent_label,
    round_half_up,
)
from dxexplorer.outcomes._grid import (
    derive_counts,
    disease_cohort,
    non_disease_cohort,
    probability_grid,
)

__all__ = [
    "COHORT_SIZE",
    "OutcomeCounts",
    "percent_label",
    "round_half_up",
    "derive_counts",
    "disease_cohort",
    "non_disease_cohort",
    "probability_grid",
]
