"""
DxExplorer: diagnostic test performance and Bayesian post-test probability.

Filter and sort a catalog of screening/diagnostic tests, pick one, and see
how a positive or negative result moves the probability of the condition
from a chosen prevalence, with 100-member outcome grids for sensitivity,
specificity and the post-test probability.

Usage:
    from dxexplorer import catalog, probability, outcomes, query, explorer
"""

__version__ = "0.1.0"

from dxexplorer import catalog
from dxexplorer import probability
from dxexplorer import outcomes
from dxexplorer import query
from dxexplorer import explorer

__all__ = [
    "__version__",
    "catalog",
    "probability",
    "outcomes",
    "query",
    "explorer",
]
