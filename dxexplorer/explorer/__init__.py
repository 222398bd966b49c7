"""
Interactive selection over the test catalog.

``ExplorerState`` plus pure transition functions model the query,
condition filter, sort, active record, prevalence and test-result
polarity.  ``derive`` turns a state into display values (likelihood
ratio, pre/post-test probability, outcome grids).  ``Explorer`` wraps
both behind mutators and read accessors.
"""

from dxexplorer.explorer._state import (
    DEFAULT_PREVALENCE,
    PREVALENCE_RANGE,
    POLARITIES,
    HIDDEN_SELECTION_POLICIES,
    ExplorerState,
    clamp_prevalence,
    visible_records,
    settle,
    initial_state,
    set_query,
    set_condition_filter,
    request_sort_on,
    select,
    set_prevalence,
    set_polarity,
    toggle_polarity,
)
from dxexplorer.explorer._derived import Derived, derive
from dxexplorer.explorer._explorer import Explorer

__all__ = [
    "DEFAULT_PREVALENCE",
    "PREVALENCE_RANGE",
    "POLARITIES",
    "HIDDEN_SELECTION_POLICIES",
    "ExplorerState",
    "Derived",
    "Explorer",
    "clamp_prevalence",
    "visible_records",
    "settle",
    "initial_state",
    "set_query",
    "set_condition_filter",
    "request_sort_on",
    "select",
    "set_prevalence",
    "set_polarity",
    "toggle_polarity",
    "derive",
]
