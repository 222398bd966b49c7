"""Interaction state and its transitions.

``ExplorerState`` bundles the query, condition filter, sort, selection,
prevalence and test-result polarity.  Each transition takes a state and
the record set and returns a new state; nothing is mutated.

After any change to the visible records, ``settle`` applies the
auto-selection rule: if nothing is selected and the view is non-empty,
the first visible record is selected.  What happens to a selected record
that the filter hides is set by ``hidden_selection``:

``'keep'``
    The record stays selected (and its derived values stay on show).
``'reselect'``
    The first visible record is selected instead, or the selection is
    cleared when the view is empty.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace

from dxexplorer.catalog import TestRecord
from dxexplorer.query import ALL_CONDITIONS, SortConfig, query_view, request_sort


DEFAULT_PREVALENCE = 10.0
PREVALENCE_RANGE = (1.0, 90.0)
POLARITIES = ("positive", "negative")
HIDDEN_SELECTION_POLICIES = ("keep", "reselect")


def clamp_prevalence(percent: float) -> float:
    """Clamp a prevalence percentage to ``PREVALENCE_RANGE``; NaN gives the minimum."""
    lo, hi = PREVALENCE_RANGE
    if math.isnan(percent):
        return lo
    return float(min(hi, max(lo, percent)))


def _check_polarity(polarity: str) -> None:
    if polarity not in POLARITIES:
        raise ValueError(
            f"polarity must be 'positive' or 'negative', got {polarity!r}"
        )


def _check_policy(hidden_selection: str) -> None:
    if hidden_selection not in HIDDEN_SELECTION_POLICIES:
        raise ValueError(
            f"hidden_selection must be one of {HIDDEN_SELECTION_POLICIES}, "
            f"got {hidden_selection!r}"
        )


@dataclass(frozen=True)
class ExplorerState:
    """Everything the derived values depend on.

    ``prevalence`` is a percentage and is clamped to ``[1, 90]`` on
    construction.
    """

    query: str = ""
    condition: str = ALL_CONDITIONS
    sort: SortConfig | None = None
    selected: TestRecord | None = None
    prevalence: float = DEFAULT_PREVALENCE
    polarity: str = "positive"

    def __post_init__(self) -> None:
        _check_polarity(self.polarity)
        object.__setattr__(self, "prevalence", clamp_prevalence(self.prevalence))


# ---------------------------------------------------------------------------
# View and auto-selection
# ---------------------------------------------------------------------------

def visible_records(
    state: ExplorerState, records: Iterable[TestRecord] | None,
) -> tuple[TestRecord, ...]:
    """The filtered, sorted records for ``state``."""
    return query_view(records, state.query, state.condition, state.sort)


def settle(
    state: ExplorerState,
    records: Iterable[TestRecord] | None,
    *,
    hidden_selection: str = "keep",
) -> ExplorerState:
    """Apply the auto-selection rule to ``state``."""
    _check_policy(hidden_selection)
    view = visible_records(state, records)

    if state.selected is None:
        if view:
            return replace(state, selected=view[0])
        return state

    if hidden_selection == "reselect" and state.selected not in view:
        return replace(state, selected=view[0] if view else None)
    return state


def initial_state(
    records: Iterable[TestRecord] | None,
    *,
    prevalence: float = DEFAULT_PREVALENCE,
    polarity: str = "positive",
    hidden_selection: str = "keep",
) -> ExplorerState:
    """Unfiltered, unsorted state with the first record selected."""
    state = ExplorerState(prevalence=prevalence, polarity=polarity)
    return settle(state, records, hidden_selection=hidden_selection)


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def set_query(
    state: ExplorerState,
    records: Iterable[TestRecord] | None,
    text: str,
    *,
    hidden_selection: str = "keep",
) -> ExplorerState:
    return settle(replace(state, query=text), records, hidden_selection=hidden_selection)


def set_condition_filter(
    state: ExplorerState,
    records: Iterable[TestRecord] | None,
    condition: str,
    *,
    hidden_selection: str = "keep",
) -> ExplorerState:
    """Filter to ``condition``, or ``'All'`` to clear the filter.

    ``condition`` must be ``'All'`` or a condition present in ``records``.
    """
    records = None if records is None else tuple(records)
    valid = {ALL_CONDITIONS} | {r.condition for r in records or ()}
    if condition not in valid:
        raise ValueError(
            f"condition must be 'All' or one of the catalog conditions, got {condition!r}"
        )
    return settle(
        replace(state, condition=condition), records, hidden_selection=hidden_selection,
    )


def request_sort_on(
    state: ExplorerState,
    records: Iterable[TestRecord] | None,
    key: str,
    *,
    hidden_selection: str = "keep",
) -> ExplorerState:
    """Sort on ``key``, flipping direction if it is already sorted ascending."""
    return settle(
        replace(state, sort=request_sort(state.sort, key)),
        records,
        hidden_selection=hidden_selection,
    )


def select(
    state: ExplorerState,
    records: Iterable[TestRecord] | None,
    record: TestRecord,
) -> ExplorerState:
    """Make ``record`` the active record.  It must be visible."""
    if record not in visible_records(state, records):
        raise ValueError(
            f"record {record.key!r} is not in the current view"
        )
    return replace(state, selected=record)


def set_prevalence(state: ExplorerState, percent: float) -> ExplorerState:
    """Set the pre-test prevalence in percent; clamped to ``[1, 90]``."""
    return replace(state, prevalence=percent)


def set_polarity(state: ExplorerState, polarity: str) -> ExplorerState:
    _check_polarity(polarity)
    return replace(state, polarity=polarity)


def toggle_polarity(state: ExplorerState) -> ExplorerState:
    flipped = "negative" if state.polarity == "positive" else "positive"
    return replace(state, polarity=flipped)
