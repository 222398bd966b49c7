"""Stateful front end over the pure state transitions.

``Explorer`` owns one ``ExplorerState`` and a catalog, applies each user
action through the matching transition, and recomputes the view and the
derived values before returning.  Reads never see values from an older
state.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from dxexplorer.catalog import Catalog, StudyNote, TestRecord, default_catalog
from dxexplorer.explorer import _state
from dxexplorer.explorer._derived import Derived, derive
from dxexplorer.explorer._state import DEFAULT_PREVALENCE, ExplorerState
from dxexplorer.outcomes import COHORT_SIZE, OutcomeCounts
from dxexplorer.query import ALL_CONDITIONS

logger = logging.getLogger(__name__)


class Explorer:
    """Query, selection and Bayesian update for a test catalog.

    Parameters
    ----------
    catalog : Catalog or None
        Records to explore.  Defaults to the compiled-in catalog.  Use
        ``load(None)`` to model data that has not arrived yet.
    prevalence : float
        Initial pre-test prevalence in percent, clamped to ``[1, 90]``.
    polarity : str
        Initial test result, ``'positive'`` or ``'negative'``.
    hidden_selection : str
        ``'keep'`` leaves a selected record selected when the filter hides
        it; ``'reselect'`` moves the selection to the first visible record.
    cohort_size : int
        Members per outcome grid.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        *,
        prevalence: float = DEFAULT_PREVALENCE,
        polarity: str = "positive",
        hidden_selection: str = "keep",
        cohort_size: int = COHORT_SIZE,
    ) -> None:
        if not isinstance(cohort_size, int) or cohort_size < 1:
            raise ValueError(f"cohort_size must be a positive integer, got {cohort_size!r}")
        self._catalog: Catalog | None = catalog if catalog is not None else default_catalog()
        self._hidden_selection = hidden_selection
        self._cohort_size = cohort_size
        self._update(
            _state.initial_state(
                self._records,
                prevalence=prevalence,
                polarity=polarity,
                hidden_selection=hidden_selection,
            ),
            "init",
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @property
    def _records(self) -> tuple[TestRecord, ...] | None:
        return None if self._catalog is None else self._catalog.records

    def _update(self, state: ExplorerState, action: str) -> None:
        self._state = state
        self._view = _state.visible_records(state, self._records)
        self._derived = derive(state, self._records, cohort_size=self._cohort_size)
        logger.debug(
            "%s: %d visible, selected=%s, prevalence=%.0f%%, polarity=%s, post=%.4f",
            action,
            len(self._view),
            state.selected.key if state.selected else None,
            state.prevalence,
            state.polarity,
            self._derived.post_test_probability,
        )

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def load(self, catalog: Catalog | None) -> None:
        """Swap in a new catalog; ``None`` empties the view.

        A selection that is not in the new catalog is dropped.
        """
        self._catalog = catalog
        state = self._state
        if catalog is None or state.condition not in catalog.conditions():
            state = replace(state, condition=ALL_CONDITIONS)
        if state.selected is not None and (
            catalog is None or state.selected not in catalog.records
        ):
            state = replace(state, selected=None)
        state = _state.settle(state, self._records, hidden_selection=self._hidden_selection)
        self._update(state, "load")

    def set_query(self, text: str) -> None:
        self._update(
            _state.set_query(
                self._state, self._records, text, hidden_selection=self._hidden_selection,
            ),
            "set_query",
        )

    def set_condition_filter(self, condition: str) -> None:
        self._update(
            _state.set_condition_filter(
                self._state, self._records, condition,
                hidden_selection=self._hidden_selection,
            ),
            "set_condition_filter",
        )

    def request_sort(self, key: str) -> None:
        self._update(
            _state.request_sort_on(
                self._state, self._records, key, hidden_selection=self._hidden_selection,
            ),
            "request_sort",
        )

    def select(self, record: TestRecord) -> None:
        self._update(_state.select(self._state, self._records, record), "select")

    def set_prevalence(self, percent: float) -> None:
        self._update(_state.set_prevalence(self._state, percent), "set_prevalence")

    def set_polarity(self, polarity: str) -> None:
        self._update(_state.set_polarity(self._state, polarity), "set_polarity")

    def toggle_polarity(self) -> None:
        self._update(_state.toggle_polarity(self._state), "toggle_polarity")

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def state(self) -> ExplorerState:
        return self._state

    @property
    def view(self) -> tuple[TestRecord, ...]:
        """Filtered, sorted records."""
        return self._view

    @property
    def derived(self) -> Derived:
        return self._derived

    @property
    def conditions(self) -> list[str]:
        return [] if self._catalog is None else self._catalog.conditions()

    @property
    def selected(self) -> TestRecord | None:
        return self._state.selected

    @property
    def likelihood_ratio(self) -> float:
        return self._derived.likelihood_ratio

    @property
    def pre_test_probability(self) -> float:
        return self._derived.pre_test_probability

    @property
    def post_test_probability(self) -> float:
        return self._derived.post_test_probability

    @property
    def ppv(self) -> float | None:
        return self._derived.ppv

    @property
    def npv(self) -> float | None:
        return self._derived.npv

    @property
    def disease_counts(self) -> OutcomeCounts:
        return self._derived.disease

    @property
    def non_disease_counts(self) -> OutcomeCounts:
        return self._derived.non_disease

    @property
    def post_test_counts(self) -> OutcomeCounts:
        return self._derived.post_test

    def study_notes_for(self, test: str, condition: str) -> StudyNote | None:
        if self._catalog is None:
            return None
        return self._catalog.study_notes_for(test, condition)

    def study_notes(self) -> StudyNote | None:
        """Notes for the selected record, if any."""
        r = self._state.selected
        return None if r is None else self.study_notes_for(r.test, r.condition)
