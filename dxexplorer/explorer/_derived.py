"""Values derived from an ``ExplorerState``."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from dxexplorer.catalog import TestRecord
from dxexplorer.explorer._state import ExplorerState, visible_records
from dxexplorer.outcomes import (
    COHORT_SIZE,
    OutcomeCounts,
    disease_cohort,
    non_disease_cohort,
    percent_label,
    probability_grid,
)
from dxexplorer.probability import post_test_probability, predictive_values


@dataclass(frozen=True)
class Derived:
    """Display values for one state.

    With no record selected the likelihood ratio is the neutral 1.0, the
    post-test probability (and its grid) equals the pre-test probability,
    both cohort grids show 0 correct members, and PPV/NPV are ``None``.
    PPV and NPV use the current prevalence.
    """

    selected: TestRecord | None
    polarity: str
    likelihood_ratio: float
    pre_test_probability: float
    post_test_probability: float
    disease: OutcomeCounts
    non_disease: OutcomeCounts
    post_test: OutcomeCounts
    ppv: float | None
    npv: float | None
    selection_visible: bool

    @property
    def lr_label(self) -> str:
        return "LR+" if self.polarity == "positive" else "LR-"

    def summary(self) -> str:
        """Human-readable summary."""
        r = self.selected

        lines = [
            "Diagnostic Test Explorer",
            "=" * 40,
            f"Test          : {r.test} ({r.condition})" if r else "Test          : —",
            f"Sensitivity   : {percent_label(r.sensitivity if r else None)}",
            f"Specificity   : {percent_label(r.specificity if r else None)}",
            f"{self.lr_label:<14s}: " + (f"{self.likelihood_ratio:.2f}" if r else "—"),
            f"Pre-test prob : {percent_label(self.pre_test_probability)}",
            f"Post-test prob: {percent_label(self.post_test_probability)}",
            f"PPV / NPV     : {percent_label(self.ppv)} / {percent_label(self.npv)}",
        ]
        if r:
            lines.append(f"  (Using {self.lr_label} for {r.test})")
            if not self.selection_visible:
                lines.append("  (selected test is hidden by the current filter)")
        lines += [
            f"Disease       : TP {self.disease.correct}, FN {self.disease.incorrect}",
            f"No disease    : TN {self.non_disease.correct}, FP {self.non_disease.incorrect}",
            f"Post-test grid: {self.post_test.correct} of {self.post_test.total}",
        ]
        return "\n".join(lines)


def derive(
    state: ExplorerState,
    records: Iterable[TestRecord] | None,
    *,
    cohort_size: int = COHORT_SIZE,
) -> Derived:
    """Compute every display value for ``state``."""
    r = state.selected
    pre = state.prevalence / 100

    if r is None:
        lr = 1.0
        post = pre
        ppv = npv = None
    else:
        lr = r.lr_plus if state.polarity == "positive" else r.lr_minus
        post = post_test_probability(pre, lr)
        ppv, npv = predictive_values(r.sensitivity, r.specificity, pre)

    return Derived(
        selected=r,
        polarity=state.polarity,
        likelihood_ratio=float(lr),
        pre_test_probability=pre,
        post_test_probability=float(post),
        disease=disease_cohort(r.sensitivity if r else None, cohort_size),
        non_disease=non_disease_cohort(r.specificity if r else None, cohort_size),
        post_test=probability_grid(post, cohort_size),
        ppv=ppv,
        npv=npv,
        selection_visible=r is None or r in visible_records(state, records),
    )
