"""Tests for derived display values."""

import pytest

from dxexplorer.catalog import TestRecord, default_catalog
from dxexplorer.explorer import (
    Derived,
    ExplorerState,
    derive,
    select,
    set_condition_filter,
    set_polarity,
    set_prevalence,
    initial_state,
)


@pytest.fixture
def records():
    return default_catalog().records


@pytest.fixture
def psa_state(records):
    psa = next(r for r in records if r.test == "PSA")
    return select(initial_state(records), records, psa)


class TestDerive:
    """derive()."""

    def test_returns_derived(self, records, psa_state):
        assert isinstance(derive(psa_state, records), Derived)

    def test_positive_uses_lr_plus(self, records, psa_state):
        d = derive(psa_state, records)
        assert d.likelihood_ratio == 1.10
        assert d.post_test_probability == pytest.approx(0.109, abs=1e-3)

    def test_negative_uses_lr_minus(self, records, psa_state):
        d = derive(set_polarity(psa_state, "negative"), records)
        assert d.likelihood_ratio == 0.50
        assert d.post_test_probability == pytest.approx(0.053, abs=1e-3)

    def test_pre_test_from_percent(self, records, psa_state):
        d = derive(set_prevalence(psa_state, 25), records)
        assert d.pre_test_probability == pytest.approx(0.25)

    def test_grids(self, records, psa_state):
        d = derive(psa_state, records)
        assert (d.disease.correct, d.disease.incorrect) == (92, 8)
        assert (d.non_disease.correct, d.non_disease.incorrect) == (16, 84)
        assert d.post_test.correct == 11

    def test_zero_lr_minus(self, records):
        dd = next(r for r in records if r.test == "D-dimer (ELISA)")
        s = set_polarity(select(initial_state(records), records, dd), "negative")
        d = derive(set_prevalence(s, 90), records)
        assert d.post_test_probability == 0.0
        assert d.post_test.correct == 0

    def test_no_selection(self):
        d = derive(ExplorerState(prevalence=30), None)
        assert d.selected is None
        assert d.likelihood_ratio == 1.0
        assert d.post_test_probability == pytest.approx(0.30)
        assert d.disease.correct == 0
        assert d.non_disease.correct == 0
        assert d.post_test.correct == 30

    def test_selection_visible_flag(self, records, psa_state):
        assert derive(psa_state, records).selection_visible
        hidden = set_condition_filter(psa_state, records, "DVT")
        assert not derive(hidden, records).selection_visible

    def test_cohort_size(self, records, psa_state):
        d = derive(psa_state, records, cohort_size=1000)
        assert d.disease.total == 1000
        assert d.disease.correct == 920

    def test_predictive_values(self, records, psa_state):
        d = derive(psa_state, records)
        assert d.ppv == pytest.approx(0.092 / 0.848)
        assert d.npv == pytest.approx(18 / 19)

    def test_predictive_values_ignore_polarity(self, records, psa_state):
        pos = derive(psa_state, records)
        neg = derive(set_polarity(psa_state, "negative"), records)
        assert (neg.ppv, neg.npv) == (pos.ppv, pos.npv)

    def test_predictive_values_follow_prevalence(self, records, psa_state):
        low = derive(psa_state, records)
        high = derive(set_prevalence(psa_state, 50), records)
        assert high.ppv > low.ppv
        assert high.npv < low.npv

    def test_perfect_sensitivity_npv(self, records):
        dd = next(r for r in records if r.test == "D-dimer (ELISA)")
        d = derive(select(initial_state(records), records, dd), records)
        assert d.npv == 1.0

    def test_no_selection_predictive_values(self):
        d = derive(ExplorerState(), None)
        assert d.ppv is None
        assert d.npv is None


class TestDerivedSummary:
    """Summary output."""

    def test_selected(self, records, psa_state):
        s = derive(psa_state, records).summary()
        assert "PSA (Prostate Cancer)" in s
        assert "Sensitivity   : 92%" in s
        assert "LR+" in s and "1.10" in s
        assert "Using LR+ for PSA" in s
        assert "TP 92, FN 8" in s

    def test_negative_label(self, records, psa_state):
        s = derive(set_polarity(psa_state, "negative"), records).summary()
        assert "Using LR- for PSA" in s
        assert "0.50" in s

    def test_no_selection(self):
        s = derive(ExplorerState(), None).summary()
        assert "Test          : —" in s
        assert "Pre-test prob : 10%" in s
        assert "PPV / NPV     : — / —" in s

    def test_predictive_values_line(self, records, psa_state):
        s = derive(psa_state, records).summary()
        assert "PPV / NPV     : 11% / 95%" in s

    def test_half_percent_rounds_up(self):
        rec = TestRecord("Test A", "Condition X", 0.625, 0.9, 6.25, 0.42, "ref")
        records = (rec,)
        d = derive(select(initial_state(records), records, rec), records)
        s = d.summary()
        assert "Sensitivity   : 63%" in s
        assert "Specificity   : 90%" in s
        assert "TP 63, FN 37" in s
