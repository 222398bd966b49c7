"""Tests for outcome-count derivation."""

import math

import numpy as np
import pytest

from dxexplorer.outcomes import (
    COHORT_SIZE,
    OutcomeCounts,
    derive_counts,
    disease_cohort,
    non_disease_cohort,
    percent_label,
    probability_grid,
    round_half_up,
)


# ---------------------------------------------------------------------------
# derive_counts
# ---------------------------------------------------------------------------

class TestDeriveCounts:
    """Rounding once and taking the complement."""

    def test_sensitivity_079(self):
        assert derive_counts(0.79) == (79, 21)

    @pytest.mark.parametrize("rate", np.linspace(0, 1, 201))
    def test_sums_to_total(self, rate):
        correct, incorrect = derive_counts(float(rate))
        assert correct + incorrect == COHORT_SIZE
        assert correct == math.floor(rate * 100 + 0.5)

    def test_half_rounds_up(self):
        assert derive_counts(0.005) == (1, 99)
        assert derive_counts(0.125, total=4) == (1, 3)

    def test_just_below_half(self):
        assert derive_counts(0.004) == (0, 100)

    def test_bounds(self):
        assert derive_counts(0.0) == (0, 100)
        assert derive_counts(1.0) == (100, 0)

    def test_clamps(self):
        assert derive_counts(1.7) == (100, 0)
        assert derive_counts(-0.2) == (0, 100)

    def test_none_is_neutral(self):
        assert derive_counts(None) == (0, 100)

    def test_nan_is_neutral(self):
        assert derive_counts(float("nan")) == (0, 100)

    def test_custom_total(self):
        assert derive_counts(0.5, total=10) == (5, 5)

    @pytest.mark.parametrize("total", [0, -5, 2.5, True])
    def test_invalid_total(self, total):
        with pytest.raises(ValueError, match="total"):
            derive_counts(0.5, total=total)


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------

class TestModes:
    """Disease, non-disease and post-test grids."""

    def test_disease_cohort(self):
        c = disease_cohort(0.79)
        assert isinstance(c, OutcomeCounts)
        assert (c.correct, c.incorrect) == (79, 21)
        assert (c.correct_kind, c.incorrect_kind) == ("tp", "fn")

    def test_non_disease_cohort(self):
        c = non_disease_cohort(0.94)
        assert (c.correct, c.incorrect) == (94, 6)
        assert (c.correct_kind, c.incorrect_kind) == ("tn", "fp")

    def test_probability_grid(self):
        c = probability_grid(0.526)
        assert c.correct == 53
        assert (c.correct_kind, c.incorrect_kind) == ("active", "muted")

    def test_no_rate(self):
        c = disease_cohort(None)
        assert c.correct == 0
        assert c.rate is None


class TestCells:
    """Per-member labels."""

    def test_cells_layout(self):
        cells = disease_cohort(0.79).cells()
        assert cells.shape == (100,)
        assert np.all(cells[:79] == "tp")
        assert np.all(cells[79:] == "fn")

    def test_cells_reshape_ten_by_ten(self):
        grid = probability_grid(0.3).cells().reshape(10, 10)
        assert np.sum(grid == "active") == 30
        assert np.all(grid[:3] == "active")


class TestSummary:
    """Summary output."""

    def test_summary(self):
        s = disease_cohort(0.79).summary()
        assert "79%" in s
        assert "True positive 79" in s
        assert "False negative 21" in s

    def test_summary_no_rate(self):
        assert "—" in non_disease_cohort(None).summary()

    def test_summary_half_rate_rounds_up(self):
        assert "63%" in disease_cohort(0.625).summary()


# ---------------------------------------------------------------------------
# Display rounding
# ---------------------------------------------------------------------------

class TestPercentLabel:
    """Percent labels use the same half-up rule as the grid counts."""

    @pytest.mark.parametrize("x, expected", [(62.5, 63), (0.5, 1), (2.5, 3), (2.4999, 2), (0.0, 0)])
    def test_round_half_up(self, x, expected):
        assert round_half_up(x) == expected

    def test_half_percent_rounds_up(self):
        assert percent_label(0.625) == "63%"
        assert percent_label(0.125) == "13%"

    def test_whole_percent(self):
        assert percent_label(0.92) == "92%"

    def test_missing(self):
        assert percent_label(None) == "—"
        assert percent_label(float("nan")) == "—"

    def test_matches_counts(self):
        counts = disease_cohort(0.625)
        assert (counts.correct, counts.incorrect) == (63, 37)
        assert percent_label(counts.rate) == f"{counts.correct}%"
