"""Tests for filtering and sorting."""

import pytest

from dxexplorer.catalog import TestRecord, default_catalog
from dxexplorer.query import (
    ALL_CONDITIONS,
    SORT_FIELDS,
    SortConfig,
    filter_records,
    query_view,
    request_sort,
    sort_records,
)


@pytest.fixture
def records():
    return default_catalog().records


@pytest.fixture
def ties():
    """Records with repeated sort keys, in a known input order."""
    return (
        TestRecord("b", "X", 0.5, 0.9, 5.0, 0.5, "r1"),
        TestRecord("a", "Y", 0.7, 0.9, 7.0, 0.3, "r2"),
        TestRecord("c", "X", 0.5, 0.8, 2.5, 0.6, "r3", "https://c"),
        TestRecord("d", "Y", 0.7, 0.8, 3.5, 0.4, "r4"),
    )


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------

class TestFilter:
    """filter_records."""

    def test_no_filter_returns_all(self, records):
        assert filter_records(records) == tuple(records)

    def test_condition_and_query(self, records):
        out = filter_records(records, "FIT", "Colorectal Cancer")
        assert [r.key for r in out] == [("FIT", "Colorectal Cancer")]

    def test_case_insensitive(self, records):
        out = filter_records(records, "d-DIMER")
        assert len(out) == 3
        assert all("D-dimer" in r.test for r in out)

    def test_query_matches_condition(self, records):
        out = filter_records(records, "covid")
        assert {r.test for r in out} == {"Rapid Antigen", "PCR"}

    def test_condition_only(self, records):
        out = filter_records(records, condition="DVT")
        assert {r.test for r in out} == {"D-dimer (POC)", "Wells Score", "Ultrasound"}

    def test_all_sentinel(self, records):
        assert len(filter_records(records, condition=ALL_CONDITIONS)) == len(records)

    def test_no_match(self, records):
        assert filter_records(records, "zzz") == ()

    def test_preserves_order(self, records):
        out = filter_records(records, condition="Prostate Cancer")
        assert [r.test for r in out] == ["PSA", "MRI (mpMRI)"]

    def test_none_dataset(self):
        assert filter_records(None, "FIT") == ()

    def test_does_not_mutate(self, records):
        before = tuple(records)
        filter_records(records, "ca")
        assert tuple(records) == before


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

class TestSortConfig:
    """SortConfig validation."""

    def test_fields(self):
        assert "lr_plus" in SORT_FIELDS
        assert "test" in SORT_FIELDS

    def test_invalid_key(self):
        with pytest.raises(ValueError, match="key"):
            SortConfig("auc")

    def test_invalid_direction(self):
        with pytest.raises(ValueError, match="direction"):
            SortConfig("test", "up")


class TestSort:
    """sort_records."""

    def test_none_keeps_order(self, ties):
        assert sort_records(ties, None) == ties

    def test_string_ascending(self, ties):
        out = sort_records(ties, SortConfig("test"))
        assert [r.test for r in out] == ["a", "b", "c", "d"]

    def test_numeric_descending(self, ties):
        out = sort_records(ties, SortConfig("lr_plus", "desc"))
        assert [r.lr_plus for r in out] == [7.0, 5.0, 3.5, 2.5]

    def test_stable_ascending(self, ties):
        out = sort_records(ties, SortConfig("sensitivity"))
        assert [r.test for r in out] == ["b", "c", "a", "d"]

    def test_stable_descending(self, ties):
        out = sort_records(ties, SortConfig("sensitivity", "desc"))
        assert [r.test for r in out] == ["a", "d", "b", "c"]

    def test_resort_same_key_is_idempotent(self, ties):
        cfg = SortConfig("specificity")
        once = sort_records(ties, cfg)
        assert sort_records(once, cfg) == once

    def test_missing_url_sorts_first(self, ties):
        out = sort_records(ties, SortConfig("reference_url"))
        assert out[-1].test == "c"

    def test_returns_new_tuple(self, ties):
        out = sort_records(list(ties), SortConfig("test"))
        assert isinstance(out, tuple)

    def test_catalog_sorted_by_lr_plus(self, records):
        out = sort_records(records, SortConfig("lr_plus", "desc"))
        assert out[0].test == "Rapid Antigen"


class TestRequestSort:
    """Sort toggling."""

    def test_first_request_ascending(self):
        assert request_sort(None, "test") == SortConfig("test", "asc")

    def test_same_key_flips(self):
        cfg = request_sort(None, "test")
        assert request_sort(cfg, "test") == SortConfig("test", "desc")

    def test_third_request_back_to_ascending(self):
        cfg = request_sort(request_sort(None, "test"), "test")
        assert request_sort(cfg, "test").direction == "asc"

    def test_new_key_resets(self):
        cfg = SortConfig("test", "desc")
        assert request_sort(cfg, "sensitivity") == SortConfig("sensitivity", "asc")

    def test_invalid_key(self):
        with pytest.raises(ValueError, match="key"):
            request_sort(None, "colour")


class TestQueryView:
    """Filter then sort."""

    def test_compose(self, records):
        out = query_view(records, "", "DVT", SortConfig("specificity", "desc"))
        assert [r.test for r in out] == ["Ultrasound", "D-dimer (POC)", "Wells Score"]
