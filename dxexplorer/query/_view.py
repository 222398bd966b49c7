"""Filtering and sorting of test records.

Filter: a record passes when its condition matches the selected one (or
the filter is ``'All'``) and the query, case-insensitively, is a
substring of its test name or condition.  An empty query matches
everything.

Sort: stable in both directions, so records with equal keys keep their
input order.  Strings compare lexicographically and numbers by value;
a missing value sorts as the empty string.
"""

from __future__ import annotations

from collections.abc import Iterable

from dxexplorer.catalog import TestRecord
from dxexplorer.query._common import ALL_CONDITIONS, SortConfig


def _matches(record: TestRecord, needle: str, condition: str) -> bool:
    if condition != ALL_CONDITIONS and record.condition != condition:
        return False
    if not needle:
        return True
    return needle in record.test.lower() or needle in record.condition.lower()


def filter_records(
    records: Iterable[TestRecord] | None,
    query: str = "",
    condition: str = ALL_CONDITIONS,
) -> tuple[TestRecord, ...]:
    """Records matching ``condition`` and containing ``query``.

    ``records=None`` (no data loaded) gives an empty tuple.
    """
    if records is None:
        return ()
    needle = query.lower()
    return tuple(r for r in records if _matches(r, needle, condition))


def sort_records(
    records: Iterable[TestRecord],
    config: SortConfig | None,
) -> tuple[TestRecord, ...]:
    """Records ordered by ``config``; input order when ``config`` is None."""
    records = tuple(records)
    if config is None:
        return records

    def key(record: TestRecord):
        value = getattr(record, config.key)
        return "" if value is None else value

    # sorted() stays stable with reverse=True
    return tuple(sorted(records, key=key, reverse=config.descending))


def request_sort(current: SortConfig | None, key: str) -> SortConfig:
    """Next sort after the user asks to sort on ``key``.

    Asking again for the key currently sorted ascending flips it to
    descending; anything else sorts ``key`` ascending.
    """
    if current is not None and current.key == key and current.direction == "asc":
        return SortConfig(key, "desc")
    return SortConfig(key, "asc")


def query_view(
    records: Iterable[TestRecord] | None,
    query: str = "",
    condition: str = ALL_CONDITIONS,
    sort: SortConfig | None = None,
) -> tuple[TestRecord, ...]:
    """Filter, then sort."""
    return sort_records(filter_records(records, query, condition), sort)
