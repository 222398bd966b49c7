"""
Catalog of diagnostic tests and the studies behind their figures.

Each record pairs a test with a target condition and carries the
sensitivity, specificity and likelihood ratios reported by the cited
study.  Study notes are keyed by ``(test, condition)``.
"""

from __future__ import annotations

from functools import lru_cache

from dxexplorer.catalog._common import Catalog, StudyNote, TestRecord
from dxexplorer.catalog._data import RECORDS, STUDY_NOTES


@lru_cache(maxsize=None)
def default_catalog() -> Catalog:
    """The compiled-in catalog, built once per process."""
    return Catalog(RECORDS, STUDY_NOTES)


def study_notes_for(test: str, condition: str) -> StudyNote | None:
    """Study notes for ``(test, condition)`` in the default catalog."""
    return default_catalog().study_notes_for(test, condition)


__all__ = [
    "Catalog",
    "StudyNote",
    "TestRecord",
    "default_catalog",
    "study_notes_for",
]
