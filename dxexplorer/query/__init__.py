"""
Visible subset of the catalog: free-text and condition filtering,
stable single-field sorting, and sort toggling.
"""

from dxexplorer.query._common import ALL_CONDITIONS, SORT_FIELDS, SortConfig
from dxexplorer.query._view import (
    filter_records,
    sort_records,
    request_sort,
    query_view,
)

__all__ = [
    "ALL_CONDITIONS",
    "SORT_FIELDS",
    "SortConfig",
    "filter_records",
    "sort_records",
    "request_sort",
    "query_view",
]
