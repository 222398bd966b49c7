"""Sort configuration and constants for record queries."""

from __future__ import annotations

from dataclasses import dataclass, fields

from dxexplorer.catalog import TestRecord


ALL_CONDITIONS = "All"

SORT_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(TestRecord))

SORT_DIRECTIONS = ("asc", "desc")


@dataclass(frozen=True)
class SortConfig:
    """Field to sort on and the direction, ``'asc'`` or ``'desc'``."""

    key: str
    direction: str = "asc"

    def __post_init__(self) -> None:
        if self.key not in SORT_FIELDS:
            raise ValueError(
                f"key must be one of {SORT_FIELDS}, got {self.key!r}"
            )
        if self.direction not in SORT_DIRECTIONS:
            raise ValueError(
                f"direction must be 'asc' or 'desc', got {self.direction!r}"
            )

    @property
    def descending(self) -> bool:
        return self.direction == "desc"
