"""Record types for the diagnostic test catalog."""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class TestRecord:
    """One diagnostic test applied to one condition.

    Attributes
    ----------
    test : str
        Test name.  Must be non-empty.
    condition : str
        Target condition.
    sensitivity, specificity : float
        Operating characteristics, each in ``[0, 1]``.
    lr_plus, lr_minus : float
        Positive and negative likelihood ratios, each ``>= 0``.
    reference : str
        Citation for the figures.
    reference_url : str or None
        Link to the cited study, if one is known.
    """

    __test__ = False  # keep pytest from collecting this class

    test: str
    condition: str
    sensitivity: float
    specificity: float
    lr_plus: float
    lr_minus: float
    reference: str
    reference_url: str | None = None

    def __post_init__(self) -> None:
        if not self.test:
            raise ValueError("test must be a non-empty string")
        for name in ("sensitivity", "specificity"):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
        for name in ("lr_plus", "lr_minus"):
            value = getattr(self, name)
            if math.isnan(value) or value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    @property
    def key(self) -> tuple[str, str]:
        """Natural key ``(test, condition)``."""
        return (self.test, self.condition)


@dataclass(frozen=True)
class StudyNote:
    """Study details and caveats behind a catalog entry."""

    overview: str | None = None
    sample_size: str | None = None
    population: str | None = None
    setting: str | None = None
    design: str | None = None
    year: str | None = None
    caveats: tuple[str, ...] = ()
    extra: str | None = None

    def summary(self) -> str:
        """Human-readable summary."""
        lines = []
        if self.overview:
            lines += [self.overview, ""]
        for label, value in (
            ("Sample size", self.sample_size),
            ("Population ", self.population),
            ("Setting    ", self.setting),
            ("Design     ", self.design),
            ("Year       ", self.year),
        ):
            if value:
                lines.append(f"{label}: {value}")
        if self.caveats:
            lines += ["", "Caveats"]
            lines += [f"  - {c}" for c in self.caveats]
        if self.extra:
            lines += ["", self.extra]
        return "\n".join(lines).strip()


@dataclass(frozen=True)
class Catalog:
    """Immutable set of test records and their study notes.

    ``(test, condition)`` is unique across ``records`` and is the key
    joining a record to its entry in ``notes``.  ``notes`` is a read-only
    view of a private copy of the mapping passed in.
    """

    records: tuple[TestRecord, ...]
    notes: Mapping[tuple[str, str], StudyNote] = field(default_factory=dict)

    def __post_init__(self) -> None:
        records = tuple(self.records)
        object.__setattr__(self, "records", records)
        seen: set[tuple[str, str]] = set()
        for r in records:
            if r.key in seen:
                raise ValueError(f"duplicate record for {r.key!r}")
            seen.add(r.key)
        orphans = [k for k in self.notes if k not in seen]
        if orphans:
            raise ValueError(f"study notes without a matching record: {orphans!r}")
        object.__setattr__(self, "notes", MappingProxyType(dict(self.notes)))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[TestRecord]:
        return iter(self.records)

    def conditions(self) -> list[str]:
        """Distinct conditions, sorted."""
        return sorted({r.condition for r in self.records})

    def get(self, test: str, condition: str) -> TestRecord | None:
        for r in self.records:
            if r.key == (test, condition):
                return r
        return None

    def study_notes_for(self, test: str, condition: str) -> StudyNote | None:
        """Notes for ``(test, condition)``, or ``None`` when there are none."""
        return self.notes.get((test, condition))
