"""Data model for benchmark comparison reports.

Entries arrive with their statistics already computed. Which sides of the
comparison are present is encoded in the entry type itself, so renderers
dispatch on ``kind`` instead of probing optional fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple, Union


class MalformedEntryError(ValueError):
    """Raised when an entry has neither baseline nor current statistics."""


class EntryKind(Enum):
    BASELINE_ONLY = "baseline_only"
    CURRENT_ONLY = "current_only"
    BOTH = "both"


@dataclass(frozen=True)
class MetricStats:
    """Pre-computed statistics for one side of a comparison.

    Attributes:
        mean: Mean of the measured runs
        stdev: Standard deviation of the measured runs
        runs: Raw run samples, if the producer kept them
    """
    mean: float
    stdev: float
    runs: Optional[Tuple[float, ...]] = None

    @property
    def relative_stdev(self) -> float:
        """Stdev as a fraction of the mean (nan when the mean is zero)."""
        if self.mean == 0:
            return float("nan")
        return self.stdev / self.mean


@dataclass(frozen=True)
class BaselineOnlyEntry:
    """Test case that only exists in the baseline run (removed test)."""
    name: str
    unit: str
    baseline: MetricStats

    @property
    def kind(self) -> EntryKind:
        return EntryKind.BASELINE_ONLY


@dataclass(frozen=True)
class CurrentOnlyEntry:
    """Test case that only exists in the current run (added test)."""
    name: str
    unit: str
    current: MetricStats

    @property
    def kind(self) -> EntryKind:
        return EntryKind.CURRENT_ONLY


@dataclass(frozen=True)
class BothEntry:
    """Test case measured in both runs."""
    name: str
    unit: str
    baseline: MetricStats
    current: MetricStats

    @property
    def kind(self) -> EntryKind:
        return EntryKind.BOTH

    @property
    def diff(self) -> float:
        return self.current.mean - self.baseline.mean


ComparisonEntry = Union[BaselineOnlyEntry, CurrentOnlyEntry, BothEntry]


def make_entry(
    name: str,
    unit: str,
    baseline: Optional[MetricStats] = None,
    current: Optional[MetricStats] = None,
) -> ComparisonEntry:
    """
    Build the entry variant matching the sides that are present.

    Raises:
        MalformedEntryError: If both baseline and current are missing
    """
    if baseline is not None and current is not None:
        return BothEntry(name=name, unit=unit, baseline=baseline, current=current)
    if baseline is not None:
        return BaselineOnlyEntry(name=name, unit=unit, baseline=baseline)
    if current is not None:
        return CurrentOnlyEntry(name=name, unit=unit, current=current)
    raise MalformedEntryError(f"Entry '{name}' has neither baseline nor current statistics")


@dataclass(frozen=True)
class ComparisonDataset:
    """Classified comparison results handed over by the caller.

    The significant/meaningless split is decided upstream and trusted as given.
    """
    significant: Tuple[ComparisonEntry, ...] = ()
    meaningless: Tuple[ComparisonEntry, ...] = ()
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    @classmethod
    def from_sequences(
        cls,
        significant: Sequence[ComparisonEntry] = (),
        meaningless: Sequence[ComparisonEntry] = (),
        errors: Sequence[str] = (),
        warnings: Sequence[str] = (),
    ) -> "ComparisonDataset":
        return cls(
            significant=tuple(significant),
            meaningless=tuple(meaningless),
            errors=tuple(errors),
            warnings=tuple(warnings),
        )


@dataclass(frozen=True)
class ReportDocument:
    """One rendered Markdown page of the report."""
    text: str
    page_index: int
    page_total: int

    @property
    def label(self) -> str:
        return f"{self.page_index}/{self.page_total}"
