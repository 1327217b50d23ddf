"""Markdown report assembly for benchmark comparison results.

Rendering is pure and deterministic: the same dataset always produces the
same documents. Entries that cannot be rendered are skipped with a warning
rather than failing the whole report.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

from .constants import (
    BASELINE_LABEL,
    CURRENT_LABEL,
    DEFAULT_EXTRA_PAGE_COUNT,
    DETAIL_LINE_SEPARATOR,
    DETAIL_SIDE_SEPARATOR,
    DETAILS_COLLAPSE_LABEL,
    ERROR_MARKER,
    ERRORS_HEADING,
    MEANINGLESS_HEADING,
    NO_ENTRIES_PLACEHOLDER,
    REPORT_TITLE,
    SIGNIFICANT_DETAIL_PARTITIONS,
    SIGNIFICANT_HEADING,
    SKIPPED_TESTS_BANNER,
    SUMMARY_COLLAPSE_LABEL,
    TABLE_HEADER,
    WARNING_MARKER,
    WARNINGS_HEADING,
)
from .format import format_metric, format_metric_diff_change, format_percent, format_runs
from .markdown_table import render_table
from .models import (
    ComparisonDataset,
    ComparisonEntry,
    EntryKind,
    MetricStats,
    ReportDocument,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


# -----------------------------
# Entry rendering
# -----------------------------

def _entry_kind(entry: object) -> Optional[EntryKind]:
    kind = getattr(entry, "kind", None)
    return kind if isinstance(kind, EntryKind) else None


def render_summary_cell(entry: ComparisonEntry) -> str:
    """One-line duration summary for the summary table."""
    kind = _entry_kind(entry)
    if kind is EntryKind.BOTH:
        return format_metric_diff_change(entry)
    if kind is EntryKind.BASELINE_ONLY:
        return format_metric(entry.baseline.mean, entry.unit)
    if kind is EntryKind.CURRENT_ONLY:
        return format_metric(entry.current.mean, entry.unit)
    return ""


def _side_details(title: str, stats: MetricStats, unit: str) -> str:
    lines = [
        f"**{title}**",
        f"Mean: {format_metric(stats.mean, unit)}",
        f"Stdev: {format_metric(stats.stdev, unit)} ({format_percent(stats.relative_stdev)})",
    ]
    if stats.runs:
        lines.append(f"Runs: {format_runs(stats.runs)}")
    return DETAIL_LINE_SEPARATOR.join(lines)


def _entry_sides(entry: ComparisonEntry) -> List[Tuple[str, MetricStats]]:
    kind = _entry_kind(entry)
    sides = []
    if kind in (EntryKind.BASELINE_ONLY, EntryKind.BOTH):
        sides.append((BASELINE_LABEL, entry.baseline))
    if kind in (EntryKind.CURRENT_ONLY, EntryKind.BOTH):
        sides.append((CURRENT_LABEL, entry.current))
    return sides


def render_detail_block(entry: ComparisonEntry) -> str:
    """
    Multi-line statistics block for one entry.

    Each present side contributes its label, mean, stdev (with stdev as a
    percentage of the mean) and raw runs when available. Lines are joined
    with ``<br/>`` so the block fits a single table cell.
    """
    return DETAIL_SIDE_SEPARATOR.join(
        _side_details(title, stats, entry.unit) for title, stats in _entry_sides(entry)
    )


def _renderable(entries: Iterable[ComparisonEntry]) -> List[ComparisonEntry]:
    result = []
    for entry in entries:
        if _entry_kind(entry) is None:
            logger.warning(
                "Skipping entry without baseline or current stats: %s",
                getattr(entry, "name", repr(entry)),
            )
            continue
        result.append(entry)
    return result


# -----------------------------
# Sections
# -----------------------------

def collapsible_section(title: str, content: str) -> str:
    return f"<details>\n<summary>{title}</summary>\n\n{content}\n</details>"


def partition(items: Sequence[T], n: int) -> List[List[T]]:
    """
    Split ``items`` into exactly ``n`` contiguous slices.

    Every slice but the last holds ``len(items) // n`` items; the last slice
    absorbs the remainder. With fewer items than slices the leading slices
    are empty and the last one holds everything.

    Example:
        >>> partition([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4, 5]]
        >>> partition([1, 2], 3)
        [[], [], [1, 2]]

    Raises:
        ValueError: If n < 1
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")

    per_slice = len(items) // n
    slices = []
    for i in range(n):
        start = i * per_slice
        end = len(items) if i == n - 1 else start + per_slice
        slices.append(list(items[start:end]))
    return slices


def build_summary_section(entries: Sequence[ComparisonEntry], collapse: bool = False) -> str:
    """
    Summary table with one row per entry.

    Returns the fixed placeholder text when there is nothing to show, so an
    empty bucket is still visible in the report.
    """
    rows = [[entry.name, render_summary_cell(entry)] for entry in _renderable(entries)]
    if not rows:
        return NO_ENTRIES_PLACEHOLDER

    content = render_table(TABLE_HEADER, rows)
    return collapsible_section(SUMMARY_COLLAPSE_LABEL, content) if collapse else content


def build_detail_sections(entries: Sequence[ComparisonEntry], partition_count: int) -> List[str]:
    """Collapsible per-entry detail tables, one per partition slice."""
    if not entries or partition_count <= 0:
        return []

    sections = []
    for chunk in partition(entries, partition_count):
        rows = [[entry.name, render_detail_block(entry)] for entry in _renderable(chunk)]
        content = render_table(TABLE_HEADER, rows)
        sections.append(collapsible_section(DETAILS_COLLAPSE_LABEL, content))
    return sections


# -----------------------------
# Document assembly
# -----------------------------

class MarkdownDocumentBuilder:
    """Ordered list of Markdown blocks, joined by blank lines on build()."""

    def __init__(self) -> None:
        self._blocks: List[str] = []

    @property
    def blocks(self) -> Tuple[str, ...]:
        return tuple(self._blocks)

    def heading(self, text: str, level: int = 2) -> "MarkdownDocumentBuilder":
        self._blocks.append(f"{'#' * level} {text}")
        return self

    def numbered_list(self, items: Sequence[str], marker: str = "") -> "MarkdownDocumentBuilder":
        prefix = f"{marker} " if marker else ""
        self._blocks.append("\n".join(f"{i}. {prefix}{item}" for i, item in enumerate(items, start=1)))
        return self

    def paragraph(self, text: str) -> "MarkdownDocumentBuilder":
        self._blocks.append(text)
        return self

    def block(self, text: str) -> "MarkdownDocumentBuilder":
        self._blocks.append(text)
        return self

    def build(self) -> str:
        return "\n\n".join(self._blocks) + "\n"


def _page_title(page_index: int, page_total: int) -> str:
    if page_total > 1:
        return f"{REPORT_TITLE} ({page_index}/{page_total})"
    return REPORT_TITLE


def _build_main_page(
    dataset: ComparisonDataset, skipped_tests: Sequence[str], page_total: int
) -> MarkdownDocumentBuilder:
    page = MarkdownDocumentBuilder().heading(_page_title(1, page_total))

    if dataset.errors:
        page.heading(ERRORS_HEADING, level=3).numbered_list(dataset.errors, ERROR_MARKER)

    if dataset.warnings:
        page.heading(WARNINGS_HEADING, level=3).numbered_list(dataset.warnings, WARNING_MARKER)

    if skipped_tests:
        page.paragraph(f"{SKIPPED_TESTS_BANNER} {', '.join(skipped_tests)}")

    page.heading(SIGNIFICANT_HEADING, level=3)
    page.block(build_summary_section(dataset.significant))

    significant_details = build_detail_sections(dataset.significant, SIGNIFICANT_DETAIL_PARTITIONS)
    if significant_details:
        page.block(significant_details[0])
    return page


def build_report(
    dataset: ComparisonDataset,
    skipped_tests: Sequence[str] = (),
    extra_page_count: int = DEFAULT_EXTRA_PAGE_COUNT,
) -> List[ReportDocument]:
    """
    Build the report pages.

    Page 1 holds errors, warnings, the skipped-tests banner and the
    significant changes. Each of the ``extra_page_count`` following pages
    holds the collapsed meaningless-changes summary and one slice of their
    details.

    Args:
        dataset: Classified comparison results
        skipped_tests: Names of tests excluded upstream
        extra_page_count: Number of pages the meaningless changes are split across

    Returns:
        Exactly ``1 + extra_page_count`` documents in page order

    Raises:
        ValueError: If extra_page_count is negative
    """
    if extra_page_count < 0:
        raise ValueError(f"extra_page_count must be non-negative, got {extra_page_count}")

    page_total = extra_page_count + 1
    main_page = _build_main_page(dataset, skipped_tests, page_total)
    documents = [ReportDocument(text=main_page.build(), page_index=1, page_total=page_total)]
    logger.debug("Built report page 1/%d (%d significant entries)", page_total, len(dataset.significant))

    meaningless_summary = build_summary_section(dataset.meaningless, collapse=True)
    meaningless_details = build_detail_sections(dataset.meaningless, extra_page_count)

    for j in range(1, extra_page_count + 1):
        page = MarkdownDocumentBuilder().heading(_page_title(j + 1, page_total))
        page.heading(f"{MEANINGLESS_HEADING} ({j}/{extra_page_count})", level=3)
        page.block(meaningless_summary)
        if meaningless_details:
            page.block(meaningless_details[j - 1])

        documents.append(ReportDocument(text=page.build(), page_index=j + 1, page_total=page_total))
        logger.debug("Built report page %d/%d", j + 1, page_total)

    return documents
