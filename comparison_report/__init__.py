"""Markdown performance comparison reports."""

from .format import format_metric, format_metric_diff_change, format_percent
from .markdown_report import build_report
from .models import (
    BaselineOnlyEntry,
    BothEntry,
    ComparisonDataset,
    ComparisonEntry,
    CurrentOnlyEntry,
    MalformedEntryError,
    MetricStats,
    ReportDocument,
    make_entry,
)
from .writer import ReportWriteError, write_documents, write_to_markdown

__version__ = "1.0.0"
