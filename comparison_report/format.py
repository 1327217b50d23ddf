"""Number formatting helpers for the Markdown report.

Non-finite values never raise: they render as the ``N/A`` sentinel so a
single broken statistic cannot abort a whole report.
"""

from __future__ import annotations

from typing import Any, Iterable

import numpy as np

from .constants import (
    DIFF_ARROW,
    IMPROVEMENT_SYMBOL,
    METRIC_DECIMALS,
    NOT_AVAILABLE,
    PCT_CONVERSION_FACTOR,
    PERCENT_CHANGE_EPSILON,
    PERCENT_DECIMALS,
    REGRESSION_SYMBOL,
    SMALL_METRIC_SIGNIFICANT_DIGITS,
    Z_SCORE_NOTABLE,
    Z_SCORE_STRONG,
)
from .models import BothEntry


def _is_finite(value: Any) -> bool:
    try:
        return bool(np.isfinite(float(value)))
    except (TypeError, ValueError):
        return False


def _format_number(value: float) -> str:
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    magnitude = abs(value)
    if magnitude == 0 or magnitude >= 1:
        return f"{value:,.{METRIC_DECIMALS}f}"
    return f"{value:.{SMALL_METRIC_SIGNIFICANT_DIGITS}g}"


def format_metric(value: float, unit: str) -> str:
    """
    Format a metric value with its unit suffix.

    Magnitudes >= 1 (and zero) use a fixed number of decimals with thousands
    separators, smaller magnitudes keep a few significant digits so that
    sub-unit timings do not collapse to zero. Below 1e-4 the ``g`` format
    switches to scientific notation ("1.23e-07 ms").

    Examples:
        >>> format_metric(12.34, "ms")
        '12.3 ms'
        >>> format_metric(0.000123, "ms")
        '0.000123 ms'
        >>> format_metric(float("nan"), "ms")
        'N/A'
    """
    if not _is_finite(value):
        return NOT_AVAILABLE
    number = _format_number(float(value))
    return f"{number} {unit}" if unit else number


def format_percent(ratio: float, signed: bool = False) -> str:
    """
    Format a fraction as a percentage (0.034 -> "3.4%").

    With ``signed=True`` the result is meant for deltas: "+3.4%", "-0.1%",
    and "±0.0%" for changes too small to show.
    """
    if not _is_finite(ratio):
        return NOT_AVAILABLE
    ratio = float(ratio)
    if not signed:
        return f"{ratio * PCT_CONVERSION_FACTOR:.{PERCENT_DECIMALS}f}%"

    if abs(ratio) < PERCENT_CHANGE_EPSILON:
        return f"±{0:.{PERCENT_DECIMALS}f}%"
    sign = "+" if ratio > 0 else "-"
    return f"{sign}{abs(ratio) * PCT_CONVERSION_FACTOR:.{PERCENT_DECIMALS}f}%"


def format_change(delta: float, unit: str) -> str:
    """Format an absolute delta with an explicit sign ("+10.0 ms")."""
    if not _is_finite(delta):
        return NOT_AVAILABLE
    if float(delta) > 0:
        return f"+{format_metric(delta, unit)}"
    return format_metric(delta, unit)


def format_runs(runs: Iterable[float]) -> str:
    """Space-join raw run samples in their shortest exact form."""
    rendered = []
    for value in np.asarray(list(runs), dtype=float):
        if np.isfinite(value):
            rendered.append(np.format_float_positional(value, trim="-"))
        else:
            rendered.append(NOT_AVAILABLE)
    return " ".join(rendered)


def relative_change(baseline_mean: float, current_mean: float) -> float:
    """Relative change of the mean, nan when the baseline mean is zero."""
    if baseline_mean == 0:
        return float("nan")
    return (current_mean - baseline_mean) / baseline_mean


def change_symbols(entry: BothEntry) -> str:
    """
    Markers for changes that are large compared to the baseline noise.

    z = diff / baseline.stdev; red markers flag slowdowns, green markers
    speedups. Entries without a usable baseline stdev get no marker.
    """
    stdev = entry.baseline.stdev
    if not _is_finite(stdev) or stdev == 0 or not _is_finite(entry.diff):
        return ""

    z = entry.diff / stdev
    if z > Z_SCORE_STRONG:
        return REGRESSION_SYMBOL * 2
    if z > Z_SCORE_NOTABLE:
        return REGRESSION_SYMBOL
    if z < -Z_SCORE_STRONG:
        return IMPROVEMENT_SYMBOL * 2
    if z < -Z_SCORE_NOTABLE:
        return IMPROVEMENT_SYMBOL
    return ""


def format_metric_diff_change(entry: BothEntry) -> str:
    """
    Render "baseline → current (Δ, Δ%)" for an entry measured in both runs.

    A zero baseline mean makes the relative change undefined; it renders as
    ``N/A`` instead of an infinite percentage.

    Raises:
        TypeError: If the entry does not carry both baseline and current stats
    """
    if not isinstance(entry, BothEntry):
        raise TypeError(f"Expected an entry with baseline and current stats, got {type(entry).__name__}")

    baseline_mean = entry.baseline.mean
    current_mean = entry.current.mean

    output = f"{format_metric(baseline_mean, entry.unit)} {DIFF_ARROW} {format_metric(current_mean, entry.unit)}"
    if baseline_mean != current_mean:
        change = format_change(entry.diff, entry.unit)
        percent = format_percent(relative_change(baseline_mean, current_mean), signed=True)
        output += f" ({change}, {percent})"

    symbols = change_symbols(entry)
    if symbols:
        output += f" {symbols}"
    return output
