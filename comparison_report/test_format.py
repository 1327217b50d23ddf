#!/usr/bin/env python3
"""
Test suite for comparison_report/format.py
"""
import math

import pytest

from comparison_report.format import (
    change_symbols,
    format_change,
    format_metric,
    format_metric_diff_change,
    format_percent,
    format_runs,
    relative_change,
)
from comparison_report.models import MetricStats, make_entry


def _both(baseline_mean, current_mean, baseline_stdev=0.0, current_stdev=0.0, unit="ms"):
    return make_entry(
        "case",
        unit,
        baseline=MetricStats(mean=baseline_mean, stdev=baseline_stdev),
        current=MetricStats(mean=current_mean, stdev=current_stdev),
    )


class TestFormatMetric:
    """Test format_metric function."""

    def test_regular_value(self):
        assert format_metric(12.34, "ms") == "12.3 ms"

    def test_zero(self):
        """Zero (and negative zero) render without sign."""
        assert format_metric(0, "ms") == "0.0 ms"
        assert format_metric(-0.0, "ms") == "0.0 ms"

    def test_very_small_values_keep_significant_digits(self):
        assert format_metric(0.5, "ms") == "0.5 ms"
        assert format_metric(0.000123, "ms") == "0.000123 ms"
        assert format_metric(1.23e-7, "ms") == "1.23e-07 ms"

    def test_very_large_values_use_thousands_separator(self):
        assert format_metric(12345.67, "ms") == "12,345.7 ms"
        assert format_metric(1e12, "ms") == "1,000,000,000,000.0 ms"

    def test_negative_value(self):
        assert format_metric(-10, "ms") == "-10.0 ms"

    def test_non_finite_renders_sentinel(self):
        """NaN, infinities and non-numbers never raise."""
        assert format_metric(float("nan"), "ms") == "N/A"
        assert format_metric(float("inf"), "ms") == "N/A"
        assert format_metric(float("-inf"), "ms") == "N/A"
        assert format_metric(None, "ms") == "N/A"

    def test_empty_unit_has_no_suffix(self):
        assert format_metric(3, "") == "3.0"


class TestFormatPercent:
    """Test format_percent function."""

    def test_unsigned(self):
        assert format_percent(0.034) == "3.4%"
        assert format_percent(0) == "0.0%"

    def test_signed_deltas(self):
        assert format_percent(0.034, signed=True) == "+3.4%"
        assert format_percent(-0.001, signed=True) == "-0.1%"

    def test_signed_negligible_change(self):
        assert format_percent(0.0001, signed=True) == "±0.0%"
        assert format_percent(0, signed=True) == "±0.0%"

    def test_non_finite(self):
        assert format_percent(float("nan")) == "N/A"
        assert format_percent(float("inf"), signed=True) == "N/A"


class TestFormatChange:
    """Test format_change and format_runs."""

    def test_signs(self):
        assert format_change(10, "ms") == "+10.0 ms"
        assert format_change(-2.5, "ms") == "-2.5 ms"
        assert format_change(0, "ms") == "0.0 ms"

    def test_runs_shortest_form(self):
        assert format_runs([100, 102.5, 99]) == "100 102.5 99"

    def test_runs_non_finite(self):
        assert format_runs([1.0, float("nan")]) == "1 N/A"

    def test_relative_change_zero_baseline_is_nan(self):
        assert math.isnan(relative_change(0, 5))
        assert relative_change(100, 90) == pytest.approx(-0.1)


class TestFormatMetricDiffChange:
    """Test format_metric_diff_change function."""

    def test_improvement(self):
        entry = _both(100, 90, baseline_stdev=5, current_stdev=4)

        assert format_metric_diff_change(entry) == "100.0 ms → 90.0 ms (-10.0 ms, -10.0%)"

    def test_equal_means_have_no_delta(self):
        entry = _both(100, 100, baseline_stdev=5)

        assert format_metric_diff_change(entry) == "100.0 ms → 100.0 ms"

    def test_zero_baseline_uses_sentinel(self):
        """Zero baseline must not produce an infinite percentage."""
        entry = _both(0, 5)

        result = format_metric_diff_change(entry)

        assert result == "0.0 ms → 5.0 ms (+5.0 ms, N/A)"
        assert "inf" not in result.lower()
        assert "∞" not in result

    def test_significance_symbols_appended(self):
        entry = _both(100, 110, baseline_stdev=1)

        assert format_metric_diff_change(entry).endswith(" 🔴🔴")

    def test_requires_both_sides(self):
        entry = make_entry("case", "ms", baseline=MetricStats(mean=1, stdev=0))

        with pytest.raises(TypeError):
            format_metric_diff_change(entry)


class TestChangeSymbols:
    """Test change_symbols thresholds."""

    @pytest.mark.parametrize(
        "current_mean, expected",
        [
            (110, "🔴🔴"),
            (104, "🔴"),
            (102, ""),
            (96, "🟢"),
            (90, "🟢🟢"),
        ],
    )
    def test_thresholds(self, current_mean, expected):
        assert change_symbols(_both(100, current_mean, baseline_stdev=1)) == expected

    def test_zero_stdev_has_no_symbol(self):
        assert change_symbols(_both(100, 200, baseline_stdev=0)) == ""
