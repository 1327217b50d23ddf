#!/usr/bin/env python3
"""
Test suite for comparison_report/loader.py
"""
import json

import pytest

from comparison_report.loader import load_dataset_from_json, parse_dataset
from comparison_report.models import BaselineOnlyEntry, BothEntry, CurrentOnlyEntry


SAMPLE = {
    "significant": [
        {
            "name": "api_login",
            "unit": "ms",
            "baseline": {"mean": 100, "stdev": 5, "runs": [98, "101.5", 100]},
            "current": {"mean": 90, "stdev": 4},
        }
    ],
    "meaningless": [
        {"name": "removed", "baseline": {"mean": 10, "stdev": 1}},
        {"name": "added", "unit": "count", "current": {"mean": 3, "stdev": 0}},
    ],
    "errors": ["build failed"],
    "warnings": ["flaky test: X"],
    "skipped": ["broken test"],
}


class TestParseDataset:
    """Test parse_dataset function."""

    def test_entry_variants(self):
        dataset, skipped = parse_dataset(SAMPLE)

        assert isinstance(dataset.significant[0], BothEntry)
        assert isinstance(dataset.meaningless[0], BaselineOnlyEntry)
        assert isinstance(dataset.meaningless[1], CurrentOnlyEntry)
        assert dataset.errors == ("build failed",)
        assert dataset.warnings == ("flaky test: X",)
        assert skipped == ["broken test"]

    def test_defaults_and_runs_coercion(self):
        dataset, _ = parse_dataset(SAMPLE)

        entry = dataset.significant[0]
        assert entry.baseline.runs == (98.0, 101.5, 100.0)
        assert entry.current.runs is None
        assert dataset.meaningless[0].unit == "ms"
        assert dataset.meaningless[1].unit == "count"

    def test_entry_without_stats_becomes_warning(self):
        data = {"significant": [{"name": "ghost"}, {"name": "real", "current": {"mean": 1, "stdev": 0}}]}

        dataset, _ = parse_dataset(data)

        assert [e.name for e in dataset.significant] == ["real"]
        assert any("ghost" in w for w in dataset.warnings)

    def test_missing_buckets_are_empty(self):
        dataset, skipped = parse_dataset({})

        assert dataset.significant == ()
        assert dataset.meaningless == ()
        assert skipped == []

    def test_conversion_errors_keep_their_cause(self):
        with pytest.raises(ValueError) as exc_info:
            parse_dataset({"significant": [{"name": "a", "baseline": {"mean": None, "stdev": 1}}]})

        assert isinstance(exc_info.value.__cause__, TypeError)

        with pytest.raises(ValueError) as exc_info:
            parse_dataset({"significant": [{"name": "a", "baseline": {"mean": 1, "stdev": 0, "runs": [{}]}}]})

        assert isinstance(exc_info.value.__cause__, TypeError)

    @pytest.mark.parametrize(
        "data, message",
        [
            ([], "must be a JSON object"),
            ({"significant": {}}, "'significant' must be an array"),
            ({"meaningless": ["x"]}, "is not an object"),
            ({"significant": [{"name": ""}]}, "invalid name"),
            ({"significant": [{"name": "a", "baseline": {"mean": 1}}]}, "requires 'mean' and 'stdev'"),
            ({"significant": [{"name": "a", "baseline": {"mean": "x", "stdev": 1}}]}, "non-numeric"),
            ({"significant": [{"name": "a", "baseline": {"mean": 1, "stdev": 0, "runs": [[1, 2], [3, 4]]}}]}, "runs must be an array of numbers"),
            ({"significant": [{"name": "a", "baseline": {"mean": 1, "stdev": 0, "runs": [{}]}}]}, "runs must be an array of numbers"),
            ({"significant": [{"name": "a", "baseline": {"mean": 1, "stdev": 0, "runs": ["fast"]}}]}, "runs must be an array of numbers"),
            ({"errors": "oops"}, "'errors' must be an array"),
        ],
    )
    def test_structural_errors(self, data, message):
        with pytest.raises(ValueError, match=message):
            parse_dataset(data)


class TestLoadDatasetFromJson:
    """Test load_dataset_from_json function."""

    def test_load(self, tmp_path):
        path = tmp_path / "compare.json"
        path.write_text(json.dumps(SAMPLE), encoding="utf-8")

        dataset, skipped = load_dataset_from_json(path)

        assert dataset.significant[0].name == "api_login"
        assert skipped == ["broken test"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_dataset_from_json(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            load_dataset_from_json(path)
