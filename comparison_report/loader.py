"""Load a pre-computed comparison dataset from JSON.

Expected format:
{
  "significant": [
    {"name": "api_login", "unit": "ms",
     "baseline": {"mean": 100.0, "stdev": 5.0, "runs": [98, 101, 102]},
     "current": {"mean": 90.0, "stdev": 4.0}}
  ],
  "meaningless": [...],
  "errors": ["..."],
  "warnings": ["..."],
  "skipped": ["test name", ...]
}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np

from .constants import DEFAULT_UNIT
from .models import ComparisonDataset, ComparisonEntry, MalformedEntryError, MetricStats, make_entry

logger = logging.getLogger(__name__)

BUCKETS = ("significant", "meaningless")


def _parse_stats(raw: Any, where: str) -> Optional[MetricStats]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise ValueError(f"{where} must be an object")
    if "mean" not in raw or "stdev" not in raw:
        raise ValueError(f"{where} requires 'mean' and 'stdev'")

    runs = raw.get("runs")
    if runs is not None:
        if not isinstance(runs, list):
            raise ValueError(f"{where}.runs must be an array")
        try:
            samples = np.asarray(runs, dtype=float)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{where}.runs must be an array of numbers") from e
        if samples.ndim != 1:
            raise ValueError(f"{where}.runs must be an array of numbers")
        runs = tuple(samples.tolist())

    try:
        mean = float(raw["mean"])
        stdev = float(raw["stdev"])
    except (TypeError, ValueError) as e:
        raise ValueError(f"{where} has non-numeric 'mean' or 'stdev'") from e

    return MetricStats(mean=mean, stdev=stdev, runs=runs)


def _parse_entries(raw: Any, bucket: str, warnings: List[str]) -> List[ComparisonEntry]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"'{bucket}' must be an array")

    entries: List[ComparisonEntry] = []
    for i, item in enumerate(raw):
        where = f"{bucket}[{i}]"
        if not isinstance(item, dict):
            raise ValueError(f"{where} is not an object")
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"{where} has invalid name")

        try:
            entry = make_entry(
                name=name,
                unit=str(item.get("unit", DEFAULT_UNIT)),
                baseline=_parse_stats(item.get("baseline"), f"{where}.baseline"),
                current=_parse_stats(item.get("current"), f"{where}.current"),
            )
        except MalformedEntryError as e:
            logger.warning("%s: %s", where, e)
            warnings.append(str(e))
            continue
        entries.append(entry)
    return entries


def _string_list(raw: Any, field: str) -> List[str]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"'{field}' must be an array")
    return [str(item) for item in raw]


def parse_dataset(data: Dict[str, Any]) -> Tuple[ComparisonDataset, List[str]]:
    """
    Map a decoded JSON object onto a ComparisonDataset.

    Entries without baseline and current stats are dropped; a warning for
    each is added to the dataset so it shows up in the report.

    Returns:
        Tuple of (dataset, skipped test names)

    Raises:
        ValueError: If the structure does not match the expected format
    """
    if not isinstance(data, dict):
        raise ValueError("Input must be a JSON object")

    load_warnings: List[str] = []
    buckets = {bucket: _parse_entries(data.get(bucket), bucket, load_warnings) for bucket in BUCKETS}

    dataset = ComparisonDataset.from_sequences(
        significant=buckets["significant"],
        meaningless=buckets["meaningless"],
        errors=_string_list(data.get("errors"), "errors"),
        warnings=_string_list(data.get("warnings"), "warnings") + load_warnings,
    )
    return dataset, _string_list(data.get("skipped"), "skipped")


def load_dataset_from_json(json_path: Union[str, Path]) -> Tuple[ComparisonDataset, List[str]]:
    """
    Load a comparison dataset from a JSON file.

    Raises:
        FileNotFoundError: If the JSON file doesn't exist
        json.JSONDecodeError: If the JSON is invalid
        ValueError: If the structure does not match the expected format
    """
    path = Path(json_path)
    if not path.exists():
        raise FileNotFoundError(f"JSON file not found: {json_path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    dataset, skipped = parse_dataset(data)
    logger.debug(
        "Loaded %s: %d significant, %d meaningless entries",
        path, len(dataset.significant), len(dataset.meaningless),
    )
    return dataset, skipped
