#!/usr/bin/env python3
"""Render a benchmark comparison JSON file into Markdown report pages."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .constants import (
    DEFAULT_EXTRA_PAGE_COUNT,
    DEFAULT_LOG_LEVEL,
    EXIT_FAILURE,
    EXIT_PARSE_ERROR,
    EXIT_SUCCESS,
)
from .loader import load_dataset_from_json
from .logging_utils import setup_logging
from .writer import ReportWriteError, write_to_markdown


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", type=Path, help="Path to comparison results JSON file")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Directory for output.md / output-N.md (default: output)",
    )
    parser.add_argument(
        "--extra-pages",
        type=_non_negative_int,
        default=DEFAULT_EXTRA_PAGE_COUNT,
        help=f"Pages to split meaningless changes across (default: {DEFAULT_EXTRA_PAGE_COUNT})",
    )
    parser.add_argument(
        "--skipped",
        nargs="*",
        default=[],
        metavar="NAME",
        help="Names of tests omitted from the results, appended to the file's 'skipped' list",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Optional JSON log file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    if not args.input.exists():
        print(f"Error: input file does not exist: {args.input}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    try:
        dataset, skipped = load_dataset_from_json(args.input)
    except json.JSONDecodeError as e:
        print(f"Error: failed to parse JSON from {args.input}: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    try:
        outcomes = write_to_markdown(args.output_dir, dataset, skipped + args.skipped, args.extra_pages)
    except ReportWriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print(f"Wrote {len(outcomes)} markdown file(s) to: {args.output_dir.resolve()}")
    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
