"""Write rendered report pages to disk.

A single page goes to ``output.md``; several pages go to ``output-1.md`` …
``output-N.md``. Pages are written concurrently and every outcome is
collected before deciding whether the write as a whole failed.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .constants import (
    DEFAULT_EXTRA_PAGE_COUNT,
    MULTI_OUTPUT_FILENAME_TEMPLATE,
    OUTPUT_ENCODING,
    SINGLE_OUTPUT_FILENAME,
    WRITER_MAX_WORKERS,
)
from .markdown_report import build_report
from .models import ComparisonDataset, ReportDocument

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass(frozen=True)
class WriteOutcome:
    """Result of writing one document."""
    path: Path
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ReportWriteError(OSError):
    """One or more report documents could not be written."""

    def __init__(self, failures: Sequence[WriteOutcome]) -> None:
        self.failures = list(failures)
        paths = ", ".join(str(f.path.resolve()) for f in self.failures)
        super().__init__(f"Could not write {len(self.failures)} markdown file(s): {paths}")


def output_paths(output_dir: PathLike, count: int) -> List[Path]:
    """File paths for ``count`` documents inside ``output_dir``."""
    directory = Path(output_dir)
    if count == 1:
        return [directory / SINGLE_OUTPUT_FILENAME]
    return [directory / MULTI_OUTPUT_FILENAME_TEMPLATE.format(index=i) for i in range(1, count + 1)]


def _write_file(path: Path, content: str) -> WriteOutcome:
    try:
        path.write_text(content, encoding=OUTPUT_ENCODING)
    except OSError as e:
        logger.error("❌  Could not write markdown output file %s", path)
        logger.error("🔗 %s: %s", path.resolve(), e)
        return WriteOutcome(path=path, error=e)

    logger.info("✅  Written output markdown output file %s", path)
    logger.info("🔗 %s", path.resolve())
    return WriteOutcome(path=path)


def write_documents(output_dir: PathLike, documents: Sequence[ReportDocument]) -> List[WriteOutcome]:
    """
    Write every document, then fail if any single write failed.

    Args:
        output_dir: Directory receiving the files (created if missing)
        documents: Rendered pages in page order

    Returns:
        One successful WriteOutcome per document, in page order

    Raises:
        ValueError: If there are no documents to write
        ReportWriteError: If the output directory cannot be created or at
            least one write failed; the other writes
            are still attempted and are neither retried nor rolled back
    """
    if not documents:
        raise ValueError("No documents to write")

    directory = Path(output_dir)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("❌  Could not create markdown output directory %s", directory)
        logger.error("🔗 %s: %s", directory.resolve(), e)
        raise ReportWriteError([WriteOutcome(path=directory, error=e)]) from e
    paths = output_paths(directory, len(documents))

    if len(documents) == 1:
        outcomes = [_write_file(paths[0], documents[0].text)]
    else:
        with ThreadPoolExecutor(max_workers=WRITER_MAX_WORKERS) as executor:
            futures = [
                executor.submit(_write_file, path, document.text)
                for path, document in zip(paths, documents)
            ]
            outcomes = [future.result() for future in futures]

    failures = [outcome for outcome in outcomes if not outcome.ok]
    if failures:
        raise ReportWriteError(failures) from failures[0].error
    return outcomes


def write_to_markdown(
    output_dir: PathLike,
    dataset: ComparisonDataset,
    skipped_tests: Sequence[str] = (),
    extra_page_count: int = DEFAULT_EXTRA_PAGE_COUNT,
) -> List[WriteOutcome]:
    """Build the Markdown report for ``dataset`` and write it to ``output_dir``."""
    documents = build_report(dataset, skipped_tests, extra_page_count)
    logger.info("Markdown was built successfully (%d page(s)), writing to file...", len(documents))
    return write_documents(output_dir, documents)
