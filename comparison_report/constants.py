"""
Performance Comparison Report - Constants Configuration

This module centralizes all configuration constants used by the Markdown
report generator. Each constant is documented with its purpose and
acceptable value ranges.
"""

# ==============================================================================
# REPORT SPLITTING
# ==============================================================================

# Number of extra pages the "meaningless changes" bucket is split across
# 0 = everything in a single document (output.md)
# 1 = main page plus one page holding the meaningless changes (output-1.md, output-2.md)
# Large result sets render into huge documents; raise this to keep each page readable
DEFAULT_EXTRA_PAGE_COUNT = 1

# Significant changes are never split, they always live on the first page
SIGNIFICANT_DETAIL_PARTITIONS = 1


# ==============================================================================
# OUTPUT FILES
# ==============================================================================

# File name used when the report fits in a single document
SINGLE_OUTPUT_FILENAME = "output.md"

# File name pattern used when the report spans several documents (1-based index)
MULTI_OUTPUT_FILENAME_TEMPLATE = "output-{index}.md"

# Encoding used for every written document
OUTPUT_ENCODING = "utf-8"

# Maximum number of concurrent file writes
# None lets concurrent.futures pick a default based on CPU count
WRITER_MAX_WORKERS = None


# ==============================================================================
# REPORT TEXT
# ==============================================================================

REPORT_TITLE = "Performance Comparison Report 📊"

ERRORS_HEADING = "Errors"
WARNINGS_HEADING = "Warnings"
SIGNIFICANT_HEADING = "Significant Changes To Duration"
MEANINGLESS_HEADING = "Meaningless Changes To Duration"

# Prefixes for numbered error/warning items
ERROR_MARKER = "🛑"
WARNING_MARKER = "🟡"

# Banner shown when some tests were excluded upstream
SKIPPED_TESTS_BANNER = "⚠️ Some tests did not pass successfully, so some results are omitted from final report:"

# Summary table header (name column, value column)
TABLE_HEADER = ("Name", "Duration")

# Text rendered instead of a table when a bucket has no entries
NO_ENTRIES_PLACEHOLDER = "_There are no entries_"

# Labels of the collapsible <details> blocks
SUMMARY_COLLAPSE_LABEL = "Show entries"
DETAILS_COLLAPSE_LABEL = "Show details"

# Labels used inside per-entry detail blocks
BASELINE_LABEL = "Baseline"
CURRENT_LABEL = "Current"

# Separators inside a single table cell (Markdown tables cannot hold raw newlines)
DETAIL_LINE_SEPARATOR = "<br/>"
DETAIL_SIDE_SEPARATOR = "<br/><br/>"


# ==============================================================================
# NUMBER FORMATTING
# ==============================================================================

# Sentinel rendered for values that cannot be formatted (NaN, ±inf, undefined ratios)
NOT_AVAILABLE = "N/A"

# Decimal places for metric values with magnitude >= 1
METRIC_DECIMALS = 1

# Significant digits for metric values with 0 < magnitude < 1
SMALL_METRIC_SIGNIFICANT_DIGITS = 3

# Decimal places for percentages
PERCENT_DECIMALS = 1

# Relative changes below this magnitude render as "±0.0%"
# Half of the smallest displayable step at PERCENT_DECIMALS = 1 (0.05% as a fraction)
PERCENT_CHANGE_EPSILON = 0.0005

# Conversion factor from fraction to percentage
# Multiply by 100 to convert 0.05 -> 5%
PCT_CONVERSION_FACTOR = 100

# Arrow between baseline and current values in diff strings
DIFF_ARROW = "→"


# ==============================================================================
# CHANGE SIGNIFICANCE SYMBOLS
# ==============================================================================

# z = (current.mean - baseline.mean) / baseline.stdev
# |z| above these thresholds gets one or two markers appended to the diff string
Z_SCORE_STRONG = 6.0
Z_SCORE_NOTABLE = 3.0

REGRESSION_SYMBOL = "🔴"
IMPROVEMENT_SYMBOL = "🟢"


# ==============================================================================
# INPUT DEFAULTS
# ==============================================================================

# Unit assumed for entries that do not declare one
DEFAULT_UNIT = "ms"


# ==============================================================================
# LOGGING
# ==============================================================================

DEFAULT_LOG_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUP_COUNT = 3


# ==============================================================================
# EXIT CODES
# ==============================================================================

# Exit code for successful execution (report written)
EXIT_SUCCESS = 0

# Exit code for report write failures
EXIT_FAILURE = 1

# Exit code for parsing/input errors
EXIT_PARSE_ERROR = 2
