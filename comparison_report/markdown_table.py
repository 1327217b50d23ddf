"""Plain Markdown pipe-table rendering."""

from __future__ import annotations

from typing import List, Sequence

# Markdown requires at least three dashes in a delimiter cell
MIN_COLUMN_WIDTH = 3


def _escape_cell(value: str) -> str:
    return str(value).replace("|", "\\|").replace("\n", " ")


def render_table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """
    Render a header and rows as an aligned Markdown pipe table.

    Every column is padded to its widest cell, so identical input always
    gives byte-identical output. An empty ``rows`` renders a header-only table.

    Args:
        header: Column titles
        rows: Table rows, each with exactly ``len(header)`` cells

    Returns:
        Table text without a trailing newline

    Raises:
        ValueError: If the header is empty or a row has the wrong number of cells
    """
    if not header:
        raise ValueError("Table header must have at least one column")

    column_count = len(header)
    for i, row in enumerate(rows):
        if len(row) != column_count:
            raise ValueError(
                f"Row {i} has {len(row)} cells, expected {column_count} to match the header"
            )

    cells: List[List[str]] = [[_escape_cell(c) for c in header]]
    cells.extend([_escape_cell(c) for c in row] for row in rows)

    widths = [
        max(MIN_COLUMN_WIDTH, max(len(line[col]) for line in cells))
        for col in range(column_count)
    ]

    def _line(values: Sequence[str]) -> str:
        return "| " + " | ".join(v.ljust(widths[i]) for i, v in enumerate(values)) + " |"

    lines = [_line(cells[0]), _line(["-" * w for w in widths])]
    lines.extend(_line(line) for line in cells[1:])
    return "\n".join(lines)
