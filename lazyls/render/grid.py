"""Compact multi-column layout, filled down columns first."""

from __future__ import annotations

from collections.abc import Sequence

GRID_COLUMNS = 3
CELL_SEPARATOR = " "


def layout_grid(items: Sequence[str], column_count: int = GRID_COLUMNS) -> list[list[str]]:
    """Place ``items`` into rows, column-major.

    Item ``i`` lands at ``row = i % rows`` and ``col = i // rows`` where
    ``rows = ceil(n / column_count)``. Every cell is right-padded to the
    longest item. Cells past the last item are left out, so short rows
    simply hold fewer cells.
    """
    if not items:
        return []
    if column_count <= 0:
        raise ValueError("column_count must be >= 1")

    max_len = max(len(item) for item in items)
    rows = -(-len(items) // column_count)
    matrix: list[dict[int, str]] = [{} for _ in range(rows)]
    for index, item in enumerate(items):
        col, row = divmod(index, rows)
        matrix[row][col] = item.ljust(max_len)
    return [[cells[col] for col in sorted(cells)] for cells in matrix]


def render_grid(items: Sequence[str], column_count: int = GRID_COLUMNS) -> str:
    """Render ``items`` as newline-joined rows of space-joined cells."""
    return "\n".join(CELL_SEPARATOR.join(row) for row in layout_grid(items, column_count))


__all__ = ["GRID_COLUMNS", "layout_grid", "render_grid"]
