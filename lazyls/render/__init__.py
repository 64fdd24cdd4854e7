"""Text layouts for compact and long listings."""

from __future__ import annotations

from .grid import GRID_COLUMNS, layout_grid, render_grid
from .table import LONG_FORMAT_FIELDS, Align, TableField, layout_table, total_kibibytes, total_line

__all__ = [
    "GRID_COLUMNS",
    "layout_grid",
    "render_grid",
    "Align",
    "TableField",
    "LONG_FORMAT_FIELDS",
    "layout_table",
    "total_kibibytes",
    "total_line",
]
