"""Long-format table layout driven by declarative field descriptors.

Each ``TableField`` names a column, how to pull its value out of a record,
how to justify it, and what separates it from the previous column. Column
widths are measured in one pass over the batch and never reused between
batches.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from numbers import Number

from ..entry_model.types import EntryMetadata

MOD_TIME_FORMAT = "%b %d %H:%M"
BLOCK_SIZE = 512
KIBIBYTE = 1024


class Align(enum.Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class TableField:
    """One table column.

    ``align=None`` infers justification from the extracted value: numbers
    are right-justified, everything else left-justified. ``pad=False`` emits
    the value as-is (fixed single-character columns).
    """

    name: str
    extract: Callable[[EntryMetadata], object]
    align: Align | None = None
    separator: str = " "
    pad: bool = True
    render: Callable[[object], str] = str


def _field_align(field: TableField, value: object) -> Align:
    if field.align is not None:
        return field.align
    if isinstance(value, Number) and not isinstance(value, bool):
        return Align.RIGHT
    return Align.LEFT


def _format_mod_time(value: object) -> str:
    return value.strftime(MOD_TIME_FORMAT)


LONG_FORMAT_FIELDS: tuple[TableField, ...] = (
    TableField("type", lambda entry: entry.type_char, separator="", pad=False),
    TableField("permissions", lambda entry: entry.permissions, Align.LEFT, separator=""),
    TableField("link_count", lambda entry: entry.link_count, Align.RIGHT),
    TableField("owner_name", lambda entry: entry.owner_name, Align.LEFT),
    TableField("group_name", lambda entry: entry.group_name, Align.LEFT),
    TableField("size_bytes", lambda entry: entry.size_bytes, Align.RIGHT),
    TableField("mod_time", lambda entry: entry.mod_time, Align.LEFT, render=_format_mod_time),
    TableField("display_name", lambda entry: entry.display_name, Align.LEFT),
)


def layout_table(
    records: Sequence[EntryMetadata],
    fields: Sequence[TableField] = LONG_FORMAT_FIELDS,
) -> list[str]:
    """Render each record as one justified line."""
    cells: list[list[tuple[str, Align]]] = []
    widths = [0] * len(fields)
    for record in records:
        row: list[tuple[str, Align]] = []
        for idx, field in enumerate(fields):
            value = field.extract(record)
            text = field.render(value)
            widths[idx] = max(widths[idx], len(text))
            row.append((text, _field_align(field, value)))
        cells.append(row)

    lines: list[str] = []
    for row in cells:
        parts: list[str] = []
        for idx, (field, (text, align)) in enumerate(zip(fields, row)):
            if idx > 0:
                parts.append(field.separator)
            if not field.pad:
                parts.append(text)
            elif align is Align.RIGHT:
                parts.append(text.rjust(widths[idx]))
            else:
                parts.append(text.ljust(widths[idx]))
        lines.append("".join(parts))
    return lines


def entry_kibibytes(entry: EntryMetadata) -> int:
    """Allocated size of one entry in whole KiB, rounded down."""
    return entry.block_count * BLOCK_SIZE // KIBIBYTE


def total_kibibytes(records: Sequence[EntryMetadata]) -> int:
    """Sum of per-entry floored KiB, as shown on the ``total`` line."""
    return sum(entry_kibibytes(entry) for entry in records)


def total_line(records: Sequence[EntryMetadata]) -> str:
    return f"total {total_kibibytes(records)}"


__all__ = [
    "Align",
    "TableField",
    "LONG_FORMAT_FIELDS",
    "MOD_TIME_FORMAT",
    "layout_table",
    "entry_kibibytes",
    "total_kibibytes",
    "total_line",
]
