"""Listing orchestration: targets in, rendered text and diagnostics out.

``run_listing`` resolves every target through an ``EntrySource``, applies
selection, and renders compact or long output. Per-path failures become
diagnostic lines and never stop the remaining targets; identity lookup
failures propagate to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .entry_model import EntryMetadata, EntrySource, RawEntry
from .errors import EntrySourceError, NotADirectory
from .options import ListingOptions
from .render import layout_table, render_grid, total_line
from .selection import select_entries

DEFAULT_TARGET = "."


@dataclass(frozen=True)
class ListingReport:
    """Result of one listing run."""

    output: str
    diagnostics: tuple[str, ...] = ()
    exit_status: int = 0


def order_targets(paths: Sequence[str], source: EntrySource) -> list[str]:
    """Plain files first, then directories, each by case-insensitive name."""
    return sorted(paths, key=lambda path: (source.is_directory(path), path.lower(), path))


def select_raw_entries(entries: Sequence[RawEntry], options: ListingOptions) -> list[RawEntry]:
    """Apply ``select_entries`` ordering to raw entries, keeping their directories."""
    by_name = {entry.name: entry for entry in entries}
    return [by_name[name] for name in select_entries(by_name, options)]


def _read_records(
    source: EntrySource,
    targets: Sequence[tuple[str, str]],
    diagnostics: list[str],
) -> list[EntryMetadata]:
    """Load metadata for ``(path, display_name)`` pairs, skipping vanished entries."""
    records: list[EntryMetadata] = []
    for path, display_name in targets:
        try:
            records.append(source.read_metadata(path, display_name, diagnostics))
        except EntrySourceError as exc:
            diagnostics.append(exc.diagnostic())
    return records


def _render_names(
    source: EntrySource,
    targets: Sequence[tuple[str, str]],
    options: ListingOptions,
    diagnostics: list[str],
) -> list[str]:
    if not options.long_format:
        text = render_grid([display_name for _path, display_name in targets])
        return [text] if text else []

    records = _read_records(source, targets, diagnostics)
    return [total_line(records), *layout_table(records)]


def list_target(
    path: str,
    options: ListingOptions,
    source: EntrySource,
    diagnostics: list[str],
) -> list[str]:
    """Return the rendered lines for one target.

    Raises ``EntrySourceError`` subclasses other than ``NotADirectory``; a
    non-directory target is listed as a single entry named by ``path``.
    """
    try:
        raw_entries = source.list_names(path)
    except NotADirectory:
        return _render_names(source, [(path, path)], options, diagnostics)

    selected = select_raw_entries(raw_entries, options)
    targets = [(entry.path, entry.name) for entry in selected]
    return _render_names(source, targets, options, diagnostics)


def run_listing(
    paths: Sequence[str],
    options: ListingOptions,
    source: EntrySource | None = None,
) -> ListingReport:
    """List every target in ``paths`` (current directory when empty)."""
    if source is None:
        source = EntrySource()
    targets = list(paths) if paths else [DEFAULT_TARGET]
    with_headers = len(targets) > 1
    if with_headers:
        targets = order_targets(targets, source)

    diagnostics: list[str] = []
    blocks: list[str] = []
    for path in targets:
        try:
            lines = list_target(path, options, source, diagnostics)
        except EntrySourceError as exc:
            diagnostics.append(exc.diagnostic())
            continue
        if with_headers:
            lines = [f"{path}:", *lines]
        blocks.append("\n".join(lines))

    output = "\n\n".join(blocks)
    if output:
        output += "\n"
    return ListingReport(output=output, diagnostics=tuple(diagnostics), exit_status=0)


__all__ = [
    "DEFAULT_TARGET",
    "ListingReport",
    "order_targets",
    "select_raw_entries",
    "list_target",
    "run_listing",
]
