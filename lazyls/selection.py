"""Ordering and hidden-entry filtering for raw directory names."""

from __future__ import annotations

from collections.abc import Iterable

from .options import ListingOptions

HIDDEN_PREFIX = "."


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def select_entries(names: Iterable[str], options: ListingOptions) -> list[str]:
    """Return the working set: codepoint sort, hidden filter, then reverse."""
    selected = sorted(names)
    if not options.show_hidden:
        selected = [name for name in selected if not is_hidden(name)]
    if options.reverse_order:
        selected.reverse()
    return selected


__all__ = ["HIDDEN_PREFIX", "is_hidden", "select_entries"]
