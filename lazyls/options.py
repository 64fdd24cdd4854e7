"""Immutable per-invocation listing options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingOptions:
    show_hidden: bool = False
    reverse_order: bool = False
    long_format: bool = False


__all__ = ["ListingOptions"]
