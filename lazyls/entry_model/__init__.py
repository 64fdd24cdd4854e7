"""Domain model for directory entries read from the filesystem.

This package contains non-rendering listing primitives:
- raw entry and metadata datatypes
- directory reading and ``lstat`` metadata loading
- uid/gid to name resolution
"""

from __future__ import annotations

from .types import EntryMetadata, RawEntry
from .identity import IdentityResolver
from .fs import SELF_AND_PARENT, EntrySource

__all__ = [
    "EntryMetadata",
    "RawEntry",
    "IdentityResolver",
    "EntrySource",
    "SELF_AND_PARENT",
]
