"""Domain datatypes for listed directory entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
import os

from ..mode import decode_mode


@dataclass(frozen=True)
class RawEntry:
    """One directory member name plus the directory it was read from."""

    name: str
    directory: str

    @property
    def path(self) -> str:
        return os.path.join(self.directory, self.name)


@dataclass(frozen=True)
class EntryMetadata:
    """Symlink-aware metadata for one listed entry.

    ``permission_bits`` keeps only the low twelve mode bits (special, user,
    group, other). ``block_count`` counts 512-byte allocation units.
    """

    type_char: str
    permission_bits: int
    link_count: int
    owner_name: str
    group_name: str
    size_bytes: int
    mod_time: datetime
    display_name: str
    block_count: int = 0

    @property
    def permissions(self) -> str:
        return decode_mode(self.permission_bits)


__all__ = [
    "RawEntry",
    "EntryMetadata",
]
