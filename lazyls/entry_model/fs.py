"""Filesystem access for directory listings.

Reads directory member names and per-entry ``lstat`` metadata, translating
``OSError`` subclasses into the per-path errors the orchestrator recovers from.
"""

from __future__ import annotations

import os
import stat
from datetime import datetime

from ..errors import EntrySourceError, NotADirectory, PathNotFound, PermissionDenied
from ..mode import file_type_char
from .identity import IdentityResolver
from .types import EntryMetadata, RawEntry

SELF_AND_PARENT = (".", "..")


class EntrySource:
    """Directory reader plus metadata loader for one listing run."""

    def __init__(self, identities: IdentityResolver | None = None) -> None:
        self.identities = identities if identities is not None else IdentityResolver()

    def is_directory(self, path: str) -> bool:
        """Return whether ``path`` names a directory, following symlinks."""
        return os.path.isdir(path)

    def list_names(self, path: str) -> list[RawEntry]:
        """Return the raw members of directory ``path``, ``.`` and ``..`` included.

        Raises ``PathNotFound``, ``PermissionDenied`` or ``NotADirectory``;
        a dangling symlink counts as a non-directory target.
        """
        try:
            names = os.listdir(path)
        except FileNotFoundError as exc:
            if os.path.lexists(path):
                raise NotADirectory(path) from exc
            raise PathNotFound(path) from exc
        except NotADirectoryError as exc:
            raise NotADirectory(path) from exc
        except PermissionError as exc:
            raise PermissionDenied(path) from exc
        except OSError as exc:
            raise EntrySourceError(path, exc.strerror) from exc

        members = [*SELF_AND_PARENT, *names]
        return [RawEntry(name=name, directory=path) for name in members]

    def read_metadata(
        self,
        path: str,
        display_name: str | None = None,
        diagnostics: list[str] | None = None,
    ) -> EntryMetadata:
        """Return metadata for ``path`` without following a final symlink.

        An unreadable symlink target is reported on ``diagnostics`` and the
        entry is shown without its ``-> target`` suffix.
        """
        try:
            info = os.lstat(path)
        except FileNotFoundError as exc:
            raise PathNotFound(path) from exc
        except PermissionError as exc:
            raise PermissionDenied(path) from exc
        except OSError as exc:
            raise EntrySourceError(path, exc.strerror) from exc

        name = display_name if display_name is not None else os.path.basename(path)
        if stat.S_ISLNK(info.st_mode):
            try:
                name = f"{name} -> {os.readlink(path)}"
            except OSError as exc:
                if diagnostics is not None:
                    diagnostics.append(f"cannot read symbolic link '{path}': {exc.strerror}")

        return EntryMetadata(
            type_char=file_type_char(info.st_mode),
            permission_bits=stat.S_IMODE(info.st_mode),
            link_count=int(info.st_nlink),
            owner_name=self.identities.user_name(info.st_uid),
            group_name=self.identities.group_name(info.st_gid),
            size_bytes=int(info.st_size),
            mod_time=datetime.fromtimestamp(info.st_mtime),
            display_name=name,
            block_count=int(getattr(info, "st_blocks", 0)),
        )


__all__ = [
    "EntrySource",
    "SELF_AND_PARENT",
]
