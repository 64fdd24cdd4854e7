"""Exception types raised by the listing engine and its CLI.

Per-path conditions derive from ``EntrySourceError`` and carry the one-line
diagnostic shown to the user. ``UsageError`` and ``IdentityLookupFailure``
end the invocation.
"""

from __future__ import annotations


class LazyLsError(Exception):
    """Base class for every error raised by lazyls."""


class UsageError(LazyLsError):
    """Command line could not be parsed."""


class EntrySourceError(LazyLsError):
    """A listing target could not be read as a directory."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        super().__init__(path)
        self.path = path
        self.reason = reason

    def diagnostic(self) -> str:
        if self.reason:
            return f"cannot access '{self.path}': {self.reason}"
        return f"cannot access '{self.path}'"


class PathNotFound(EntrySourceError):
    def diagnostic(self) -> str:
        return f"cannot access '{self.path}': No such file or directory"


class PermissionDenied(EntrySourceError):
    def diagnostic(self) -> str:
        return f"cannot open '{self.path}': Permission denied"


class NotADirectory(EntrySourceError):
    """Target exists but is not a directory; callers list it as a single entry."""

    def diagnostic(self) -> str:
        return f"'{self.path}' is not a directory"


class IdentityLookupFailure(LazyLsError):
    """Owner or group id has no name on this system."""

    def __init__(self, kind: str, numeric_id: int) -> None:
        super().__init__(kind, numeric_id)
        self.kind = kind
        self.numeric_id = numeric_id

    def __str__(self) -> str:
        return f"cannot resolve {self.kind} id {self.numeric_id}"


__all__ = [
    "LazyLsError",
    "UsageError",
    "EntrySourceError",
    "PathNotFound",
    "PermissionDenied",
    "NotADirectory",
    "IdentityLookupFailure",
]
