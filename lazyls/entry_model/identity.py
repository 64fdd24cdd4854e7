"""Owner/group name resolution for numeric ids."""

from __future__ import annotations

import grp
import pwd
from collections.abc import Callable

from ..errors import IdentityLookupFailure


def _passwd_name(uid: int) -> str:
    return pwd.getpwuid(uid).pw_name


def _group_name(gid: int) -> str:
    return grp.getgrgid(gid).gr_name


class IdentityResolver:
    """Resolve uids/gids to names, remembering answers for one listing run.

    Lookup callables raise ``KeyError`` for unknown ids, like ``pwd`` and
    ``grp`` do; that becomes ``IdentityLookupFailure``.
    """

    def __init__(
        self,
        user_lookup: Callable[[int], str] = _passwd_name,
        group_lookup: Callable[[int], str] = _group_name,
    ) -> None:
        self._user_lookup = user_lookup
        self._group_lookup = group_lookup
        self._users: dict[int, str] = {}
        self._groups: dict[int, str] = {}

    def _resolve(self, kind: str, numeric_id: int, cache: dict[int, str], lookup: Callable[[int], str]) -> str:
        cached = cache.get(numeric_id)
        if cached is not None:
            return cached
        try:
            name = lookup(numeric_id)
        except KeyError as exc:
            raise IdentityLookupFailure(kind, numeric_id) from exc
        cache[numeric_id] = name
        return name

    def user_name(self, uid: int) -> str:
        return self._resolve("user", uid, self._users, self._user_lookup)

    def group_name(self, gid: int) -> str:
        return self._resolve("group", gid, self._groups, self._group_lookup)


__all__ = ["IdentityResolver"]
