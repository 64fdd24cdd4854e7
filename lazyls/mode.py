"""Decode raw ``st_mode`` bits into ``ls -l`` style symbolic strings."""

from __future__ import annotations

import stat

TRIAD_SYMBOLS = {
    7: "rwx",
    6: "rw-",
    5: "r-x",
    4: "r--",
    3: "-wx",
    2: "-w-",
    1: "--x",
    0: "---",
}
UNKNOWN_TRIAD = "???"

SETUID_BIT = 4
SETGID_BIT = 2
STICKY_BIT = 1

_FILE_TYPE_CHARS = (
    (stat.S_ISDIR, "d"),
    (stat.S_ISREG, "-"),
    (stat.S_ISLNK, "l"),
    (stat.S_ISCHR, "c"),
    (stat.S_ISBLK, "b"),
    (stat.S_ISFIFO, "p"),
    (stat.S_ISSOCK, "s"),
)


def _triad(bits: int) -> str:
    return TRIAD_SYMBOLS.get(bits, UNKNOWN_TRIAD)


def _mark_exec_slot(triad: str, set_char: str, unset_char: str) -> str:
    """Replace the executable slot with a special-bit marker.

    ``set_char`` is used when the slot held ``x``, ``unset_char`` otherwise.
    Undecodable triads pass through untouched.
    """
    if triad == UNKNOWN_TRIAD:
        return triad
    marker = set_char if triad[2] == "x" else unset_char
    return triad[:2] + marker


def decode_permissions(special_bits: int, user_bits: int, group_bits: int, other_bits: int) -> str:
    """Return the 9-character permission string for one set of octal digits.

    Digits outside ``0..7`` decode to ``???`` so rendering never fails.
    """
    user = _triad(user_bits)
    group = _triad(group_bits)
    other = _triad(other_bits)

    if special_bits & SETUID_BIT:
        user = _mark_exec_slot(user, "s", "S")
    if special_bits & SETGID_BIT:
        group = _mark_exec_slot(group, "s", "S")
    if special_bits & STICKY_BIT:
        other = _mark_exec_slot(other, "t", "T")
    return user + group + other


def split_permission_bits(mode: int) -> tuple[int, int, int, int]:
    """Split ``mode`` into ``(special, user, group, other)`` octal digits."""
    return (
        (mode >> 9) & 0o7,
        (mode >> 6) & 0o7,
        (mode >> 3) & 0o7,
        mode & 0o7,
    )


def decode_mode(mode: int) -> str:
    """Decode the permission part of a full ``st_mode`` value."""
    return decode_permissions(*split_permission_bits(mode))


def file_type_char(mode: int) -> str:
    """Return the single-character file type used in long listings."""
    for predicate, char in _FILE_TYPE_CHARS:
        if predicate(mode):
            return char
    return "?"


__all__ = [
    "TRIAD_SYMBOLS",
    "decode_permissions",
    "split_permission_bits",
    "decode_mode",
    "file_type_char",
]
