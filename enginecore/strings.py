"""String comparison, search and formatting helpers with C-string semantics."""

from __future__ import annotations

import struct
from enum import IntEnum

INDEX_NONE = -1

_WHITESPACE = " \t\n\r"
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_MASK64 = (1 << 64) - 1


class SearchCase(IntEnum):
    """Case sensitivity of a comparison."""

    CASE_SENSITIVE = 0
    IGNORE_CASE = 1


class SearchDir(IntEnum):
    """Direction of a search."""

    FROM_START = 0
    FROM_END = 1


def _c(s):
    """Cut a string at its first NUL, as a C string would end there."""
    return s.split("\0", 1)[0]


def _lower(ch):
    return chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch


def _upper(ch):
    return chr(ord(ch) - 32) if "a" <= ch <= "z" else ch


def _sign(a, b):
    return (a > b) - (a < b)


def strcmp(a, b):
    """Compare two strings; return -1, 0 or 1."""
    return _sign(_c(a), _c(b))


def strncmp(a, b, count):
    """Compare at most ``count`` leading characters; return -1, 0 or 1."""
    return _sign(_c(a)[:count], _c(b)[:count])


def _icmp(a, b):
    for ca, cb in zip(a, b):
        la, lb = _lower(ca), _lower(cb)
        if la != lb:
            return ord(la) - ord(lb)
    if len(a) == len(b):
        return 0
    # The shorter string ends with an implicit NUL.
    if len(a) > len(b):
        return ord(_lower(a[len(b)]))
    return -ord(_lower(b[len(a)]))


def stricmp(a, b):
    """Compare ignoring ASCII case; return the difference of the first unequal characters."""
    return _icmp(_c(a), _c(b))


def strnicmp(a, b, count):
    """Like :func:`stricmp` but looking at no more than ``count`` characters."""
    if count <= 0:
        return 0
    return _icmp(_c(a)[:count], _c(b)[:count])


def strupr(s):
    """Return ``s`` with ASCII letters upper-cased."""
    return "".join(_upper(ch) for ch in s)


def equals(a, b, search_case=SearchCase.CASE_SENSITIVE):
    """Return whether two strings are equal, optionally ignoring ASCII case."""
    if len(a) != len(b):
        return False
    if search_case == SearchCase.CASE_SENSITIVE:
        return strcmp(a, b) == 0
    return stricmp(a, b) == 0


def find(
    s,
    sub,
    search_case=SearchCase.IGNORE_CASE,
    search_dir=SearchDir.FROM_START,
    start=INDEX_NONE,
):
    """Return the index of ``sub`` in ``s``, or -1.

    Searching forward starts at ``start`` clamped into range; searching
    backward starts at ``start`` (or the last possible position when it is
    -1) and moves towards the beginning.
    """
    if not sub or not s:
        return INDEX_NONE
    n, m = len(s), len(sub)
    last = n - m
    if last < 0:
        return INDEX_NONE

    if search_case == SearchCase.IGNORE_CASE:
        hay = "".join(_lower(ch) for ch in s)
        needle = "".join(_lower(ch) for ch in sub)
    else:
        hay, needle = s, sub

    if search_dir == SearchDir.FROM_START:
        first = max(min(start, last), 0)
        positions = range(first, last + 1)
    else:
        first = last if start == INDEX_NONE else min(start, last)
        if first < 0:
            return INDEX_NONE
        positions = range(first, -1, -1)

    for i in positions:
        if hay.startswith(needle, i):
            return i
    return INDEX_NONE


def contains(s, sub, search_case=SearchCase.IGNORE_CASE, search_dir=SearchDir.FROM_START):
    """Return whether ``sub`` occurs in ``s``."""
    start = 0 if search_dir == SearchDir.FROM_START else INDEX_NONE
    return find(s, sub, search_case, search_dir, start) != INDEX_NONE


def left(s, count):
    """Return the first ``count`` characters; empty for a negative count."""
    if count < 0:
        return ""
    return s[: min(count, len(s))]


def right(s, count):
    """Return the last ``count`` characters; empty for a negative count."""
    if count < 0:
        return ""
    count = min(count, len(s))
    return s[len(s) - count :]


def trim(s):
    """Return ``s`` without leading and trailing spaces, tabs and line breaks."""
    return s.strip(_WHITESPACE)


def string_hash(s):
    """Return the 64-bit FNV-1a hash of the UTF-8 encoding of ``s``."""
    h = _FNV_OFFSET
    for byte in s.encode("utf-8"):
        h ^= byte
        h = (h * _FNV_PRIME) & _MASK64
    return h


def from_int(value):
    """Return the decimal text of an integer."""
    return str(int(value))


def sanitize_float(value):
    """Return a single-precision float in fixed notation with six decimals."""
    single = struct.unpack("f", struct.pack("f", float(value)))[0]
    return f"{single:f}"