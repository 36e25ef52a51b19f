"""Interned, case-insensitive names with a trailing instance number."""

from __future__ import annotations

from .strings import string_hash

POOL_SIZE = 128
CACHE_SIZE = 4

_NUMBER_MASK = 0x7FFFFFFF
_INT32_MAX = (1 << 31) - 1
_INT32_MIN = -(1 << 31)
_DIGITS = "0123456789"


class NamePoolFullError(RuntimeError):
    """Raised when a name table has no free slot left."""


def _ascii_lower(text):
    return "".join(chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in text)


class _EntryTable:
    """A fixed-size open-addressing table of strings with a small lookup cache."""

    __slots__ = ("_label", "_slots", "_cache", "_cursor")

    def __init__(self, label):
        self._label = label
        self._slots: list[str | None] = [None] * POOL_SIZE
        # Recently found (hash, index) pairs; starts zero-filled.
        self._cache = [(0, 0)] * CACHE_SIZE
        self._cursor = 0

    def resolve(self, index):
        if not 0 <= index < POOL_SIZE:
            raise IndexError(f"name index {index} out of range 0..{POOL_SIZE - 1}")
        entry = self._slots[index]
        return "" if entry is None else entry

    def _cached(self, hashed):
        for step in range(CACHE_SIZE):
            cached_hash, index = self._cache[(self._cursor - step) % CACHE_SIZE]
            if cached_hash == hashed:
                return index
        return None

    def _remember(self, hashed, index):
        if self._cache[self._cursor][1] != index:
            self._cursor = (self._cursor + 1) % CACHE_SIZE
            self._cache[self._cursor] = (hashed, index)

    def find_or_add(self, name):
        hashed = string_hash(name) % POOL_SIZE

        cached = self._cached(hashed)
        if cached is not None and self.resolve(cached) == name:
            return cached

        for step in range(POOL_SIZE):
            index = (hashed + step) % POOL_SIZE
            entry = self._slots[index]
            if entry is None:
                self._slots[index] = name
                return index
            if entry == name:
                self._remember(hashed, index)
                return index
        raise NamePoolFullError(f"{self._label} name pool is full")

    def names(self):
        return [entry for entry in self._slots if entry is not None]


class NamePool:
    """Two string tables: one for display text, one for lower-cased comparison keys."""

    __slots__ = ("_comparison", "_display")

    def __init__(self):
        self._comparison = _EntryTable("comparison")
        self._display = _EntryTable("display")

    def find_or_add_comparison(self, name):
        """Return the slot of ``name`` in the comparison table, adding it if needed."""
        return self._comparison.find_or_add(name)

    def find_or_add_display(self, name):
        """Return the slot of ``name`` in the display table, adding it if needed."""
        return self._display.find_or_add(name)

    def resolve_comparison(self, index):
        """Return the comparison string at ``index``; an empty slot gives ''."""
        return self._comparison.resolve(index)

    def resolve_display(self, index):
        """Return the display string at ``index``; an empty slot gives ''."""
        return self._display.resolve(index)

    def comparison_names(self):
        """Return every stored comparison string in slot order."""
        return self._comparison.names()

    def display_names(self):
        """Return every stored display string in slot order."""
        return self._display.names()


_DEFAULT_POOL = NamePool()


def default_pool():
    """Return the process-wide name pool."""
    return _DEFAULT_POOL


class Name:
    """A name such as ``"Player13"``: text ``"Player"`` and number 14.

    A name without trailing digits has number 0; trailing digits ``n`` give
    number ``n + 1``. Names compare equal when their text matches ignoring
    ASCII case, whatever their numbers.
    """

    __slots__ = ("display_index", "comparison_index", "number", "is_valid", "_pool")

    def __init__(self, text=None, number=None, pool=None):
        self._pool = default_pool() if pool is None else pool
        self.display_index = 0
        self.comparison_index = 0
        self.number = 0
        self.is_valid = False

        if text is None:
            return

        if number is not None:
            stem = text
            self.number = int(number) & _NUMBER_MASK
        else:
            if not text:
                return
            stem = text.rstrip(_DIGITS)
            if stem != text:
                value = int(text[len(stem):])
                if value > _INT32_MAX:
                    raise ValueError(f"name number too large in {text!r}")
                self.number = (value + 1) & _NUMBER_MASK
            if not stem:
                return

        self.display_index = self._pool.find_or_add_display(stem)
        self.comparison_index = self._pool.find_or_add_comparison(_ascii_lower(stem))
        self.is_valid = True

    def compare(self, other):
        """Return the number difference for equal names, else the minimum int32."""
        if self.comparison_index == other.comparison_index:
            return self.number - other.number
        return _INT32_MIN

    def to_string(self):
        """Return the display text followed by the instance number, if any."""
        text = self._pool.resolve_display(self.display_index)
        if self.number:
            return text + str(self.number - 1)
        return text

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Name({self.to_string()!r})"

    def __eq__(self, other):
        if not isinstance(other, Name):
            return NotImplemented
        return self.comparison_index == other.comparison_index

    def __hash__(self):
        return hash(self.comparison_index)