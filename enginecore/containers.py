"""Array, map, set and pair containers with the engine's container semantics."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any

INDEX_NONE = -1


@dataclass(slots=True)
class Pair:
    """A key and its value."""

    key: Any = None
    value: Any = None

    def __iter__(self):
        yield self.key
        yield self.value


def make_pair(key, value):
    """Return a Pair holding ``key`` and ``value``."""
    return Pair(key, value)


class Array:
    """A growable sequence whose mutators report indices and counts."""

    __slots__ = ("_items",)

    def __init__(self, items=()):
        self._items = list(items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __reversed__(self):
        return reversed(self._items)

    def __contains__(self, item):
        return item in self._items

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value):
        self._items[index] = value

    def __eq__(self, other):
        if isinstance(other, Array):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self):
        return f"Array({self._items!r})"

    def init(self, element, number):
        """Replace the contents with ``number`` copies of ``element``."""
        self._items = [element] * number

    def add(self, item):
        """Append ``item`` and return its index."""
        return self.emplace(item)

    def add_unique(self, item):
        """Return the index of ``item``, appending it first if it is absent."""
        index = self.find(item)
        if index != INDEX_NONE:
            return index
        return self.add(item)

    def emplace(self, item):
        """Append ``item`` and return its index."""
        self._items.append(item)
        return len(self._items) - 1

    def empty(self):
        """Remove every element."""
        self._items.clear()

    def remove(self, item):
        """Remove every element equal to ``item``; return how many were removed."""
        return self.remove_all(lambda element: element == item)

    def remove_single(self, item):
        """Remove the first element equal to ``item``; return whether one was found."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def remove_at(self, index):
        """Remove the element at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self._items):
            del self._items[index]

    def remove_all(self, predicate):
        """Remove every element for which ``predicate`` is true; return the count."""
        old_size = len(self._items)
        self._items = [element for element in self._items if not predicate(element)]
        return old_size - len(self._items)

    def find(self, item):
        """Return the index of the first element equal to ``item``, or -1."""
        try:
            return self._items.index(item)
        except ValueError:
            return INDEX_NONE

    def _check_insert_index(self, index):
        if not 0 <= index <= len(self._items):
            raise IndexError("Index out of range in Array.insert")

    def insert(self, index, item):
        """Insert ``item`` before ``index`` (0..len) and return ``index``."""
        self._check_insert_index(index)
        self._items.insert(index, item)
        return index

    def insert_many(self, index, items):
        """Insert all of ``items`` before ``index`` (0..len), keeping their order."""
        self._check_insert_index(index)
        self._items[index:index] = list(items)

    def num(self):
        """Return the number of elements."""
        return len(self._items)

    def sort(self, less=None):
        """Sort in place, by natural order or by the ``less(a, b)`` predicate."""
        if less is None:
            self._items.sort()
            return

        def compare(a, b):
            if less(a, b):
                return -1
            if less(b, a):
                return 1
            return 0

        self._items.sort(key=cmp_to_key(compare))


class Map:
    """A hash map whose iteration yields Pair objects."""

    __slots__ = ("_map",)

    def __init__(self, items=()):
        self._map = dict(items)

    def __len__(self):
        return len(self._map)

    def __iter__(self):
        for key, value in self._map.items():
            yield Pair(key, value)

    def __contains__(self, key):
        return key in self._map

    def __getitem__(self, key):
        return self._map[key]

    def __setitem__(self, key, value):
        self._map[key] = value

    def __eq__(self, other):
        if isinstance(other, Map):
            return self._map == other._map
        return NotImplemented

    def __repr__(self):
        return f"Map({self._map!r})"

    def add(self, key, value):
        """Insert ``key`` with ``value``, replacing any existing value."""
        self._map[key] = value

    def emplace(self, key, value):
        """Insert ``key`` with ``value`` only if the key is not already present."""
        self._map.setdefault(key, value)

    def remove(self, key):
        """Remove ``key`` if present."""
        self._map.pop(key, None)

    def empty(self):
        """Remove every entry."""
        self._map.clear()

    def contains(self, key):
        return key in self._map

    def find(self, key):
        """Return the value stored under ``key``, or None."""
        return self._map.get(key)

    def num(self):
        return len(self._map)

    def is_empty(self):
        return not self._map


class Set:
    """A hash set of unique elements."""

    __slots__ = ("_set",)

    def __init__(self, items=()):
        self._set = set(items)

    def __len__(self):
        return len(self._set)

    def __iter__(self):
        return iter(self._set)

    def __contains__(self, item):
        return item in self._set

    def __eq__(self, other):
        if isinstance(other, Set):
            return self._set == other._set
        return NotImplemented

    def __repr__(self):
        return f"Set({self._set!r})"

    def add(self, item):
        self._set.add(item)

    def emplace(self, item):
        """Add ``item``; return True if it was not already present."""
        if item in self._set:
            return False
        self._set.add(item)
        return True

    def num(self):
        return len(self._set)

    def contains(self, item):
        return item in self._set

    def to_array(self):
        """Return the elements as an Array, in iteration order."""
        return Array(self._set)

    def remove(self, item):
        """Remove ``item``; return how many elements were removed (0 or 1)."""
        if item in self._set:
            self._set.discard(item)
            return 1
        return 0

    def empty(self):
        self._set.clear()

    def is_empty(self):
        return not self._set