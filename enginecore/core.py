"""Engine-wide identifiers and lifecycle enumerations."""

from __future__ import annotations

from enum import IntEnum

_UINT32_MOD = 1 << 32


class EndPlayReason(IntEnum):
    """Why an object stopped playing."""

    DESTROYED = 0
    """Explicitly destroyed."""
    WORLD_TRANSITION = 1
    """The world was changed."""
    QUIT = 2
    """The program is shutting down."""


class UuidGenerator:
    """Hands out sequential 32-bit identifiers, wrapping around after 2**32 - 1."""

    __slots__ = ("_next",)

    def __init__(self, start=0):
        if not 0 <= start < _UINT32_MOD:
            raise ValueError(f"start must be an unsigned 32-bit value, got {start}")
        self._next = start

    @property
    def peek(self):
        """The identifier the next call will return."""
        return self._next

    def next(self):
        """Return the current identifier and advance to the following one."""
        value = self._next
        self._next = (value + 1) % _UINT32_MOD
        return value

    def __iter__(self):
        return self

    def __next__(self):
        return self.next()


_default_generator = UuidGenerator()


def gen_uuid():
    """Return a fresh identifier from the process-wide generator."""
    return _default_generator.next()