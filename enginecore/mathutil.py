"""Scalar math helpers shared by the vector and rotation types."""

from __future__ import annotations

import math

PI = 3.1415926535897932
SMALL_NUMBER = 1.0e-8
KINDA_SMALL_NUMBER = 1.0e-4


def clamp(x, lo, hi):
    """Clamp ``x`` into ``[lo, hi]``; if ``lo > hi`` the lower bound wins."""
    return max(min(x, hi), lo)


def lerp(a, b, alpha):
    """Linearly interpolate between ``a`` and ``b`` by ``alpha``."""
    return a * (1.0 - alpha) + b * alpha


def radians_to_degrees(rad):
    """Convert an angle from radians to degrees."""
    return rad * (180.0 / PI)


def degrees_to_radians(deg):
    """Convert an angle from degrees to radians."""
    return deg * (PI / 180.0)


def square(value):
    """Return ``value`` multiplied by itself."""
    return value * value


def inv_sqrt(value):
    """Return ``1 / sqrt(value)``.

    Raises ZeroDivisionError for zero and ValueError for negative input.
    """
    return 1.0 / math.sqrt(value)