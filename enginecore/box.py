"""Axis-aligned bounding boxes and ray intersection."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import Vector

FLT_MAX = 3.4028234663852886e38
FLT_EPSILON = 1.1920928955078125e-07


@dataclass(slots=True)
class Box:
    """An axis-aligned box spanning ``minimum`` to ``maximum``."""

    minimum: Vector = field(default_factory=Vector)
    maximum: Vector = field(default_factory=Vector)

    @classmethod
    def from_points(cls, points):
        """Return the smallest box holding every point (anything with x, y, z).

        With no points the box is inverted: minimum at +FLT_MAX and maximum
        at -FLT_MAX on every axis.
        """
        lo = [FLT_MAX, FLT_MAX, FLT_MAX]
        hi = [-FLT_MAX, -FLT_MAX, -FLT_MAX]
        for point in points:
            coords = (point.x, point.y, point.z)
            lo = [min(a, b) for a, b in zip(lo, coords)]
            hi = [max(a, b) for a, b in zip(hi, coords)]
        return cls(Vector(*lo), Vector(*hi))

    @classmethod
    def build_aabb(cls, origin, extent):
        """Return the box reaching ``extent`` from ``origin`` on each side."""
        return cls(origin - extent, origin + extent)

    def intersects(self, ray_origin, ray_dir):
        """Return the entry parameter of the ray into the box, or None on a miss.

        The value is in units of ``ray_dir``; it is negative when the ray
        starts inside the box.
        """
        t_min = -FLT_MAX
        t_max = FLT_MAX
        axes = zip(ray_origin, ray_dir, self.minimum, self.maximum)
        for origin, direction, lo, hi in axes:
            if abs(direction) < FLT_EPSILON:
                if origin < lo or origin > hi:
                    return None
                continue
            t1 = (lo - origin) / direction
            t2 = (hi - origin) / direction
            if t1 > t2:
                t1, t2 = t2, t1
            t_min = max(t_min, t1)
            t_max = min(t_max, t2)
        if t_max >= t_min and t_max >= 0:
            return t_min
        return None

    def center(self):
        """Return the midpoint of the box."""
        return (self.maximum + self.minimum) / 2.0

    def extent(self):
        """Return the full size of the box along each axis."""
        return self.maximum - self.minimum