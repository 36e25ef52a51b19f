"""Two-, three- and four-component float vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

from .mathutil import SMALL_NUMBER, inv_sqrt


@dataclass(slots=True)
class Vector:
    """A mutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls):
        return cls(1.0, 1.0, 1.0)

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance(self, other):
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    def length(self):
        return math.sqrt(self.length_squared())

    def length_squared(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self, tolerance=SMALL_NUMBER):
        """Scale this vector to unit length in place; return False if it is too short."""
        square_sum = self.length_squared()
        if square_sum > tolerance:
            scale = inv_sqrt(square_sum)
            self.x *= scale
            self.y *= scale
            self.z *= scale
            return True
        return False

    def get_unsafe_normal(self):
        """Return the unit vector; raises ZeroDivisionError for a zero vector."""
        scale = inv_sqrt(self.length_squared())
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    def get_safe_normal(self, tolerance=SMALL_NUMBER):
        """Return the unit vector, or the zero vector if this one is too short."""
        square_sum = self.length_squared()
        if square_sum == 1.0:
            return Vector(self.x, self.y, self.z)
        if square_sum < tolerance:
            return Vector.zero()
        scale = inv_sqrt(square_sum)
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, Real):
            return Vector(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def __neg__(self):
        return Vector(-self.x, -self.y, -self.z)


def compute_normal_from_three_points(a, b, c):
    """Return the (unnormalised) normal of the triangle ``a``, ``b``, ``c``."""
    return (b - a).cross(c - a)


@dataclass(slots=True)
class Vector4(Vector):
    """A homogeneous four-component vector."""

    w: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def one(cls):
        return cls(1.0, 1.0, 1.0, 1.0)

    def get_coord(self):
        """Return the Cartesian point, or the zero vector when ``w`` is near zero."""
        if abs(self.w) < SMALL_NUMBER:
            return Vector.zero()
        denom = 1.0 / self.w
        return Vector(self.x, self.y, self.z) * denom

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, 1.0 / scalar)


@dataclass(slots=True)
class Vector2:
    """A mutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y)

    def get_safe_normal(self, tolerance=SMALL_NUMBER):
        square_sum = self.x * self.x + self.y * self.y
        if square_sum < tolerance:
            return Vector2(0.0, 0.0)
        scale = inv_sqrt(square_sum)
        return Vector2(self.x * scale, self.y * scale)

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)