"""Quaternion rotations with Euler-angle conversions (degrees)."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .mathutil import PI, degrees_to_radians, radians_to_degrees
from .vector import Vector


@dataclass(slots=True)
class Quat:
    """A rotation quaternion; the default value is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def from_euler(cls, euler):
        """Build from (roll, pitch, yaw) in degrees about X, Y and Z."""
        roll = degrees_to_radians(euler.x)
        pitch = degrees_to_radians(euler.y)
        yaw = degrees_to_radians(euler.z)

        cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
        cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)

        return cls(
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
            cr * cp * cy + sr * sp * sy,
        )

    @classmethod
    def from_axis_angle(cls, axis, angle_degrees):
        """Build a rotation of ``angle_degrees`` about ``axis`` (assumed unit length)."""
        half = degrees_to_radians(angle_degrees) * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def from_rotation_matrix(cls, m):
        """Build from a rotation matrix given as rows, indexed ``m[row][col]``."""
        trace = m[0][0] + m[1][1] + m[2][2]
        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            return cls(
                (m[2][1] - m[1][2]) / s,
                (m[0][2] - m[2][0]) / s,
                (m[1][0] - m[0][1]) / s,
                0.25 * s,
            )
        if m[0][0] > m[1][1] and m[0][0] > m[2][2]:
            s = math.sqrt(1.0 + m[0][0] - m[1][1] - m[2][2]) * 2.0
            return cls(
                0.25 * s,
                (m[0][1] + m[1][0]) / s,
                (m[0][2] + m[2][0]) / s,
                (m[2][1] - m[1][2]) / s,
            )
        if m[1][1] > m[2][2]:
            s = math.sqrt(1.0 + m[1][1] - m[0][0] - m[2][2]) * 2.0
            return cls(
                (m[0][1] + m[1][0]) / s,
                0.25 * s,
                (m[1][2] + m[2][1]) / s,
                (m[0][2] - m[2][0]) / s,
            )
        s = math.sqrt(1.0 + m[2][2] - m[0][0] - m[1][1]) * 2.0
        return cls(
            (m[0][2] + m[2][0]) / s,
            (m[1][2] + m[2][1]) / s,
            0.25 * s,
            (m[1][0] - m[0][1]) / s,
        )

    def to_euler(self):
        """Return (roll, pitch, yaw) in degrees as a Vector."""
        sinr_cosp = 2.0 * (self.w * self.x + self.y * self.z)
        cosr_cosp = 1.0 - 2.0 * (self.x * self.x + self.y * self.y)
        roll = math.atan2(sinr_cosp, cosr_cosp)

        t = 2.0 * (self.w * self.y - self.x * self.z)
        sinp = math.sqrt(max(0.0, 1.0 + t))
        cosp = math.sqrt(max(0.0, 1.0 - t))
        pitch = 2.0 * math.atan2(sinp, cosp) - PI / 2.0

        siny_cosp = 2.0 * (self.w * self.z + self.x * self.y)
        cosy_cosp = 1.0 - 2.0 * (self.y * self.y + self.z * self.z)
        yaw = math.atan2(siny_cosp, cosy_cosp)

        return Vector(
            radians_to_degrees(roll),
            radians_to_degrees(pitch),
            radians_to_degrees(yaw),
        )

    def __add__(self, other):
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other):
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other):
        """Hamilton product ``self * other``."""
        if not isinstance(other, Quat):
            return NotImplemented
        q1, q2 = self, other
        return Quat(
            q1.w * q2.x + q1.x * q2.w + q1.y * q2.z - q1.z * q2.y,
            q1.w * q2.y - q1.x * q2.z + q1.y * q2.w + q1.z * q2.x,
            q1.w * q2.z + q1.x * q2.y - q1.y * q2.x + q1.z * q2.w,
            q1.w * q2.w - q1.x * q2.x - q1.y * q2.y - q1.z * q2.z,
        )