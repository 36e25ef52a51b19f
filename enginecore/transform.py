"""Position, rotation and scale of an object in space."""

from __future__ import annotations

from dataclasses import dataclass, field

from .quat import Quat
from .vector import Vector

_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)
_Z_AXIS = (0.0, 0.0, 1.0)


def _as_quat(rotation):
    if isinstance(rotation, Quat):
        return Quat(rotation.x, rotation.y, rotation.z, rotation.w)
    return Quat.from_euler(rotation)


@dataclass(slots=True)
class Transform:
    """A rigid transform with scale; ``rotation`` may be given as Euler degrees."""

    position: Vector = field(default_factory=Vector)
    rotation: Quat = field(default_factory=Quat)
    scale: Vector = field(default_factory=Vector.one)

    def __post_init__(self):
        self.rotation = _as_quat(self.rotation)

    def set_rotation(self, rotation):
        """Set the rotation from a Quat or from (roll, pitch, yaw) degrees."""
        self.rotation = _as_quat(rotation)

    def add_scale(self, scale):
        self.scale = self.scale + scale

    def translate(self, translation):
        self.position = self.position + translation

    def rotate(self, rotation):
        """Apply roll, then pitch, then yaw, all in degrees."""
        self.rotate_roll(rotation.x)
        self.rotate_pitch(rotation.y)
        self.rotate_yaw(rotation.z)

    def _rotate_about(self, axis, angle):
        self.rotation = self.rotation * Quat.from_axis_angle(Vector(*axis), angle)

    def rotate_yaw(self, angle):
        self._rotate_about(_Z_AXIS, angle)

    def rotate_pitch(self, angle):
        self._rotate_about(_Y_AXIS, angle)

    def rotate_roll(self, angle):
        self._rotate_about(_X_AXIS, angle)

    def euler(self):
        """Return the rotation as (roll, pitch, yaw) degrees."""
        return self.rotation.to_euler()