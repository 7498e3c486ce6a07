"""
Orientation state for a viewed component.

Rotations are kept as a unit quaternion and applied about the component's
local axes, so successive rotations compose without gimbal lock.
"""

import math
from dataclasses import dataclass

AXES = {
    "x": (1.0, 0.0, 0.0),
    "y": (0.0, 1.0, 0.0),
    "z": (0.0, 0.0, 1.0),
}


@dataclass
class Orientation:
    """Unit quaternion (w, x, y, z). Starts at the identity rotation."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_axis_angle(cls, axis: str, angle: float) -> "Orientation":
        """
        Build the rotation of `angle` radians about a principal axis.

        Raises:
            ValueError: If `axis` is not one of "x", "y", "z"
        """
        try:
            ax, ay, az = AXES[axis.lower()]
        except (KeyError, AttributeError):
            raise ValueError(f"Unknown axis: {axis!r}") from None
        half = angle / 2
        s = math.sin(half)
        return cls(w=math.cos(half), x=ax * s, y=ay * s, z=az * s)

    def multiply(self, other: "Orientation") -> "Orientation":
        """Hamilton product `self * other`."""
        return Orientation(
            w=self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            x=self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            y=self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            z=self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    def rotate(self, axis: str, angle: float) -> None:
        """Rotate in place by `angle` radians about the local `axis`."""
        q = self.multiply(Orientation.from_axis_angle(axis, angle))
        norm = math.sqrt(q.w**2 + q.x**2 + q.y**2 + q.z**2)
        self.w, self.x, self.y, self.z = q.w / norm, q.x / norm, q.y / norm, q.z / norm

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.w, self.x, self.y, self.z)

    def apply(self, vector: tuple[float, float, float]) -> tuple[float, float, float]:
        """Rotate a vector by this orientation."""
        p = Orientation(0.0, *vector)
        conj = Orientation(self.w, -self.x, -self.y, -self.z)
        r = self.multiply(p).multiply(conj)
        return (r.x, r.y, r.z)

    def as_euler(self) -> tuple[float, float, float]:
        """Return (roll, pitch, yaw) in radians, XYZ convention."""
        w, x, y, z = self.as_tuple()
        roll = math.atan2(2 * (w * x + y * z), 1 - 2 * (x * x + y * y))
        sinp = max(-1.0, min(1.0, 2 * (w * y - z * x)))
        pitch = math.asin(sinp)
        yaw = math.atan2(2 * (w * z + x * y), 1 - 2 * (y * y + z * z))
        return (roll, pitch, yaw)
