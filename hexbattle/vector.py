"""Three-component vectors and the interpolation helpers used for animation."""

from __future__ import annotations

import math
from dataclasses import dataclass

SMALL_NUMBER = 1e-8


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def size_squared(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def size(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.size_squared())

    def dist_squared(self, other: Vec3) -> float:
        """Squared distance between this point and ``other``."""
        return (self - other).size_squared()

    def safe_normal(self) -> Vec3:
        """Unit vector in the same direction, or zero if the vector is too short."""
        squared = self.size_squared()
        if squared == 1.0:
            return self
        if squared < SMALL_NUMBER:
            return ZERO
        return self / math.sqrt(squared)

    def min_component(self) -> float:
        """The smallest of the three components."""
        return min(self.x, self.y, self.z)


ZERO = Vec3()
ONE = Vec3(1.0, 1.0, 1.0)


def interp_to(current: Vec3, target: Vec3, delta_time: float, speed: float) -> Vec3:
    """Move toward ``target`` by a fraction of the remaining distance."""
    if speed <= 0:
        return target
    dist = target - current
    if dist.size_squared() < SMALL_NUMBER:
        return target
    alpha = max(0.0, min(1.0, delta_time * speed))
    return current + dist * alpha


def interp_constant_to(current: Vec3, target: Vec3, delta_time: float, speed: float) -> Vec3:
    """Move toward ``target`` at a constant rate of ``speed`` units per second."""
    delta = target - current
    distance = delta.size()
    max_step = speed * delta_time
    if distance > max_step:
        if max_step > 0:
            return current + (delta / distance) * max_step
        return current
    return target