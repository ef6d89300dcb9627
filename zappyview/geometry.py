"""Small 3D and 2D geometry primitives used by the viewer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Vector3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector3:
        return self.scaled(factor)

    __rmul__ = __mul__

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def scaled(self, factor: float) -> Vector3:
        """Return the vector multiplied by a scalar."""
        return Vector3(self.x * factor, self.y * factor, self.z * factor)


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``position`` and heading along ``direction``."""

    position: Vector3 = field(default_factory=Vector3)
    direction: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class BoundingBox:
    """An axis-aligned box between ``min`` and ``max`` corners."""

    min: Vector3
    max: Vector3

    def intersects(self, ray: Ray) -> bool:
        """Whether the ray hits the box (a ray starting inside always hits)."""
        t_near, t_far = -math.inf, math.inf
        for origin, direction, low, high in zip(
            ray.position, ray.direction, self.min, self.max
        ):
            if direction == 0:
                if origin < low or origin > high:
                    return False
                continue
            t1 = (low - origin) / direction
            t2 = (high - origin) / direction
            if t1 > t2:
                t1, t2 = t2, t1
            t_near = max(t_near, t1)
            t_far = min(t_far, t2)
            if t_near > t_far:
                return False
        return t_far >= 0


@dataclass(frozen=True)
class Rectangle:
    """A screen-space rectangle."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; left/top edges in, right/bottom out."""
        return (
            self.x <= x < self.x + self.width
            and self.y <= y < self.y + self.height
        )