"""Two-dimensional vectors, axis-aligned rectangles and vector helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and extent."""

    left: float
    top: float
    width: float
    height: float

    def contains(self, point: Vec2) -> bool:
        """Whether the point lies inside; left/top edges inclusive, right/bottom exclusive."""
        min_x = min(self.left, self.left + self.width)
        max_x = max(self.left, self.left + self.width)
        min_y = min(self.top, self.top + self.height)
        max_y = max(self.top, self.top + self.height)
        return min_x <= point.x < max_x and min_y <= point.y < max_y


def rotated_bounds(center: Vec2, size: Vec2, rotation: float) -> Rect:
    """Axis-aligned bounds of a rectangle centred on `center`, rotated by `rotation` degrees."""
    turn = rotation % 360
    if turn in (0, 180):
        half_w, half_h = size.x / 2, size.y / 2
    elif turn in (90, 270):
        half_w, half_h = size.y / 2, size.x / 2
    else:
        rad = math.radians(turn)
        c, s = abs(math.cos(rad)), abs(math.sin(rad))
        half_w = (c * size.x + s * size.y) / 2
        half_h = (s * size.x + c * size.y) / 2
    return Rect(center.x - half_w, center.y - half_h, 2 * half_w, 2 * half_h)


def distance(a: Vec2, b: Vec2) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def size(v: Vec2) -> float:
    """Length of a vector."""
    return distance(v, Vec2(0.0, 0.0))


def dot(a: Vec2, b: Vec2) -> float:
    """Dot product."""
    return a.x * b.x + a.y * b.y


def angle(a: Vec2, b: Vec2) -> float:
    """Unsigned angle between two vectors in radians."""
    lengths = size(a) * size(b)
    if lengths == 0:
        raise ValueError("angle is undefined for a zero-length vector")
    cosine = max(-1.0, min(1.0, dot(a, b) / lengths))
    return math.acos(cosine)


def direction_angle(a: Vec2) -> float:
    """Angle of a vector against the x axis, negative when x is negative."""
    unsigned = angle(a, Vec2(1.0, 0.0))
    return -unsigned if a.x < 0 else unsigned


def normalize(v: Vec2) -> Vec2:
    """Unit vector in the direction of v."""
    length = size(v)
    if length == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def rotate(v: Vec2, angle: float) -> Vec2:
    """Rotate v by `angle` radians."""
    if angle == math.pi * 0.5:
        return Vec2(-v.y, v.x)
    c, s = math.cos(angle), math.sin(angle)
    return Vec2(v.x * c - v.y * s, v.x * s + v.y * c)


def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    """Linear interpolation between a and b."""
    return a + (b - a) * t


def intersection_point(v1: Vec2, v2: Vec2, v3: Vec2, v4: Vec2) -> float:
    """Parameter t along v1->v2 where it meets line v3-v4, or -1.0 for parallel lines.

    The segments intersect when 0 <= t <= 1.
    """
    num = (v1.x - v3.x) * (v3.y - v4.y) - (v1.y - v3.y) * (v3.x - v4.x)
    den = (v1.x - v2.x) * (v3.y - v4.y) - (v1.y - v2.y) * (v3.x - v4.x)
    if den == 0:
        return -1.0
    return num / den