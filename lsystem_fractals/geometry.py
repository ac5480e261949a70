from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    min: Point
    max: Point

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def center(self) -> Point:
        return Point((self.min.x + self.max.x) / 2.0, (self.min.y + self.max.y) / 2.0)

    def contains(self, other: Rect, tol: float = 1e-9) -> bool:
        return (
            other.min.x >= self.min.x - tol
            and other.min.y >= self.min.y - tol
            and other.max.x <= self.max.x + tol
            and other.max.y <= self.max.y + tol
        )


def to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def to_degrees(radians: float) -> float:
    return radians * (180.0 / math.pi)


def length(p0: Point, p1: Point) -> float:
    return math.hypot(p1.x - p0.x, p1.y - p0.y)


def theta_from_point(p0: Point, p1: Point) -> float:
    """Heading in degrees of the segment p0 -> p1, in [-90, 270)."""
    dx = p1.x - p0.x
    dy = p1.y - p0.y
    if dx == 0:
        theta = 90.0 if dy > 0 else 270.0
    else:
        theta = to_degrees(math.atan(dy / dx))
    if p0.x > p1.x:
        theta += 180.0
    return theta


def point_from_theta(p0: Point, theta: float, dist: float) -> Point:
    rad = to_radians(theta)
    return Point(p0.x + dist * math.cos(rad), p0.y + dist * math.sin(rad))
