"""Polyline buffer and the transforms applied to it before rendering.

A Drawing is a list of Paths; each Path is a run of connected points drawn in
one color. Every transform walks the full point set in place through
``map_points``.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .color import Color
from .errors import EmptyDrawingError
from .geometry import Point, Rect, to_radians


@dataclass
class Path:
    points: list[Point]
    color: Color


@dataclass
class Drawing:
    paths: list[Path] = field(default_factory=list)

    # -------------------------
    # Building
    # -------------------------

    def move_to(self, p: Point, color: Color) -> None:
        """Start a new path at p."""
        self.paths.append(Path(points=[p], color=color))

    def line_to(self, p: Point) -> None:
        if not self.paths:
            raise RuntimeError("line_to() called before move_to()")
        self.paths[-1].points.append(p)

    @property
    def path_count(self) -> int:
        return len(self.paths)

    @property
    def point_count(self) -> int:
        return sum(len(pa.points) for pa in self.paths)

    # -------------------------
    # Traversal
    # -------------------------

    def points(self) -> Iterator[Point]:
        for pa in self.paths:
            yield from pa.points

    def map_points(self, fn: Callable[[Point], Point]) -> None:
        for pa in self.paths:
            pa.points = [fn(p) for p in pa.points]

    # -------------------------
    # Transforms
    # -------------------------

    def bounds(self) -> Rect:
        it = self.points()
        first = next(it, None)
        if first is None:
            raise EmptyDrawingError("drawing has no points")
        min_x = max_x = first.x
        min_y = max_y = first.y
        if not (math.isfinite(first.x) and math.isfinite(first.y)):
            raise EmptyDrawingError("drawing has non-finite coordinates")
        for x, y in it:
            if not (math.isfinite(x) and math.isfinite(y)):
                raise EmptyDrawingError("drawing has non-finite coordinates")
            if x < min_x:
                min_x = x
            if x > max_x:
                max_x = x
            if y < min_y:
                min_y = y
            if y > max_y:
                max_y = y
        return Rect(Point(min_x, min_y), Point(max_x, max_y))

    def translate(self, delta: Point) -> None:
        dx, dy = delta
        self.map_points(lambda p: Point(p.x + dx, p.y + dy))

    def scale(self, factor: float) -> None:
        self.map_points(lambda p: Point(p.x * factor, p.y * factor))

    def rotate(self, angle_deg: float) -> None:
        """Rotate about the origin, counter-clockwise for positive angles."""
        c = math.cos(to_radians(angle_deg))
        s = math.sin(to_radians(angle_deg))
        self.map_points(lambda p: Point(p.x * c - p.y * s, p.x * s + p.y * c))

    def flip(self, vertical: bool = True) -> None:
        """Mirror across the mid-line of the current bounds.

        vertical=True flips Y (math y-up <-> raster y-down), otherwise X.
        """
        b = self.bounds()
        if vertical:
            self.map_points(lambda p: Point(p.x, b.max.y - p.y + b.min.y))
        else:
            self.map_points(lambda p: Point(b.max.x - p.x + b.min.x, p.y))

    def center_with_margin(self, target: Rect, margin: Point) -> None:
        """Uniformly scale and center the drawing inside target.

        margin.x / margin.y are fractions of the target width / height left
        blank on each side, e.g. Point(0.1, 0.1) for a 10% border.
        """
        db = self.bounds()

        candidates: list[float] = []
        if db.width > 0:
            candidates.append((target.width - 2 * margin.x * target.width) / db.width)
        if db.height > 0:
            candidates.append(
                (target.height - 2 * margin.y * target.height) / db.height
            )
        # A single point has no extent to fit; only center it.
        factor = min(candidates) if candidates else 1.0

        self.scale(factor)
        scaled_center = Point(db.center.x * factor, db.center.y * factor)
        tc = target.center
        self.translate(Point(tc.x - scaled_center.x, tc.y - scaled_center.y))
