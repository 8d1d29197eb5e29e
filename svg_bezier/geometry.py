"""
Point, rectangle and line primitives shared by the path segments.
"""

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return Line(self, other).length()

    def as_array(self) -> np.ndarray:
        """Return the coordinates as a (2,) float array."""
        return np.array([self.x, self.y], dtype=float)


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle spanned by its min and max corners.

    The corners are always built through min/max of coordinates, so
    min.x <= max.x and min.y <= max.y hold without further checks.
    """
    min: Point
    max: Point

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "Rect":
        """
        Smallest rectangle enclosing the given points.

        Raises:
            ValueError: If no points are given
        """
        points = list(points)
        if not points:
            raise ValueError("Rect.from_points() needs at least one point")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(Point(min(xs), min(ys)), Point(max(xs), max(ys)))

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    def contains(self, point: Point, tol: float = 0.0) -> bool:
        """Check whether a point lies inside the rectangle (borders included)."""
        return (self.min.x - tol <= point.x <= self.max.x + tol
                and self.min.y - tol <= point.y <= self.max.y + tol)

    def union(self, other: "Rect") -> "Rect":
        """Smallest rectangle enclosing both rectangles."""
        return Rect(
            Point(min(self.min.x, other.min.x), min(self.min.y, other.min.y)),
            Point(max(self.max.x, other.max.x), max(self.max.y, other.max.y)),
        )


@dataclass(frozen=True)
class Line:
    """Straight segment between two points."""
    start: Point
    end: Point

    def length(self) -> float:
        dx = self.end.x - self.start.x
        dy = self.end.y - self.start.y
        return math.sqrt(dx * dx + dy * dy)
