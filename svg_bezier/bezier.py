"""
Quadratic and cubic Bézier path segments.

Each curve type evaluates its Bernstein polynomial per axis, computes an
axis-aligned bounding box from the endpoints plus the derivative roots
that fall inside [0, 1], and approximates its arc length with a polyline.

Degenerate control configurations are not special-cased: a zero
denominator in the extremum formulas yields inf/nan, which fails the
[0, 1] range test and contributes nothing to the bounds.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple

import numpy as np

from .constants import (
    CUBIC_CONTROL_POINT_COUNT,
    CUBIC_LENGTH_APPROXIMATION_INTERVAL,
    QUAD_CONTROL_POINT_COUNT,
    QUAD_LENGTH_APPROXIMATION_INTERVAL,
)
from .geometry import Line, Point, Rect

logger = logging.getLogger(__name__)


def quadratic_bezier_polynomial(a, b, c, t):
    """B(t) = (1-t)²·A + 2(1-t)t·B + t²·C for a single axis.

    Computed on float64 so overflow for large |t| gives inf/nan.
    """
    t = np.float64(t)
    with np.errstate(over="ignore", invalid="ignore"):
        return (1 - t) ** 2 * a + 2 * (1 - t) * t * b + t * t * c


def quadratic_bezier_extrema(a, b, c) -> Tuple[float, float]:
    """
    Minimum and maximum of a quadratic Bézier coordinate over t in [0, 1].

    The derivative vanishes at t* = (B - A) / (2B - A - C). When the
    denominator is zero t* is inf or nan and is skipped by the range test.

    Args:
        a, b, c: Start, control and end coordinate on one axis

    Returns:
        (min, max) tuple
    """
    lo = min(a, c)
    hi = max(a, c)
    with np.errstate(divide="ignore", invalid="ignore"):
        t = np.float64(b - a) / np.float64(2 * b - a - c)
    if 0 <= t <= 1:
        extreme = quadratic_bezier_polynomial(a, b, c, t)
        lo = min(lo, extreme)
        hi = max(hi, extreme)
    elif not np.isfinite(t):
        logger.debug("quadratic extremum skipped, t*=%s for (%s, %s, %s)", t, a, b, c)
    return float(lo), float(hi)


def cubic_bezier_polynomial(a, b, c, d, t):
    """B(t) = A(1-t)³ + 3B·t(1-t)² + 3C(1-t)t² + D·t³ for a single axis."""
    t = np.float64(t)
    with np.errstate(over="ignore", invalid="ignore"):
        return a * (1 - t) ** 3 + 3 * b * t * (1 - t) ** 2 + 3 * c * (1 - t) * t * t + d * t * t * t


def cubic_bezier_extrema(a, b, c, d) -> List[float]:
    """
    Coordinate values at the interior extrema of a cubic Bézier axis.

    The derivative of the cubic is the quadratic qa·t² + qb·t + qc, solved
    with the quadratic formula. Roots outside [0, 1] (including the
    non-finite ones produced when qa == 0) are dropped.

    Args:
        a, b, c, d: Start, first control, second control and end coordinate

    Returns:
        Up to two polynomial values, the "+" root first
    """
    # Coefficients of the derivative of the cubic polynomial
    qa = 3 * d - 9 * c + 9 * b - 3 * a
    qb = 6 * a - 12 * b + 6 * c
    qc = 3 * (b - a)
    discriminant = qb * qb - 4 * qa * qc
    if discriminant < 0:
        return []

    with np.errstate(divide="ignore", invalid="ignore"):
        root = np.sqrt(np.float64(discriminant))
        denominator = np.float64(2 * qa)
        solutions = ((-qb + root) / denominator, (-qb - root) / denominator)

    result = []
    for t in solutions:
        if 0 <= t <= 1:
            result.append(float(cubic_bezier_polynomial(a, b, c, d, t)))
        elif not np.isfinite(t):
            logger.debug("cubic extremum skipped, t=%s for (%s, %s, %s, %s)", t, a, b, c, d)
    return result


def polyline_length(evaluate: Callable[[float], Point], interval: float) -> float:
    """
    Approximate the arc length of a parametric curve with chords.

    The parameter advances as a running sum t += interval while t < 1, so
    the chord ending past 1 is measured only if the accumulated t is still
    below 1; otherwise the final partial interval is left out.

    Args:
        evaluate: Curve evaluation function t -> Point
        interval: Parameter step

    Returns:
        Sum of chord lengths

    Raises:
        ValueError: If interval is not positive
    """
    if not interval > 0:
        raise ValueError(f"interval must be positive, got {interval}")

    length = 0.0
    t = 0.0
    while t < 1:
        length += Line(evaluate(t), evaluate(t + interval)).length()
        t += interval
    return length


def _points_from_array(control_points, count: int, kind: str) -> List[Point]:
    P = np.array(control_points, dtype=float)
    if P.ndim != 2 or P.shape != (count, 2):
        raise ValueError(f"{kind} needs control_points of shape ({count}, 2), got {P.shape}")
    return [Point(float(x), float(y)) for x, y in P]


@dataclass(frozen=True)
class QuadraticBezier:
    """
    2nd degree Bézier curve.

    Attributes:
        start: Start point (t = 0)
        control: Control point
        end: End point (t = 1)
    """
    start: Point
    control: Point
    end: Point

    @classmethod
    def from_array(cls, control_points) -> "QuadraticBezier":
        """
        Build a curve from a (3, 2) array-like of control points.

        Raises:
            ValueError: If the array does not have shape (3, 2)
        """
        return cls(*_points_from_array(control_points, QUAD_CONTROL_POINT_COUNT, "QuadraticBezier"))

    @property
    def degree(self) -> int:
        return 2

    def control_points(self) -> np.ndarray:
        """Control points as a (3, 2) array."""
        return np.array([p.as_array() for p in (self.start, self.control, self.end)])

    def evaluate(self, t: float) -> Point:
        """
        Point on the curve at parameter t.

        t outside [0, 1] is not rejected and extrapolates the polynomial.
        """
        x = quadratic_bezier_polynomial(self.start.x, self.control.x, self.end.x, t)
        y = quadratic_bezier_polynomial(self.start.y, self.control.y, self.end.y, t)
        return Point(float(x), float(y))

    def bounds(self) -> Rect:
        """Axis-aligned bounding box of the curve for t in [0, 1]."""
        min_x, max_x = quadratic_bezier_extrema(self.start.x, self.control.x, self.end.x)
        min_y, max_y = quadratic_bezier_extrema(self.start.y, self.control.y, self.end.y)
        return Rect(Point(min_x, min_y), Point(max_x, max_y))

    def length(self, interval: float = QUAD_LENGTH_APPROXIMATION_INTERVAL) -> float:
        """Approximate arc length, see polyline_length()."""
        return polyline_length(self.evaluate, interval)

    def from_point(self) -> Point:
        return self.start

    def to_point(self) -> Point:
        return self.end

    def reversed(self) -> "QuadraticBezier":
        """Same curve traversed from end to start."""
        return QuadraticBezier(self.end, self.control, self.start)


@dataclass(frozen=True)
class CubicBezier:
    """
    3rd degree Bézier curve.

    Attributes:
        start: Start point (t = 0)
        control1: First control point
        control2: Second control point
        end: End point (t = 1)
    """
    start: Point
    control1: Point
    control2: Point
    end: Point

    @classmethod
    def from_array(cls, control_points) -> "CubicBezier":
        """
        Build a curve from a (4, 2) array-like of control points.

        Raises:
            ValueError: If the array does not have shape (4, 2)
        """
        return cls(*_points_from_array(control_points, CUBIC_CONTROL_POINT_COUNT, "CubicBezier"))

    @property
    def degree(self) -> int:
        return 3

    def control_points(self) -> np.ndarray:
        """Control points as a (4, 2) array."""
        return np.array([p.as_array() for p in (self.start, self.control1, self.control2, self.end)])

    def evaluate(self, t: float) -> Point:
        """Point on the curve at parameter t (no domain check)."""
        x = cubic_bezier_polynomial(self.start.x, self.control1.x, self.control2.x, self.end.x, t)
        y = cubic_bezier_polynomial(self.start.y, self.control1.y, self.control2.y, self.end.y, t)
        return Point(float(x), float(y))

    def bounds(self) -> Rect:
        """
        Axis-aligned bounding box of the curve for t in [0, 1].

        Seeded with the endpoints only; the control points matter through
        the derivative roots found by cubic_bezier_extrema().
        """
        min_x = float(min(self.start.x, self.end.x))
        max_x = float(max(self.start.x, self.end.x))
        min_y = float(min(self.start.y, self.end.y))
        max_y = float(max(self.start.y, self.end.y))

        for x in cubic_bezier_extrema(self.start.x, self.control1.x, self.control2.x, self.end.x):
            min_x = min(min_x, x)
            max_x = max(max_x, x)
        for y in cubic_bezier_extrema(self.start.y, self.control1.y, self.control2.y, self.end.y):
            min_y = min(min_y, y)
            max_y = max(max_y, y)

        return Rect(Point(min_x, min_y), Point(max_x, max_y))

    def length(self, interval: float = CUBIC_LENGTH_APPROXIMATION_INTERVAL) -> float:
        """Approximate arc length, see polyline_length()."""
        return polyline_length(self.evaluate, interval)

    def from_point(self) -> Point:
        return self.start

    def to_point(self) -> Point:
        return self.end

    def reversed(self) -> "CubicBezier":
        """Same curve traversed from end to start."""
        return CubicBezier(self.end, self.control2, self.control1, self.start)
