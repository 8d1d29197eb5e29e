"""
Uniform segment interface over the curve types, plus path-level helpers.
"""

from typing import Iterable, Protocol, Sequence, Union, runtime_checkable

import numpy as np

from .bezier import CubicBezier, QuadraticBezier
from .constants import CUBIC_CONTROL_POINT_COUNT, QUAD_CONTROL_POINT_COUNT
from .geometry import Point, Rect


@runtime_checkable
class Segment(Protocol):
    """Capabilities shared by every path segment."""

    def evaluate(self, t: float) -> Point: ...

    def bounds(self) -> Rect: ...

    def length(self) -> float: ...

    def from_point(self) -> Point: ...

    def to_point(self) -> Point: ...


BezierSegment = Union[QuadraticBezier, CubicBezier]


def create_bezier_curve(control_points) -> BezierSegment:
    """
    Create a Bézier segment, picking the type from the number of control points.

    Args:
        control_points: 3 or 4 points, given as Point instances, (x, y)
            pairs or an (n, 2) array

    Returns:
        QuadraticBezier for 3 points, CubicBezier for 4

    Raises:
        ValueError: For any other count or shape
    """
    if len(control_points) and all(isinstance(p, Point) for p in control_points):
        control_points = [(p.x, p.y) for p in control_points]
    P = np.array(control_points, dtype=float)
    if P.ndim != 2 or P.shape[1] != 2:
        raise ValueError(f"control_points must be (n, 2), got shape {P.shape}")

    if P.shape[0] == QUAD_CONTROL_POINT_COUNT:
        return QuadraticBezier.from_array(P)
    if P.shape[0] == CUBIC_CONTROL_POINT_COUNT:
        return CubicBezier.from_array(P)
    raise ValueError(
        f"Expected {QUAD_CONTROL_POINT_COUNT} or {CUBIC_CONTROL_POINT_COUNT} control points, got {P.shape[0]}"
    )


def segments_bounds(segments: Iterable[Segment]) -> Rect:
    """
    Bounding box enclosing all segments of a path.

    Raises:
        ValueError: If there are no segments
    """
    result = None
    for segment in segments:
        box = segment.bounds()
        result = box if result is None else result.union(box)
    if result is None:
        raise ValueError("segments_bounds() needs at least one segment")
    return result


def segments_length(segments: Iterable[Segment]) -> float:
    """Sum of the approximate lengths of all segments."""
    return sum(segment.length() for segment in segments)


def bezier_curve_evaluate(t: float, control_points: Sequence) -> Point:
    """
    Point on a Bézier segment (functional interface).

    Args:
        t: Curve parameter
        control_points: 3 or 4 control points
    """
    return create_bezier_curve(control_points).evaluate(t)


def bezier_curve_bounds(control_points: Sequence) -> Rect:
    """Bounding box of a Bézier segment (functional interface)."""
    return create_bezier_curve(control_points).bounds()


def bezier_curve_length(control_points: Sequence) -> float:
    """Approximate length of a Bézier segment (functional interface)."""
    return create_bezier_curve(control_points).length()
