"""
Bézier path segment geometry

This package evaluates quadratic and cubic Bézier path segments and computes
their axis-aligned bounding boxes and approximate arc lengths. Both curve
types expose the same capability set (evaluate, bounds, length, from_point,
to_point) so a path can hold mixed segment kinds.
"""

from .geometry import Point, Rect, Line
from .bezier import (
    QuadraticBezier,
    CubicBezier,
    quadratic_bezier_polynomial,
    quadratic_bezier_extrema,
    cubic_bezier_polynomial,
    cubic_bezier_extrema,
    polyline_length
)
from .segment import (
    Segment,
    BezierSegment,
    create_bezier_curve,
    segments_bounds,
    segments_length,
    bezier_curve_evaluate,
    bezier_curve_bounds,
    bezier_curve_length
)
from . import constants

__all__ = [
    # Geometry primitives
    'Point',
    'Rect',
    'Line',

    # Curve types
    'QuadraticBezier',
    'CubicBezier',
    'Segment',
    'BezierSegment',

    # Per-axis helpers
    'quadratic_bezier_polynomial',
    'quadratic_bezier_extrema',
    'cubic_bezier_polynomial',
    'cubic_bezier_extrema',
    'polyline_length',

    # Factory and path helpers
    'create_bezier_curve',
    'segments_bounds',
    'segments_length',

    # Functional interface
    'bezier_curve_evaluate',
    'bezier_curve_bounds',
    'bezier_curve_length',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
