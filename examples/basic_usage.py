#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Bézier segment basic usage examples

Run after installing the package with the examples extra:
    pip install -e .[examples]
    python examples/basic_usage.py
"""

import numpy as np
import plotly.graph_objects as go

from svg_bezier import (
    CubicBezier,
    Point,
    QuadraticBezier,
    create_bezier_curve,
    segments_bounds,
    segments_length,
)


def _curve_trace(curve, name, color):
    points = [curve.evaluate(t) for t in np.linspace(0, 1, 200)]
    return go.Scatter(
        x=[p.x for p in points],
        y=[p.y for p in points],
        mode='lines',
        name=name,
        line=dict(color=color, width=3)
    )


def _control_trace(curve, color):
    P = curve.control_points()
    return go.Scatter(
        x=P[:, 0],
        y=P[:, 1],
        mode='markers+lines',
        name='control points',
        line=dict(color=color, dash='dash'),
        marker=dict(color=color, size=10),
        showlegend=False
    )


def _add_box(fig, box, color):
    fig.add_shape(
        type='rect',
        x0=box.min.x, y0=box.min.y, x1=box.max.x, y1=box.max.y,
        line=dict(color=color, dash='dot')
    )


def bounds_example():
    """Quadratic and cubic curves with their bounding boxes"""
    print("=== Bounding box example ===")

    quad = QuadraticBezier(Point(0, 0), Point(1, 2), Point(2, 0))
    cubic = CubicBezier(Point(3, 0), Point(4, 3), Point(6, -3), Point(7, 0))

    fig = go.Figure()
    for curve, name, color in [(quad, 'quadratic', 'blue'), (cubic, 'cubic', 'red')]:
        box = curve.bounds()
        print(f"{name}: bounds=({box.min.x:.3f}, {box.min.y:.3f})-({box.max.x:.3f}, {box.max.y:.3f}), "
              f"length={curve.length():.4f}")
        fig.add_trace(_curve_trace(curve, name, color))
        fig.add_trace(_control_trace(curve, color))
        _add_box(fig, box, color)

    fig.update_layout(
        title="Bézier segments and bounding boxes",
        xaxis_title="X",
        yaxis_title="Y",
        showlegend=True,
        width=800,
        height=500
    )

    fig.show()


def path_example():
    """Mixed-degree path built from raw control point lists"""
    print("\n=== Path example ===")

    path = [
        create_bezier_curve([(0, 0), (1, 3), (2, 0)]),
        create_bezier_curve([(2, 0), (3, -3), (5, 3), (6, 0)]),
        create_bezier_curve([(6, 0), (7, -2), (8, 0)]),
    ]
    box = segments_bounds(path)
    print(f"segments: {len(path)}")
    print(f"total length: {segments_length(path):.4f}")
    print(f"bounds: ({box.min.x:.3f}, {box.min.y:.3f})-({box.max.x:.3f}, {box.max.y:.3f})")

    fig = go.Figure()
    colors = ['blue', 'green', 'purple']
    for i, (segment, color) in enumerate(zip(path, colors)):
        fig.add_trace(_curve_trace(segment, f'segment {i} (degree {segment.degree})', color))
    _add_box(fig, box, 'gray')

    fig.update_layout(
        title="Path bounding box",
        xaxis_title="X",
        yaxis_title="Y",
        showlegend=True,
        width=800,
        height=500
    )

    fig.show()


if __name__ == "__main__":
    bounds_example()
    path_example()
