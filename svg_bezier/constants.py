"""
Numeric defaults for Bézier segment measurements.
"""

# Parameter step used by the polyline length approximation
QUAD_LENGTH_APPROXIMATION_INTERVAL = 0.01  # 2nd degree curves
CUBIC_LENGTH_APPROXIMATION_INTERVAL = 0.005  # 3rd degree curves, finer since the shape can double back

# Number of control points per curve type
QUAD_CONTROL_POINT_COUNT = 3
CUBIC_CONTROL_POINT_COUNT = 4
