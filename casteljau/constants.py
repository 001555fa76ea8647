"""
Package-wide defaults.
"""

# Tolerances used when comparing control polygons (see BezierCurve.allclose)
DEFAULT_RTOL = 1e-9
DEFAULT_ATOL = 1e-12
