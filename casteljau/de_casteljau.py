"""
De Casteljau evaluation, blossoming and single-index subdivision.

Every routine reduces a private copy of the control polygon, so the caller's
sequence is never modified. Points only need to support ``p + t * (q - p)``
(see ``casteljau.point``).
"""

from typing import List, Sequence

from .errors import InvalidArgument
from .point import P, lerp


def check_polygon(points: Sequence[P]) -> List[P]:
    """Copy a control polygon into a fresh list, rejecting empty input."""
    pts = list(points)
    if not pts:
        raise InvalidArgument("control polygon must contain at least one point")
    return pts


def _reduce(pts: List[P], params: Sequence[float]) -> P:
    # Round r shrinks the working polygon by one point, interpolating at params[r-1]
    n = len(pts)
    for iteration in range(1, n):
        t = params[iteration - 1]
        for i in range(n - iteration):
            pts[i] = lerp(pts[i], pts[i + 1], t)
    return pts[0]


def evaluate(points: Sequence[P], t: float) -> P:
    """
    Evaluate the Bezier curve of a control polygon at parameter t.

    Args:
        points: Control polygon, N >= 1 points
        t: Curve parameter; values outside [0, 1] extrapolate

    Returns:
        The curve point. With a single control point, that point itself.
    """
    pts = check_polygon(points)
    return _reduce(pts, [t] * (len(pts) - 1))


def blossom(points: Sequence[P], params: Sequence[float]) -> P:
    """
    Evaluate the blossom (polar form) of a control polygon.

    Same reduction as ``evaluate`` but round r uses ``params[r-1]``.
    The result does not depend on the order of ``params``.

    Args:
        points: Control polygon, N >= 1 points
        params: Exactly N - 1 parameters

    Returns:
        The blossom value.
    """
    pts = check_polygon(points)
    params = list(params)
    if len(params) != len(pts) - 1:
        raise InvalidArgument(
            f"blossom of {len(pts)} points needs {len(pts) - 1} parameters, got {len(params)}"
        )
    return _reduce(pts, params)


def subdivide_at(points: Sequence[P], idx: int, t0: float, t1: float) -> P:
    """
    Compute the idx-th control point of the polygon mapping [0, 1] onto
    the [t0, t1] part of the original curve.

    Equivalent to ``blossom(points, [t0] * (N - 1 - idx) + [t1] * idx)``.
    """
    pts = check_polygon(points)
    n = len(pts)
    if not 0 <= idx < n:
        raise InvalidArgument(f"subdivision index {idx} outside [0, {n})")
    return _reduce(pts, [t0] * (n - 1 - idx) + [t1] * idx)
