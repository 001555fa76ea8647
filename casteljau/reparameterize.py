"""
Reparameterization of a whole control polygon onto a sub-range [t0, t1].

Calling ``subdivide_at`` for every index repeats the same t0 rounds N times.
Here the columns produced with t0 are kept in a ``TriangularScheme`` and, for
each successive output index, only the tail columns are recomputed with t1
from the current values of the column to their left. The scheme is the only
scratch buffer and holds N(N+1)/2 points.
"""

import logging
from typing import List, Sequence

from .point import P
from .triangular import TriangularScheme

logger = logging.getLogger(__name__)


def subdivide_all(points: Sequence[P], t0: float, t1: float) -> List[P]:
    """
    Control polygon of the same curve with [0, 1] mapped onto [t0, t1].

    Output index k equals ``subdivide_at(points, k, t0, t1)``. t1 < t0 is
    allowed and reverses the orientation; t0 == t1 collapses every output
    point onto the curve point at t0.

    Args:
        points: Control polygon, N >= 1 points
        t0: Original parameter mapped to 0
        t1: Original parameter mapped to 1

    Returns:
        A new list of N control points.
    """
    scheme = TriangularScheme(points)
    n = scheme.size
    logger.debug("Subdividing %d-point polygon onto [%s, %s]", n, t0, t1)

    # Output 0 is the plain t0 reduction
    for col in range(1, n):
        scheme.fill_column(col, t0)
    new_points = [scheme.last()]

    # Output k needs its last k rounds at t1; columns left of n - k keep their t0 values
    for k in range(1, n):
        for col in range(n - k, n):
            scheme.recompute_column(col, t1)
        new_points.append(scheme.last())

    return new_points
