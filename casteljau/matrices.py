"""
Subdivision as a linear operator on control points.

Reparameterization is linear in the control points, so for a fixed degree and
range it is a (N+1, N+1) matrix M with ``M @ P == subdivide_all(P, t0, t1)``.
The matrix is obtained by reparameterizing the standard basis vectors, which
are valid affine points themselves.
"""

import numpy as np

from .errors import InvalidArgument
from .reparameterize import subdivide_all


def subdivision_matrix(N, t0, t1):
    """
    Compute the reparameterization matrix for a degree-N curve.

    Args:
        N: Degree of the Bézier curve
        t0, t1: Original parameters mapped to 0 and 1

    Returns:
        M: (N+1, N+1) matrix
    """
    if N < 0:
        raise InvalidArgument("degree must be >= 0")
    basis = list(np.eye(N+1))
    return np.array(subdivide_all(basis, t0, t1))


def split_matrices(N, tau):
    """Compute subdivision matrices S_left and S_right for a split at tau."""
    return subdivision_matrix(N, 0.0, tau), subdivision_matrix(N, tau, 1.0)


def segment_matrices_equal_params(N, n_seg):
    """
    Generate segment matrices for equal-parameter splitting.
    Returns list of (N+1, N+1) matrices, one per segment.
    """
    if N < 0:
        raise InvalidArgument("degree must be >= 0")
    if n_seg < 1:
        raise InvalidArgument("n_seg must be >= 1")
    if n_seg == 1:
        return [np.eye(N+1)]

    return [subdivision_matrix(N, k / n_seg, (k + 1) / n_seg) for k in range(n_seg)]
