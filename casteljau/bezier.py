"""
numpy-backed Bézier curve built on the generic de Casteljau routines.
"""

import numpy as np
from scipy.special import comb
from typing import List, Sequence, Tuple, Union

from . import constants
from .de_casteljau import blossom, evaluate, subdivide_at
from .errors import InvalidArgument
from .matrices import segment_matrices_equal_params
from .reparameterize import subdivide_all


class BezierCurve:
    """
    Bézier curve over an (N+1, dim) array of control points.

    Point queries go through the generic de Casteljau code; ``evaluate`` is the
    vectorized Bernstein form for sampling many parameters at once.
    """

    def __init__(self, control_points: Union[Sequence, np.ndarray]):
        P = np.array(control_points, dtype=float)
        if P.ndim == 1:
            P = P.reshape(-1, 1)
        if P.ndim != 2 or P.shape[0] == 0:
            raise InvalidArgument("control_points must be (N+1, dim) with N >= 0")
        self.control_points = P
        self.degree = P.shape[0] - 1  # = N
        self.dimension = P.shape[1]

    def __len__(self) -> int:
        return self.degree + 1

    def __repr__(self) -> str:
        return f"BezierCurve(degree={self.degree}, dimension={self.dimension})"

    def get_control_points(self) -> np.ndarray:
        return self.control_points.copy()

    def get_degree(self) -> int:
        return self.degree

    def get_dimension(self) -> int:
        return self.dimension

    def point(self, tau: float) -> np.ndarray:
        """Evaluate the curve at a single parameter with de Casteljau."""
        return np.array(evaluate(self.control_points, tau))

    def evaluate(self, t: Union[float, np.ndarray]) -> np.ndarray:
        """
        Evaluate the curve in Bernstein form.

        Args:
            t: Parameter or array of parameters; values outside [0, 1] extrapolate

        Returns:
            Curve points, shape (len(t), dim)
        """
        basis = self.evaluate_basis(t)
        return basis @ self.control_points

    def evaluate_basis(self, t: Union[float, np.ndarray]) -> np.ndarray:
        """
        Bernstein basis values B_{i,N}(t) = C(N,i) * t^i * (1-t)^(N-i).

        Returns:
            Basis values, shape (len(t), N+1)
        """
        t = np.atleast_1d(np.asarray(t, dtype=float))
        N = self.degree
        basis_values = np.zeros((len(t), N + 1))
        for i in range(N + 1):
            basis_values[:, i] = comb(N, i) * (t ** i) * ((1 - t) ** (N - i))
        return basis_values

    def blossom(self, params: Sequence[float]) -> np.ndarray:
        return np.array(blossom(self.control_points, params))

    def subdivide_at(self, idx: int, t0: float, t1: float) -> np.ndarray:
        return np.array(subdivide_at(self.control_points, idx, t0, t1))

    def subdivide(self, t0: float, t1: float) -> 'BezierCurve':
        """Same-degree curve whose [0, 1] traces the [t0, t1] part of this one."""
        return BezierCurve(np.array(subdivide_all(self.control_points, t0, t1)))

    def split(self, tau: float) -> Tuple['BezierCurve', 'BezierCurve']:
        """Split at tau into the [0, tau] and [tau, 1] pieces."""
        return self.subdivide(0.0, tau), self.subdivide(tau, 1.0)

    def segments(self, n_seg: int) -> List['BezierCurve']:
        """Split into n_seg pieces of equal parameter length."""
        mats = segment_matrices_equal_params(self.degree, n_seg)
        return [BezierCurve(M @ self.control_points) for M in mats]

    def reversed(self) -> 'BezierCurve':
        """The same curve traversed from end to start."""
        return self.subdivide(1.0, 0.0)

    def allclose(self, other: 'BezierCurve', rtol: float = constants.DEFAULT_RTOL,
                 atol: float = constants.DEFAULT_ATOL) -> bool:
        """Compare control polygons of two curves of the same shape."""
        if self.control_points.shape != other.control_points.shape:
            return False
        return bool(np.allclose(self.control_points, other.control_points, rtol=rtol, atol=atol))
