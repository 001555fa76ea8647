"""
De Casteljau evaluation and reparameterization of Bézier control polygons

This package evaluates Bézier curves given by a control polygon of generic
affine points (anything supporting ``p + t * (q - p)``), computes blossoms,
and reparameterizes a control polygon onto an arbitrary sub-range [t0, t1]
of its curve without changing shape or degree.
"""

from .errors import InvalidArgument
from .point import AffinePoint, lerp
from .de_casteljau import evaluate, blossom, subdivide_at
from .triangular import TriangularScheme
from .reparameterize import subdivide_all
from .matrices import (
    subdivision_matrix,
    split_matrices,
    segment_matrices_equal_params
)
from .bezier import BezierCurve
from . import constants

__all__ = [
    # Errors
    'InvalidArgument',

    # Point contract
    'AffinePoint',
    'lerp',

    # De Casteljau functions
    'evaluate',
    'blossom',
    'subdivide_at',
    'subdivide_all',
    'TriangularScheme',

    # Matrix functions
    'subdivision_matrix',
    'split_matrices',
    'segment_matrices_equal_params',

    # Core classes
    'BezierCurve',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
