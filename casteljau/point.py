"""
Affine point contract shared by every de Casteljau routine.

A control point can be any value for which ``p + t * (q - p)`` is valid:
numpy arrays, plain numbers, or a user vector class with ``+``, ``-`` and a
left scalar ``*``. The contract is structural; nothing has to inherit from it.
"""

from typing import Any, Protocol, TypeVar


class AffinePoint(Protocol):
    """Structural type for values living in an affine space."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __rmul__(self, scalar: float) -> Any: ...


P = TypeVar("P", bound=AffinePoint)


def lerp(p: P, q: P, t: float) -> P:
    """Linear interpolation ``p + t * (q - p)``."""
    return p + t * (q - p)
