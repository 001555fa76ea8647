"""
Triangular table of de Casteljau intermediate results.

For an N-point polygon the table has N columns; column c holds N - c points
and column 0 is the polygon itself. All N(N+1)/2 slots live in one flat,
pre-sized list and slot (c, i) sits at ``offset(c) + i``.
"""

from typing import Generic, List, Optional, Sequence

from .de_casteljau import check_polygon
from .point import P, lerp


class TriangularScheme(Generic[P]):
    """
    Flat storage for the columns of a de Casteljau reduction.

    Slots are filled in a strict order: bottom to top within a column, then
    left to right across columns. ``append`` follows that order; ``read`` and
    ``write`` address slots that are already filled.
    """

    def __init__(self, points: Sequence[P]):
        pts = check_polygon(points)
        self.size = len(pts)
        self.capacity = self.size * (self.size + 1) // 2
        self._slots: List[Optional[P]] = [None] * self.capacity
        self._slots[:self.size] = pts
        self._filled = self.size

    def __len__(self) -> int:
        return self._filled

    def __repr__(self) -> str:
        return f"TriangularScheme(size={self.size}, filled={self._filled}/{self.capacity})"

    def offset(self, col: int) -> int:
        """Flat offset of slot 0 of column ``col``."""
        return (2 * self.size - col + 1) * col // 2

    def _index(self, col: int, idx: int) -> int:
        if not 0 <= col < self.size or not 0 <= idx < self.size - col:
            raise IndexError(f"slot ({col}, {idx}) outside a {self.size}-column scheme")
        return self.offset(col) + idx

    def append(self, point: P) -> None:
        """Store ``point`` in the next free slot."""
        if self._filled >= self.capacity:
            raise IndexError("triangular scheme is full")
        self._slots[self._filled] = point
        self._filled += 1

    def read(self, col: int, idx: int) -> P:
        return self._slots[self._index(col, idx)]

    def write(self, col: int, idx: int, point: P) -> None:
        self._slots[self._index(col, idx)] = point

    def column(self, col: int) -> List[P]:
        """Current values of column ``col``, bottom to top."""
        start = self.offset(col)
        return self._slots[start:start + self.size - col]

    def fill_column(self, col: int, t: float) -> None:
        """Append column ``col`` computed from column ``col - 1`` at parameter t."""
        for i in range(self.size - col):
            self.append(lerp(self.read(col - 1, i), self.read(col - 1, i + 1), t))

    def recompute_column(self, col: int, t: float) -> None:
        """Rewrite column ``col`` in place from the current column ``col - 1``."""
        for i in range(self.size - col):
            self.write(col, i, lerp(self.read(col - 1, i), self.read(col - 1, i + 1), t))

    def last(self) -> P:
        """The single point of the final column."""
        return self.read(self.size - 1, 0)
