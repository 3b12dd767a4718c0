"""Small dense matrices and homogeneous 2D transformations.

Figures are lists of points written as row vectors ``(x, y, w)``; a
transformation is a 3x3 matrix applied on the right.  Transformations
round every partial product to the nearest integer before summing, so
figures stay on whole-pixel coordinates.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from numbers import Real


class Matrix:
    """A rows x cols matrix of floats."""

    def __init__(self, rows: int = 4, cols: int = 4, value: float = 0.0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self._data = [[float(value)] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equal-length rows."""
        data = [[float(v) for v in row] for row in rows]
        if not data:
            raise ValueError("a matrix needs at least one row")
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("all rows must have the same length")
        matrix = cls(0, 0)
        matrix._data = data
        return matrix

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """Return the size x size identity matrix."""
        matrix = cls(size, size)
        for i in range(size):
            matrix._data[i][i] = 1.0
        return matrix

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def cols(self) -> int:
        return len(self._data[0]) if self._data else 0

    def __getitem__(self, index: tuple[int, int]) -> float:
        r, c = index
        return self._data[r][c]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        r, c = index
        self._data[r][c] = float(value)

    def _check_product(self, other: Matrix) -> None:
        if self.cols != other.rows:
            raise ValueError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )

    def __mul__(self, other: Matrix | float) -> Matrix:
        """Matrix product, or element-wise product with a scalar."""
        if isinstance(other, Matrix):
            self._check_product(other)
            columns = list(zip(*other._data))
            return Matrix.from_rows(
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._data
            )
        if isinstance(other, Real):
            return Matrix.from_rows([v * other for v in row] for row in self._data)
        return NotImplemented

    def __rmul__(self, other: float) -> Matrix:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def rounded_product(self, other: Matrix) -> Matrix:
        """Matrix product where each partial product is rounded half up first."""
        self._check_product(other)
        columns = list(zip(*other._data))
        return Matrix.from_rows(
            [sum(math.floor(a * b + 0.5) for a, b in zip(row, col)) for col in columns]
            for row in self._data
        )

    def to_rows(self) -> list[list[float]]:
        """Return a copy of the contents as nested lists."""
        return [list(row) for row in self._data]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"


def radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180.0


def translation_matrix(tx: int, ty: int) -> Matrix:
    m = Matrix.identity(3)
    m[2, 0] = int(tx)
    m[2, 1] = int(ty)
    return m


def scaling_matrix(sx: float, sy: float) -> Matrix:
    m = Matrix.identity(3)
    m[0, 0] = sx
    m[1, 1] = sy
    return m


def fixed_point_scaling_matrix(sx: float, sy: float, px: int, py: int) -> Matrix:
    m = scaling_matrix(sx, sy)
    m[2, 0] = int(px) * (1 - sx)
    m[2, 1] = int(py) * (1 - sy)
    return m


def rotation_matrix(angle: float) -> Matrix:
    rads = radians(angle)
    c, s = math.cos(rads), math.sin(rads)
    m = Matrix.identity(3)
    m[0, 0] = c
    m[0, 1] = s
    m[1, 0] = -s
    m[1, 1] = c
    return m


def pivot_rotation_matrix(angle: float, px: float, py: float) -> Matrix:
    rads = radians(angle)
    c, s = math.cos(rads), math.sin(rads)
    m = rotation_matrix(angle)
    m[2, 0] = px * (1 - c) + py * s
    m[2, 1] = py * (1 - c) - px * s
    return m


Point = Sequence[float]


def _apply(points: Iterable[Point], transform: Matrix) -> list[tuple[float, ...]]:
    pts = [tuple(p) for p in points]
    if not pts:
        return []
    for p in pts:
        if len(p) not in (2, 3):
            raise ValueError("points must have two or three coordinates")
    homogeneous = Matrix.from_rows(p if len(p) == 3 else (*p, 1.0) for p in pts)
    result = homogeneous.rounded_product(transform).to_rows()
    return [tuple(row[: len(p)]) for row, p in zip(result, pts)]


def translate(points: Iterable[Point], tx: int, ty: int) -> list[tuple[float, ...]]:
    """Shift points by whole-number offsets."""
    return _apply(points, translation_matrix(tx, ty))


def scale(points: Iterable[Point], sx: float, sy: float) -> list[tuple[float, ...]]:
    """Scale points about the origin."""
    return _apply(points, scaling_matrix(sx, sy))


def scale_about(
    points: Iterable[Point], sx: float, sy: float, px: int, py: int
) -> list[tuple[float, ...]]:
    """Scale points about the fixed point ``(px, py)``."""
    return _apply(points, fixed_point_scaling_matrix(sx, sy, px, py))


def rotate(points: Iterable[Point], angle: float) -> list[tuple[float, ...]]:
    """Rotate points by ``angle`` degrees about the origin."""
    return _apply(points, rotation_matrix(angle))


def rotate_about(
    points: Iterable[Point], angle: float, px: float, py: float
) -> list[tuple[float, ...]]:
    """Rotate points by ``angle`` degrees about the pivot ``(px, py)``."""
    return _apply(points, pivot_rotation_matrix(angle, px, py))