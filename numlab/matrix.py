"""Dense vectors and matrices stored as plain lists of floats."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vector = list[float]
Matrix = list[list[float]]


def _columns(a: Sequence[Sequence[float]]) -> int:
    """Return the column count of a rectangular matrix, rejecting ragged rows."""
    widths = {len(row) for row in a}
    if len(widths) > 1:
        raise ValueError("matrix rows have different lengths")
    return widths.pop() if widths else 0


def zeros(m: int, n: int) -> Matrix:
    """Return an m x n matrix filled with zeros."""
    if m < 0 or n < 0:
        raise ValueError("matrix dimensions must be non-negative")
    return [[0.0] * n for _ in range(m)]


def lower_triangular(n: int) -> Matrix:
    """Return an n x n lower-triangular matrix as rows of length 1, 2, ..., n."""
    if n < 0:
        raise ValueError("matrix dimension must be non-negative")
    return [[0.0] * (i + 1) for i in range(n)]


def dot(v: Sequence[float], w: Sequence[float]) -> float:
    """Return the scalar product of two vectors of equal length."""
    return sum((x * y for x, y in zip(v, w, strict=True)), 0.0)


def norm2(v: Sequence[float]) -> float:
    """Return the Euclidean norm of a vector."""
    return math.sqrt(dot(v, v))


def scale(v: Sequence[float], s: float) -> Vector:
    """Return the vector v multiplied by the scalar s."""
    return [s * x for x in v]


def transpose(a: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of a rectangular matrix."""
    _columns(a)
    return [list(column) for column in zip(*a)]


def matvec(a: Sequence[Sequence[float]], v: Sequence[float]) -> Vector:
    """Return the product of matrix a and vector v."""
    return [dot(row, v) for row in a]


def matmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the matrix product a @ b."""
    inner = _columns(a)
    if a and inner != len(b):
        raise ValueError("inner matrix dimensions do not agree")
    columns = transpose(b)
    return [[dot(row, column) for column in columns] for row in a]