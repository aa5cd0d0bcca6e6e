"""Linear systems solved by LU factorization with partial pivoting."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class LUDecomposition:
    """Packed LU factors and the row permutation applied while pivoting.

    The strict lower part of ``lu`` holds L (whose unit diagonal is not
    stored); the upper part including the diagonal holds U.
    """

    lu: list[list[float]]
    perm: list[int]


def _square_size(a: Sequence[Sequence[float]]) -> int:
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    return n


def lu_factor(a: Sequence[Sequence[float]]) -> LUDecomposition:
    """Factor a square matrix as P A = L U without modifying the input."""
    n = _square_size(a)
    lu = [[float(x) for x in row] for row in a]
    perm = list(range(n))
    for j in range(n - 1):
        pivot = max(range(j, n), key=lambda k: abs(lu[k][j]))
        if lu[pivot][j] == 0.0:
            raise ValueError("matrix is singular")
        if pivot != j:
            perm[j], perm[pivot] = perm[pivot], perm[j]
            lu[j], lu[pivot] = lu[pivot], lu[j]
        pivot_row = lu[j]
        for row in lu[j + 1:]:
            factor = row[j] / pivot_row[j]
            row[j + 1:] = [x - p * factor for x, p in zip(row[j + 1:], pivot_row[j + 1:])]
            row[j] = factor
    if n and lu[-1][-1] == 0.0:
        raise ValueError("matrix is singular")
    return LUDecomposition(lu, perm)


def lu_solve(lu: LUDecomposition, b: Sequence[float]) -> list[float]:
    """Solve the system using a previous factorization and the right-hand side b."""
    n = len(lu.perm)
    if len(b) != n:
        raise ValueError("right-hand side has the wrong length")
    y: list[float] = []
    for row, p in zip(lu.lu, lu.perm):
        y.append(b[p] - sum((l * v for l, v in zip(row, y)), 0.0))
    x = [0.0] * n
    for i in reversed(range(n)):
        row = lu.lu[i]
        s = sum((u * v for u, v in zip(row[i + 1:], x[i + 1:])), 0.0)
        x[i] = (y[i] - s) / row[i]
    return x


def gauss(a: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """Solve a x = b by Gaussian elimination with partial pivoting."""
    return lu_solve(lu_factor(a), b)