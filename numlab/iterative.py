"""Iterative solvers for linear systems: Gauss-Seidel and successive over-relaxation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from numlab.matrix import matvec, norm2
from numlab.roots import ConvergenceError

_MAX_ITERATIONS = 10_000


@dataclass(frozen=True)
class IterativeResult:
    """An approximate solution and the number of iterations it took."""

    x: list[float]
    iterations: int


def _check_square(a: Sequence[Sequence[float]]) -> int:
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("matrix must be square")
    return n


def is_diagonally_dominant(a: Sequence[Sequence[float]]) -> bool:
    """Return whether a square matrix is strictly diagonally dominant by rows."""
    _check_square(a)
    return all(
        abs(row[i]) > sum(abs(v) for j, v in enumerate(row) if j != i)
        for i, row in enumerate(a)
    )


def _residual_norm(a: Sequence[Sequence[float]], b: Sequence[float], x: list[float]) -> float:
    return norm2([bi - axi for bi, axi in zip(b, matvec(a, x))])


def _relax(
    a: Sequence[Sequence[float]],
    b: Sequence[float],
    x0: Sequence[float],
    tol: float,
    w: float,
) -> IterativeResult:
    n = _check_square(a)
    if len(b) != n or len(x0) != n:
        raise ValueError("vector lengths do not match the matrix")
    if tol <= 0:
        raise ValueError("tolerance must be positive")
    if not is_diagonally_dominant(a):
        raise ValueError("matrix is not strictly diagonally dominant")
    x = [float(v) for v in x0]
    iterations = 0
    while _residual_norm(a, b, x) > tol:
        if iterations >= _MAX_ITERATIONS:
            raise ConvergenceError(f"no convergence in {_MAX_ITERATIONS} iterations")
        for i, row in enumerate(a):
            s = sum(row[j] * x[j] for j in range(n) if j != i)
            updated = (b[i] - s) / row[i]
            x[i] = (1 - w) * x[i] + w * updated
        iterations += 1
    return IterativeResult(x, iterations)


def gauss_seidel(
    a: Sequence[Sequence[float]], b: Sequence[float], x0: Sequence[float], tol: float
) -> IterativeResult:
    """Solve a x = b by Gauss-Seidel until the residual norm is at most tol."""
    return _relax(a, b, x0, tol, 1.0)


def sor(
    a: Sequence[Sequence[float]],
    b: Sequence[float],
    x0: Sequence[float],
    tol: float,
    w: float,
) -> IterativeResult:
    """Solve a x = b by Gauss-Seidel with relaxation factor w."""
    if not 0.0 < w < 2.0:
        raise ValueError("relaxation factor must lie strictly between 0 and 2")
    return _relax(a, b, x0, tol, w)