"""Least-squares solutions of overdetermined linear systems."""

from __future__ import annotations

import math
from collections.abc import Sequence

from numlab.linsys import gauss
from numlab.matrix import matmul, matvec, norm2, transpose


def least_squares(a: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """Return x minimising ||b - a x|| by solving the normal equations."""
    if len(a) != len(b):
        raise ValueError("matrix and right-hand side have different row counts")
    at = transpose(a)
    return gauss(matmul(at, a), matvec(at, b))


def residual_norm(
    a: Sequence[Sequence[float]], b: Sequence[float], x: Sequence[float]
) -> float:
    """Return the Euclidean norm of the residual b - a x."""
    ax = matvec(a, x)
    if len(ax) != len(b):
        raise ValueError("matrix and right-hand side have different row counts")
    return norm2([bi - wi for bi, wi in zip(b, ax)])


def fit(t: Sequence[float], c: Sequence[float]) -> tuple[float, float]:
    """Fit c = a * t * exp(b * t) to the measurements and return (a, b).

    The model is linearised as log(c) - log(t) = log(a) + b t.
    """
    if len(t) != len(c):
        raise ValueError("t and c must have the same length")
    rows = [[1.0, ti] for ti in t]
    rhs = [math.log(ci) - math.log(ti) for ti, ci in zip(t, c)]
    log_a, b = least_squares(rows, rhs)
    return math.exp(log_a), b