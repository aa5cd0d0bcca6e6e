"""Sampling of functions and Lagrange polynomial interpolation."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence


def regular(
    f: Callable[[float], float], a: float, b: float, n: int
) -> tuple[list[float], list[float]]:
    """Return n evenly spaced samples of f on [a, b], endpoints included."""
    if n < 2:
        raise ValueError("at least two samples are needed")
    step = (b - a) / (n - 1)
    xs = [a]
    for _ in range(n - 2):
        xs.append(xs[-1] + step)
    xs.append(b)
    return xs, [f(x) for x in xs]


def chebyshev(
    f: Callable[[float], float], a: float, b: float, n: int
) -> tuple[list[float], list[float]]:
    """Return the n Chebyshev samples of f on [a, b]."""
    if n < 1:
        raise ValueError("at least one sample is needed")
    xs = [
        (b - a) * math.cos((2 * i + 1) * math.pi / (2 * n)) / 2.0 + (a + b) / 2
        for i in range(n)
    ]
    return xs, [f(x) for x in xs]


def lagrange(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """Evaluate at x the Lagrange polynomial through the points (xs, ys)."""
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    total = 0.0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        basis = 1.0
        for j, xj in enumerate(xs):
            if j != i:
                basis = basis * (x - xj) / (xi - xj)
        total += yi * basis
    return total