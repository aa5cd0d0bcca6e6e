"""Adaptive trapezoid integration and normal-distribution probabilities."""

from __future__ import annotations

import math
from collections.abc import Callable

Function = Callable[[float], float]


def _adapt(f: Function, a: float, b: float, fa: float, fb: float, tol: float) -> float:
    m = (a + b) / 2
    fm = f(m)
    whole = (b - a) * (fa + fb) / 2
    left = (m - a) * (fm + fa) / 2
    right = (b - m) * (fm + fb) / 2
    delta = whole - (left + right)
    if abs(delta) > 3 * tol:
        return _adapt(f, a, m, fa, fm, tol / 2) + _adapt(f, m, b, fm, fb, tol / 2)
    return left + right - delta / 3


def adaptive_trapezoid(f: Function, a: float, b: float, tol: float) -> float:
    """Integrate f over [a, b] with the adaptive trapezoid rule to tolerance tol."""
    if tol <= 0:
        raise ValueError("tolerance must be positive")
    return _adapt(f, a, b, f(a), f(b), tol)


def _gaussian(x: float) -> float:
    return math.exp(-x * x / 2)


def probability(sigma: float) -> float:
    """Return P(|X| <= sigma) for a standard normal X, to about 8 digits."""
    return 1.0 / math.sqrt(2 * math.pi) * adaptive_trapezoid(_gaussian, -sigma, sigma, 1e-8 / 2)