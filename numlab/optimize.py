"""One-dimensional minimisation by golden-section search and parabolic interpolation."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from numlab.roots import ConvergenceError

Function = Callable[[float], float]

_GOLDEN = (math.sqrt(5.0) - 1.0) / 2.0
_MIN_PARABOLIC_ITERATIONS = 6
_MAX_PARABOLIC_ITERATIONS = 50
_FLAT_DENOMINATOR = 1e-10


@dataclass(frozen=True)
class MinimumResult:
    """The location of a minimum and the number of iterations it took."""

    x: float
    iterations: int


def golden_section(f: Function, a: float, b: float, tol: float) -> MinimumResult:
    """Minimise f on [a, b] by golden-section search, one evaluation per iteration."""
    if tol <= 0:
        raise ValueError("tolerance must be positive")
    x1 = a + (1 - _GOLDEN) * (b - a)
    x2 = a + _GOLDEN * (b - a)
    fx1, fx2 = f(x1), f(x2)
    iterations = 0
    while abs(x2 - x1) / 2 > tol:
        iterations += 1
        if fx1 < fx2:
            b = x2
            x2, fx2 = x1, fx1
            x1 = a + (1 - _GOLDEN) * (b - a)
            fx1 = f(x1)
        else:
            a = x1
            x1, fx1 = x2, fx2
            x2 = a + _GOLDEN * (b - a)
            fx2 = f(x2)
    return MinimumResult((x1 + x2) / 2.0, iterations)


def successive_parabolic(
    f: Function, r: float, s: float, t: float, tol: float
) -> MinimumResult:
    """Minimise f by successive parabolic interpolation from three estimates.

    At least six iterations are run; ConvergenceError is raised if the last
    two function values have not come within tol after fifty.
    """
    if tol <= 0:
        raise ValueError("tolerance must be positive")
    fs = f(s)
    fr = f(r)
    ft = f(t)
    iterations = 0
    while abs(fs - ft) > tol or iterations < _MIN_PARABOLIC_ITERATIONS:
        iterations += 1
        if iterations > _MAX_PARABOLIC_ITERATIONS:
            raise ConvergenceError(
                f"parabolic interpolation did not converge in "
                f"{_MAX_PARABOLIC_ITERATIONS} iterations"
            )
        den = 2.0 * ((s - r) * (ft - fs) - (fs - fr) * (t - s))
        if abs(den) < _FLAT_DENOMINATOR:
            x = (r + s + t) / 3.0
        else:
            x = (r + s) / 2.0 - ((fs - fr) * (t - r) * (t - s)) / den
        r, fr = s, fs
        s, fs = t, ft
        t, ft = x, f(x)
    return MinimumResult((s + t) / 2.0, iterations)