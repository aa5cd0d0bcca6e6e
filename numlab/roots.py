"""Root finding by the secant method and inverse quadratic interpolation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

_MAX_ITERATIONS = 50
_RELATIVE_TOL = 0.5e-8
_FLAT_TOL = 1e-15


class ConvergenceError(ArithmeticError):
    """Raised when an iterative method does not converge."""


@dataclass(frozen=True)
class RootResult:
    """A root approximation and the number of iterations it took."""

    root: float
    iterations: int


def _converged(new: float, old: float) -> bool:
    return new != 0.0 and abs(new - old) / abs(new) < _RELATIVE_TOL


def secant(f: Callable[[float], float], x0: float, x1: float) -> RootResult:
    """Find a root of f with the secant method starting from x0 and x1."""
    fx0, fx1 = f(x0), f(x1)
    for iteration in range(_MAX_ITERATIONS):
        if abs(fx1 - fx0) < _FLAT_TOL:
            x2 = (x0 + x1) / 2.0
        else:
            x2 = x1 - fx1 * (x1 - x0) / (fx1 - fx0)
        if _converged(x2, x1):
            return RootResult(x2, iteration)
        x0, fx0 = x1, fx1
        x1, fx1 = x2, f(x2)
    raise ConvergenceError(f"secant method did not converge in {_MAX_ITERATIONS} iterations")


def inverse_quadratic(
    f: Callable[[float], float], x0: float, x1: float, x2: float
) -> RootResult:
    """Find a root of f by inverse quadratic interpolation from three guesses."""
    fx0, fx1, fx2 = f(x0), f(x1), f(x2)
    for iteration in range(_MAX_ITERATIONS):
        det_a = -(fx1 - fx0) * (fx2 - fx0) * (fx2 - fx1)
        if det_a == 0.0:
            raise ConvergenceError("interpolation points have equal function values")
        det_ac = (
            fx0 * fx0 * (fx1 * x2 - x1 * fx2)
            - fx0 * (fx1 * fx1 * x2 - x1 * fx2 * fx2)
            + x0 * (fx1 * fx1 * fx2 - fx1 * fx2 * fx2)
        )
        x3 = det_ac / det_a
        if _converged(x3, x2):
            return RootResult(x3, iteration)
        x0, fx0 = x1, fx1
        x1, fx1 = x2, fx2
        x2, fx2 = x3, f(x3)
    raise ConvergenceError(
        f"inverse quadratic interpolation did not converge in {_MAX_ITERATIONS} iterations"
    )