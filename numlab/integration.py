"""Numerical differentiation and composite integration rules."""

from __future__ import annotations

from collections.abc import Callable, Iterator

Function = Callable[[float], float]


def derivative(f: Function, x: float, h: float, order: int = 2) -> float:
    """Return f'(x) by central differences refined with Richardson extrapolation.

    ``order`` 2 is the plain central difference; each higher order combines
    the estimates with steps h and h/2 of the previous order.
    """
    if order < 2:
        raise ValueError("order must be at least 2")
    if order == 2:
        return (f(x + h) - f(x - h)) / (2 * h)
    weight = 2.0 ** order
    coarse = derivative(f, x, h, order - 1)
    fine = derivative(f, x, h / 2, order - 1)
    return (weight * fine - coarse) / (weight - 1)


def _nodes(a: float, h: float, n: int) -> Iterator[float]:
    """Yield the n + 1 nodes a, a + h, ... obtained by repeated addition."""
    x = a
    yield x
    for _ in range(n):
        x += h
        yield x


def _step(a: float, b: float, n: int) -> float:
    if n <= 0:
        raise ValueError("number of steps must be positive")
    return (b - a) / n


def trapezoid(f: Function, a: float, b: float, n: int) -> float:
    """Integrate f over [a, b] with the composite trapezoid rule in n steps."""
    h = _step(a, b, n)
    values = [f(x) for x in _nodes(a, h, n)]
    return sum(((h / 2) * (left + right) for left, right in zip(values, values[1:])), 0.0)


def simpson(f: Function, a: float, b: float, n: int) -> float:
    """Integrate f over [a, b] with the composite Simpson rule in n steps."""
    h = _step(a, b, n)
    nodes = list(_nodes(a, h, n))
    values = [f(x) for x in nodes]
    total = 0.0
    for x, left, right in zip(nodes, values, values[1:]):
        total += (h / 6) * (left + 4 * f(x + h / 2) + right)
    return total