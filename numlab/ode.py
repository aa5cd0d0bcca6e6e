"""Runge-Kutta integration of scalar ordinary differential equations."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass

Derivative = Callable[[float, float], float]

_INITIAL_STEP = 1e-7
_MAX_GROWTH = 1.2
_SAFETY = 0.9

_NODES = (0.0, 1.0 / 5.0, 3.0 / 10.0, 3.0 / 5.0, 1.0, 7.0 / 8.0)
_COUPLING = (
    (),
    (1.0 / 5.0,),
    (3.0 / 40.0, 9.0 / 40.0),
    (3.0 / 10.0, -9.0 / 10.0, 6.0 / 5.0),
    (-11.0 / 54.0, 5.0 / 2.0, -70.0 / 27.0, 35.0 / 27.0),
    (1631.0 / 55296.0, 175.0 / 512.0, 575.0 / 13824.0, 44275.0 / 110592.0, 253.0 / 4096.0),
)
_FIFTH_ORDER = (37.0 / 378.0, 0.0, 250.0 / 621.0, 125.0 / 594.0, 0.0, 512.0 / 1771.0)
_FOURTH_ORDER = (
    2825.0 / 27648.0,
    0.0,
    18575.0 / 48384.0,
    13525.0 / 55296.0,
    277.0 / 14336.0,
    1.0 / 4.0,
)


@dataclass(frozen=True)
class OdeResult:
    """The value y(t1) with the work spent computing it."""

    value: float
    evaluations: int
    steps: int


def runge_kutta(f: Derivative, t0: float, t1: float, h: float, y0: float) -> OdeResult:
    """Integrate y' = f(t, y) from t0 to t1 with classic fourth-order Runge-Kutta."""
    if h <= 0:
        raise ValueError("step must be positive")
    t, y = t0, y0
    steps = 0
    while t < t1 - h / 2:
        k1 = h * f(t, y)
        k2 = h * f(t + h / 2, y + k1 / 2)
        k3 = h * f(t + h / 2, y + k2 / 2)
        k4 = h * f(t + h, y + k3)
        y = y + (k1 + 2 * k2 + 2 * k3 + k4) / 6
        t = t + h
        steps += 1
    return OdeResult(y, 4 * steps, steps)


def _combine(y: float, weights: Sequence[float], ks: Sequence[float]) -> float:
    for weight, k in zip(weights, ks):
        y += weight * k
    return y


def _cash_karp(f: Derivative, t: float, y: float, h: float) -> tuple[float, float]:
    """Return the fifth- and fourth-order estimates of y(t + h)."""
    ks: list[float] = []
    for node, row in zip(_NODES, _COUPLING):
        ks.append(h * f(t + node * h, _combine(y, row, ks)))
    return _combine(y, _FIFTH_ORDER, ks), _combine(y, _FOURTH_ORDER, ks)


def runge_kutta_adaptive(
    f: Derivative, t0: float, t1: float, y0: float, tol: float
) -> OdeResult:
    """Integrate y' = f(t, y) from t0 to t1 with embedded Runge-Kutta step control.

    Every attempted step, accepted or rejected, is counted in ``steps``.
    """
    if tol <= 0:
        raise ValueError("tolerance must be positive")
    t, y, h = t0, y0, _INITIAL_STEP
    evaluations = 0
    while t < t1:
        while True:
            high, low = _cash_karp(f, t, y, h)
            evaluations += len(_NODES)
            delta = abs(high - low)
            factor = math.inf if delta == 0.0 else (tol / delta) ** (1.0 / 5.0)
            if factor >= 1.0:
                t += h
                h = min(_MAX_GROWTH, factor) * h
                y = high
                break
            h = _SAFETY * factor * h
        if t + h > t1:
            h = t1 - t
    return OdeResult(y, evaluations, evaluations // len(_NODES))