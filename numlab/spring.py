"""A mass hanging from a damped spring under gravity and a decaying wind."""

from __future__ import annotations

import math

GRAVITY = 9.8
MASS = 2.0
WIND = 20.0
STIFFNESS = 0.5
REST_LENGTH = 200.0
DAMPING = 0.002
_WIND_DECAY = 20.0


def force(t: float, x: float, y: float) -> tuple[float, float]:
    """Return the total force (gravity + wind + spring) on the body at (x, y)."""
    length = math.sqrt(x * x + y * y)
    if length == 0.0:
        raise ValueError("the body cannot sit on the spring's anchor")
    wind = WIND * math.exp(-t / _WIND_DECAY)
    spring_x = -STIFFNESS * (length - REST_LENGTH) * x / length
    spring_y = -STIFFNESS * (length - REST_LENGTH) * y / length
    return wind + spring_x, MASS * GRAVITY + spring_y


def evolve(
    t: float, h: float, x: float, y: float, xp: float, yp: float
) -> tuple[float, float, float]:
    """Advance one damped Verlet step; return (t + h, next x, next y)."""
    fx, fy = force(t, x, y)
    xn = x + (1 - DAMPING) * (x - xp) + h * h * fx / MASS
    yn = y + (1 - DAMPING) * (y - yp) + h * h * fy / MASS
    return t + h, xn, yn


def simulate(x0: float, y0: float, t_final: float, n: int) -> list[tuple[float, float]]:
    """Return the body's positions at times h, 2h, ..., n h with h = t_final / n."""
    if n <= 0:
        raise ValueError("number of steps must be positive")
    h = t_final / n
    t = 0.0
    previous = current = (x0, y0)
    positions: list[tuple[float, float]] = []
    for _ in range(n):
        t, xn, yn = evolve(t, h, *current, *previous)
        previous, current = current, (xn, yn)
        positions.append(current)
    return positions