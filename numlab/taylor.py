"""Low-order approximations of the tangent around the origin."""

from __future__ import annotations


def tan1(x: float) -> float:
    """Taylor polynomial of tan with three non-zero terms about 0."""
    return x * (1.0 + (x * x / 3.0) * (1.0 + 2.0 * x * x / 5.0))


def tan2(x: float) -> float:
    """Ratio of two-term Taylor polynomials of sin and cos about 0."""
    return (x * (1.0 - x * x / 6.0)) / (1 - x * x / 2.0)