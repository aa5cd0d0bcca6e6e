import itertools
import math

import pytest

from numlab.optimize import golden_section, successive_parabolic
from numlab.roots import ConvergenceError


def f(x):
    return x * x + math.sin(x)


def df(x):
    return 2 * x + math.cos(x)


def g(x):
    return x * (x * (x * (x * x * x - 11) + 17) - 7) + 1


def test_golden_section_finds_stationary_point():
    result = golden_section(f, -1.5, 0.0, 1e-7)
    assert -1.5 <= result.x <= 0.0
    assert abs(df(result.x)) < 1e-5
    assert result.iterations > 0


def test_golden_section_beats_a_grid_search():
    result = golden_section(g, 0.2, 1.0, 1e-7)
    grid = [0.2 + 0.8 * i / 1000 for i in range(1001)]
    assert 0.2 <= result.x <= 1.0
    assert g(result.x) <= min(g(x) for x in grid) + 1e-9


def test_golden_section_tighter_tolerance_needs_more_iterations():
    loose = golden_section(f, -1.5, 0.0, 1e-3)
    tight = golden_section(f, -1.5, 0.0, 1e-7)
    assert tight.iterations > loose.iterations


def test_golden_section_rejects_non_positive_tolerance():
    with pytest.raises(ValueError):
        golden_section(f, -1.5, 0.0, 0.0)


def test_parabolic_finds_stationary_point():
    result = successive_parabolic(f, -0.8, -0.4, 0.0, 1e-7)
    assert abs(df(result.x)) < 1e-3
    assert result.iterations >= 6


def test_parabolic_agrees_with_golden_section():
    golden = golden_section(f, -1.5, 0.0, 1e-7)
    parabolic = successive_parabolic(f, -0.8, -0.4, 0.0, 1e-7)
    assert parabolic.x == pytest.approx(golden.x, abs=1e-3)


def test_parabolic_runs_at_least_six_iterations_on_flat_function():
    result = successive_parabolic(lambda x: 1.0, 0.0, 1.0, 2.0, 1e-7)
    assert result.iterations == 6


def test_parabolic_raises_when_values_never_settle():
    calls = itertools.count()
    with pytest.raises(ConvergenceError):
        successive_parabolic(lambda x: float(next(calls)), 0.0, 1.0, 2.0, 1e-7)


def test_parabolic_rejects_non_positive_tolerance():
    with pytest.raises(ValueError):
        successive_parabolic(f, -0.8, -0.4, 0.0, -1.0)