# numlab

A small collection of classic numerical analysis routines in plain Python,
using only the standard library. Vectors are sequences of floats and
matrices are lists of rows.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `numlab.matrix` | `zeros`, `lower_triangular`, `dot`, `norm2`, `scale`, `transpose`, `matvec`, `matmul` (the product `a @ b` on lists of rows) |
| `numlab.taylor` | `tan1`, `tan2`: Taylor-based approximations of the tangent near zero |
| `numlab.roots` | `secant`, `inverse_quadratic`; both return a `RootResult` (`root`, `iterations`) or raise `ConvergenceError` after 50 iterations |
| `numlab.linsys` | `lu_factor` (partial pivoting, returns an `LUDecomposition` with `lu` and `perm`), `lu_solve`, `gauss`; singular matrices raise `ValueError` |
| `numlab.interpolation` | `regular` and `chebyshev` sampling, each returning `(xs, ys)`; `lagrange` evaluation |
| `numlab.lstsq` | `least_squares` via the normal equations, `residual_norm`, and `fit`, which fits `c = a·t·e^(b·t)` and returns `(a, b)` |
| `numlab.integration` | `derivative` (central difference refined by Richardson extrapolation, `order >= 2`), composite `trapezoid` and `simpson` |
| `numlab.adaptive` | `adaptive_trapezoid` and `probability(sigma)`, the chance that a standard normal variable lies within `±sigma` |
| `numlab.ode` | fixed-step fourth-order `runge_kutta` and embedded Cash–Karp `runge_kutta_adaptive` (initial step `1e-7`); both return an `OdeResult` (`value`, `evaluations`, `steps`) |
| `numlab.spring` | a mass on a damped spring under gravity and a decaying wind, integrated with Verlet steps: `force`, `evolve`, `simulate` |
| `numlab.iterative` | `is_diagonally_dominant`, `gauss_seidel`, `sor`; both solvers return an `IterativeResult` (`x`, `iterations`), require a strictly diagonally dominant matrix and raise `ConvergenceError` after 10,000 iterations |
| `numlab.optimize` | `golden_section` and `successive_parabolic` minimisation, returning a `MinimumResult` (`x`, `iterations`) |

Invalid arguments such as a non-positive tolerance, a non-square matrix or
mismatched lengths raise `ValueError`.

## Examples

Solve a linear system by Gaussian elimination:

```python
from numlab.linsys import gauss

a = [[1, 2, -1], [2, 1, -2], [-3, 1, 1]]
b = [3, 3, -6]
print(gauss(a, b))  # approximately [3.0, 1.0, 2.0]
```

Find a root of `x^3 + x - 7`:

```python
from numlab.roots import secant

result = secant(lambda x: x**3 + x - 7, 1.0, 2.0)
print(result.root, result.iterations)
```

Integrate with Simpson's rule:

```python
import math
from numlab.integration import simpson

print(simpson(lambda x: x / math.sqrt(x * x + 9), 0.0, 4.0, 16))  # close to 2.0
```

Integrate an ODE with step-size control:

```python
from numlab.ode import runge_kutta_adaptive

result = runge_kutta_adaptive(lambda t, y: t * y + t**3, 0.0, 2.4, -1.0, 1e-12)
print(result.value, result.steps)
```

Minimise a function with the golden-section search:

```python
import math
from numlab.optimize import golden_section

result = golden_section(lambda x: x * x + math.sin(x), -1.5, 0.0, 1e-7)
print(result.x, result.iterations)
```

## What it does not do

numlab is a library only: it has no command-line program and prints
nothing. Every routine works on plain Python lists, one value at a time,
and is meant for clarity rather than speed on large problems.