import copy

import pytest

from numlab.linsys import LUDecomposition, gauss, lu_factor, lu_solve

A3 = [[1, 2, -1], [2, 1, -2], [-3, 1, 1]]
B3 = [3, 3, -6]

A6 = [
    [3, -1.0, 0, 0, 0, 0.5],
    [-1.0, 3, -1.0, 0, 0.5, 0],
    [0, -1.0, 3, -1.0, 0, 0],
    [0, 0, -1.0, 3, -1.0, 0],
    [0, 0.5, 0, -1.0, 3, -1.0],
    [0.5, 0, 0, 0, -1.0, 3],
]
B6 = [2.5, 1.5, 1.0, 1.0, 1.5, 2.5]


def _apply(a, x):
    return [sum(aij * xj for aij, xj in zip(row, x)) for row in a]


@pytest.mark.parametrize("a, b", [(A3, B3), (A6, B6)])
def test_gauss_residual_is_small(a, b):
    x = gauss(a, b)
    assert _apply(a, x) == pytest.approx(b, abs=1e-12)


def test_gauss_does_not_modify_input():
    a = copy.deepcopy(A3)
    gauss(a, B3)
    assert a == A3


def test_lu_reconstructs_permuted_matrix():
    dec = lu_factor(A3)
    n = len(A3)
    lower = [[dec.lu[i][j] if j < i else (1.0 if i == j else 0.0) for j in range(n)] for i in range(n)]
    upper = [[dec.lu[i][j] if j >= i else 0.0 for j in range(n)] for i in range(n)]
    product = [[sum(lower[i][k] * upper[k][j] for k in range(n)) for j in range(n)] for i in range(n)]
    permuted = [A3[p] for p in dec.perm]
    for got, want in zip(product, permuted):
        assert got == pytest.approx(want, abs=1e-12)


def test_perm_is_a_permutation():
    dec = lu_factor(A6)
    assert sorted(dec.perm) == list(range(6))


def test_lu_solve_reuses_factorization():
    dec = lu_factor(A3)
    assert isinstance(dec, LUDecomposition)
    for b in (B3, [1.0, 0.0, 0.0]):
        assert _apply(A3, lu_solve(dec, b)) == pytest.approx(b, abs=1e-12)


def test_singular_matrix_rejected():
    with pytest.raises(ValueError):
        gauss([[1.0, 2.0], [2.0, 4.0]], [1.0, 2.0])


def test_non_square_rejected():
    with pytest.raises(ValueError):
        lu_factor([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


def test_wrong_rhs_length():
    with pytest.raises(ValueError):
        lu_solve(lu_factor(A3), [1.0, 2.0])