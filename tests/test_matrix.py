import pytest

from numlab.matrix import (
    dot,
    lower_triangular,
    matmul,
    matvec,
    norm2,
    scale,
    transpose,
    zeros,
)


def _sample(m, n, f):
    return [[i + j + i * j * f for j in range(n)] for i in range(m)]


def _identity(n):
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def test_zeros_shape_and_content():
    m = zeros(4, 3)
    assert len(m) == 4
    assert all(row == [0.0, 0.0, 0.0] for row in m)
    m[0][0] = 5.0
    assert m[1][0] == 0.0


def test_zeros_rejects_negative():
    with pytest.raises(ValueError):
        zeros(-1, 2)


def test_lower_triangular_row_lengths():
    tri = lower_triangular(3)
    assert [len(row) for row in tri] == [1, 2, 3]


def test_dot_is_symmetric():
    v = [i * 0.0001 for i in range(3)]
    w = [i * 0.3 for i in range(3)]
    assert dot(v, w) == dot(w, v)


def test_dot_with_unit_vector_selects_component():
    v = [1.5, -2.5, 7.25]
    assert dot(v, [0.0, 1.0, 0.0]) == -2.5


def test_dot_length_mismatch():
    with pytest.raises(ValueError):
        dot([1.0, 2.0], [1.0])


def test_norm2_pythagorean():
    assert norm2([3.0, 4.0]) == 5.0


def test_norm2_matches_dot():
    v = [0.3, -1.2, 2.0]
    assert norm2(v) ** 2 == pytest.approx(dot(v, v))


def test_scale_identity_and_linearity():
    v = [0.0, 0.0001, 0.0002]
    assert scale(v, 1.0) == v
    assert scale(scale(v, 4.0), 0.25) == pytest.approx(v)


def test_transpose_twice_is_identity():
    a = _sample(4, 3, 0.4)
    t = transpose(a)
    assert len(t) == 3 and all(len(row) == 4 for row in t)
    assert transpose(t) == a


def test_transpose_rejects_ragged():
    with pytest.raises(ValueError):
        transpose([[1.0, 2.0], [3.0]])


def test_matvec_identity():
    v = [1.0, -2.0, 3.5]
    assert matvec(_identity(3), v) == v


def test_matvec_rows_are_dot_products():
    a = _sample(4, 3, 0.4)
    v = [0.0, 0.0001, 0.0002]
    result = matvec(a, v)
    assert len(result) == 4
    assert result[2] == dot(a[2], v)


def test_matmul_identity():
    a = _sample(4, 3, 0.4)
    assert matmul(a, _identity(3)) == a
    assert matmul(_identity(4), a) == a


def test_matmul_transpose_rule():
    a = _sample(4, 3, 0.4)
    b = _sample(3, 4, 1.0)
    assert transpose(matmul(a, b)) == matmul(transpose(b), transpose(a))


def test_matmul_dimension_mismatch():
    with pytest.raises(ValueError):
        matmul(_sample(4, 3, 0.4), _sample(4, 3, 0.4))