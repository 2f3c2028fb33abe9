# -*- coding: utf-8 -*-
import numpy as np
import pytest

from linmath3d.math import Mat, Mat3, Vec, SingularMatrixError
from linmath3d.math.mat4 import X1, Y1, T1, X4, Y4, Z4, T4


def _random_mat(rng) -> Mat:
    return Mat(rng.uniform(-5.0, 5.0, size=(4, 4)))


def test_identity_times_identity_is_exact():
    I = Mat.identity()
    assert I.multiply(I) == I
    assert I.to_np().tolist() == np.eye(4).tolist()


def test_multiply_identity_neutral():
    a = _random_mat(np.random.default_rng(1))
    assert (Mat.identity() @ a).almost_equal(a)
    assert (a @ Mat.identity()).almost_equal(a)


def test_multiply_associative_not_commutative():
    rng = np.random.default_rng(7)
    a, b, c = _random_mat(rng), _random_mat(rng), _random_mat(rng)
    assert ((a @ b) @ c).almost_equal(a @ (b @ c), eps=1e-9)
    assert not (a @ b).almost_equal(b @ a)


def test_multiply_matches_numpy():
    rng = np.random.default_rng(3)
    a, b = _random_mat(rng), _random_mat(rng)
    assert np.allclose(a.multiply(b).to_np(), a.to_np() @ b.to_np())


def test_column_major_layout():
    values = list(range(16))
    m = Mat.from_column_major(values)
    assert m.column_major() == tuple(float(v) for v in values)
    assert m[X1] == 0 and m[Y1] == 1 and m[T1] == 3
    assert m[X4] == 12 and m[T4] == 15
    # первый столбец – X1, Y1, Z1, T1
    assert m[1, 0] == 1
    assert m.array()[0] == [0.0, 4.0, 8.0, 12.0]


def test_create_matrix_from_vec():
    m = Mat.create_matrix_from_vec(Vec(1, 2, 3, 9), Vec(4, 5, 6), Vec(7, 8, 9))
    assert m.array() == [
        [1, 4, 7, 0],
        [2, 5, 8, 0],
        [3, 6, 9, 0],
        [0, 0, 0, 0],
    ]


def test_translate_identity():
    m = Mat.identity().translate(Vec(1, 2, 3, 1))
    assert m[X4] == 1 and m[Y4] == 2 and m[Z4] == 3 and m[T4] == 1
    p = m.to_np() @ np.array([0, 0, 0, 1.0])
    assert np.allclose(p, [1, 2, 3, 1])


def test_translate_uses_own_basis_and_w():
    scale = Mat(np.diag([2.0, 3.0, 4.0, 1.0])).translate(Vec(1, 1, 1, 1))
    assert [scale[X4], scale[Y4], scale[Z4]] == [2, 3, 4]
    # перенос с w = 2 удваивает уже существующий столбец переноса
    moved = scale.translate(Vec(0, 0, 0, 2))
    assert [moved[X4], moved[Y4], moved[Z4]] == [4, 6, 8]
    # нижняя строка T1..T3 не трогается
    assert moved.array()[3] == [0, 0, 0, 1]


def test_mat3_extraction():
    m = Mat(np.arange(16, dtype=float).reshape(4, 4))
    assert m.mat3().to_np().tolist() == [[0, 1, 2], [4, 5, 6], [8, 9, 10]]


def test_normal_matrix_of_rotation_is_rotation():
    c, s = np.cos(0.7), np.sin(0.7)
    rot = np.identity(4)
    rot[:2, :2] = [[c, -s], [s, c]]
    n = Mat(rot).calculate_normal_matrix()
    assert n.almost_equal(Mat(rot).mat3())


def test_normal_matrix_non_uniform_scale():
    m = Mat(np.diag([2.0, 4.0, 0.5, 1.0])).translate(Vec(10, 20, 30, 1))
    n = m.calculate_normal_matrix()
    assert n.almost_equal(Mat3(np.diag([0.5, 0.25, 2.0])))


def test_normal_matrix_singular_raises():
    m = Mat(np.diag([1.0, 0.0, 1.0, 1.0]))
    with pytest.raises(SingularMatrixError):
        m.calculate_normal_matrix()


def test_mat_is_immutable():
    m = Mat.identity()
    with pytest.raises(ValueError):
        m.m[0, 0] = 5.0
    m.translate(Vec(1, 1, 1, 1))
    assert m == Mat.identity()


def test_mat_str_rows():
    s = str(Mat.identity().translate(Vec(1, 2, 3, 1)))
    lines = s.splitlines()
    assert len(lines) == 4
    assert lines[0] == "| 1.000000   0.000000   0.000000   1.000000   |"
    assert lines[3] == "| 0.000000   0.000000   0.000000   1.000000   |"
