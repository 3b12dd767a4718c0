import math

import pytest

from transforma.matrix import (
    Matrix,
    fixed_point_scaling_matrix,
    pivot_rotation_matrix,
    radians,
    rotate,
    rotate_about,
    rotation_matrix,
    scale,
    scale_about,
    scaling_matrix,
    translate,
    translation_matrix,
)

TRIANGLE = [(10, 10, 1), (30, 10, 1), (20, 30, 1), (10, 10, 1)]


def test_constructor_fills_value():
    m = Matrix(2, 3, 7)
    assert m.to_rows() == [[7.0, 7.0, 7.0], [7.0, 7.0, 7.0]]
    assert (m.rows, m.cols) == (2, 3)


def test_negative_dimensions_raise():
    with pytest.raises(ValueError):
        Matrix(-1, 2)


def test_from_rows_ragged_raises():
    with pytest.raises(ValueError):
        Matrix.from_rows([[1, 2], [3]])


def test_from_rows_empty_raises():
    with pytest.raises(ValueError):
        Matrix.from_rows([])


def test_getitem_setitem_round_trip():
    m = Matrix(3, 3)
    m[1, 2] = 4.5
    assert m[1, 2] == 4.5
    assert m.to_rows()[1][2] == 4.5


def test_identity_is_neutral():
    a = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert a * Matrix.identity(3) == a
    assert Matrix.identity(2) * a == a


def test_product_shape_mismatch_raises():
    a = Matrix(2, 3)
    with pytest.raises(ValueError):
        a * Matrix(2, 2)
    with pytest.raises(ValueError):
        a.rounded_product(Matrix(2, 2))


def test_scalar_product_both_sides():
    a = Matrix.from_rows([[1, -2], [3, 4]])
    assert (a * 2).to_rows() == [[2.0, -4.0], [6.0, 8.0]]
    assert 2 * a == a * 2


def test_rounded_product_rounds_each_term():
    a = Matrix.from_rows([[0.4, 0.4]])
    assert a.rounded_product(Matrix.identity(2)).to_rows() == [[0.0, 0.0]]
    assert (a * Matrix.identity(2)).to_rows() == [[0.4, 0.4]]


def test_to_rows_is_a_copy():
    a = Matrix.identity(2)
    rows = a.to_rows()
    rows[0][0] = 99
    assert a[0, 0] == 1.0


def test_radians_of_half_turn():
    assert radians(180) == pytest.approx(math.pi)


def test_translate_shifts_every_point():
    moved = translate(TRIANGLE, 5, -3)
    assert moved == [(x + 5, y - 3, w) for x, y, w in TRIANGLE]


def test_translate_truncates_offsets():
    assert translate(TRIANGLE, 2.7, 0) == translate(TRIANGLE, 2, 0)


def test_two_coordinate_points_keep_shape():
    assert translate([(1, 2)], 3, 4) == [(4.0, 6.0)]


def test_bad_point_length_raises():
    with pytest.raises(ValueError):
        translate([(1, 2, 3, 4)], 1, 1)


def test_empty_figure():
    assert rotate([], 45) == []


def test_scale_then_unscale_round_trip():
    assert scale(scale(TRIANGLE, 2, 2), 0.5, 0.5) == [tuple(map(float, p)) for p in TRIANGLE]


def test_rotate_full_turn_in_quarters_round_trip():
    pts = TRIANGLE
    for _ in range(4):
        pts = rotate(pts, 90)
    assert pts == [tuple(map(float, p)) for p in TRIANGLE]


def test_rotate_half_turn_negates():
    assert rotate(TRIANGLE, 180) == [(-x, -y, w) for x, y, w in TRIANGLE]


def test_rotate_about_keeps_pivot_fixed():
    result = rotate_about([(20, 30, 1), (10, 10, 1)], 45, 20, 30)
    assert result[0] == (20.0, 30.0, 1.0)


def test_rotate_about_preserves_distance_to_pivot():
    (x, y, _), = rotate_about([(30, 10, 1)], 90, 10, 10)
    assert math.hypot(x - 10, y - 10) == pytest.approx(20)


def test_scale_about_keeps_fixed_point():
    result = scale_about([(10, 10, 1), (30, 10, 1)], 3, 3, 10, 10)
    assert result[0] == (10.0, 10.0, 1.0)
    assert result[1][0] - 10 == 3 * (30 - 10)