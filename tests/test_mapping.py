import pytest

from transforma.mapping import Mapper


def _unit_mapper(width=400, height=300):
    mapper = Mapper()
    mapper.set_window(0, 0, width, height)
    mapper.set_viewport(0, 0, width, height)
    return mapper


@pytest.mark.parametrize("point", [(0, 0), (10, 20), (-5, 7), (123, -45)])
def test_one_to_one_mirrors_y_around_top(point):
    mapper = _unit_mapper()
    x, y = point
    assert mapper.map_point(x, y, 50, 150) == (x + 50, 150 - y)


def test_origin_maps_to_offset():
    mapper = _unit_mapper()
    assert mapper.map_point(0, 0, 210, 50) == (210, 50)


def test_viewport_twice_the_window_doubles_distances():
    mapper = Mapper()
    mapper.set_window(0, 0, 100, 100)
    mapper.set_viewport(0, 0, 200, 200)
    x1, y1 = mapper.map_point(10, 10, 0, 0)
    x2, y2 = mapper.map_point(20, 20, 0, 0)
    assert x2 - x1 == 2 * (20 - 10)
    assert y1 - y2 == 2 * (20 - 10)


def test_viewport_offset_shifts_x_and_y_opposite():
    base = _unit_mapper()
    shifted = Mapper()
    shifted.set_window(0, 0, 400, 300)
    shifted.set_viewport(10, 10, 410, 310)
    bx, by = base.map_point(30, 40, 0, 0)
    sx, sy = shifted.map_point(30, 40, 0, 0)
    assert sx == bx + 10
    assert sy == by - 10


def test_world_coordinates_truncated():
    mapper = _unit_mapper()
    assert mapper.map_point(10.9, 20.9, 0, 0) == mapper.map_point(10, 20, 0, 0)


def test_result_truncated_toward_zero():
    mapper = Mapper()
    mapper.set_window(0, 0, 3, 3)
    mapper.set_viewport(0, 0, 1, 1)
    x, _ = mapper.map_point(2, 0, 0, 0)
    assert x == 0


def test_degenerate_window_raises():
    mapper = Mapper()
    mapper.set_window(0, 0, 0, 100)
    mapper.set_viewport(0, 0, 100, 100)
    with pytest.raises(ValueError):
        mapper.map_point(1, 1, 0, 0)


def test_unset_window_raises():
    mapper = Mapper()
    mapper.set_viewport(0, 0, 100, 100)
    with pytest.raises(ValueError):
        mapper.map_point(1, 1, 0, 0)


def test_unset_viewport_raises():
    mapper = Mapper()
    mapper.set_window(0, 0, 100, 100)
    with pytest.raises(ValueError):
        mapper.map_point(1, 1, 0, 0)