import pytest

from transforma.dino_game import (
    CACTUS,
    CACTUS_ORIGINS,
    DEFAULT_COLOR,
    DINOSAUR_ORIGIN,
    LOST_MESSAGE,
    WON_MESSAGE,
    DinoGame,
)


@pytest.fixture
def game():
    return DinoGame(800, 700)


def test_dinosaur_has_all_points_with_unit_weight(game):
    assert len(game.dinosaur) == 72
    assert all(w == 1 for _, _, w in game.dinosaur)


def test_dinosaur_coordinates_are_whole_numbers(game):
    assert all(x == int(x) and y == int(y) for x, y, _ in game.dinosaur)


@pytest.mark.parametrize(
    "key, dx, dy", [("D", 5, 0), ("A", -5, 0), ("W", 0, 5), ("S", 0, -5)]
)
def test_movement_keys_shift_every_point(game, key, dx, dy):
    before = list(game.dinosaur)
    assert game.handle_key(key) is None
    for (bx, by, _), (ax, ay, _) in zip(before, game.dinosaur):
        assert (ax, ay) == (bx + dx, by + dy)


def test_lowercase_key_is_accepted(game):
    before = list(game.dinosaur)
    game.handle_key("d")
    assert [p[0] for p in game.dinosaur] == [p[0] + 5 for p in before]


def test_translate_round_trip(game):
    before = list(game.dinosaur)
    game.translate(7, -3)
    game.translate(-7, 3)
    assert game.dinosaur == before


def test_reset_restores_start(game):
    before = list(game.dinosaur)
    game.handle_key("D")
    game.handle_key("+")
    assert game.dinosaur != before
    game.reset()
    assert game.dinosaur == before


@pytest.mark.parametrize("key, message", [("P", LOST_MESSAGE), ("G", WON_MESSAGE)])
def test_end_keys_report_and_reset(game, key, message):
    start = list(game.dinosaur)
    game.handle_key("W")
    assert game.handle_key(key) == message
    assert game.dinosaur == start


def test_unknown_key_changes_nothing(game):
    before = list(game.dinosaur)
    assert game.handle_key("Z") is None
    assert game.dinosaur == before


def test_growing_keeps_points_on_the_axis_fixed(game):
    on_axis = [i for i, (x, _, _) in enumerate(game.dinosaur) if x == 0]
    assert on_axis
    game.handle_key("+")
    assert all(game.dinosaur[i][0] == 0 for i in on_axis)


def test_full_turn_leaves_dinosaur_unchanged(game):
    before = list(game.dinosaur)
    game.rotate(360)
    assert game.dinosaur == before


def test_cactus_is_half_turn_about_pivot(game):
    assert len(game.cactus) == len(CACTUS)
    for (x, y), (cx, cy, w) in zip(CACTUS, game.cactus):
        assert (cx, cy, w) == (2 - x, 2 - y, 1)


def test_cactus_tick_cycle(game):
    start = list(game.cactus)
    game.cactus_tick()
    assert game.cactus != start
    game.cactus_tick()
    grown = list(game.cactus)
    game.cactus_tick()
    assert game.cactus == grown
    game.cactus_tick()
    assert game.cactus == start


def test_dinosaur_segments_follow_points(game):
    segments = game.dinosaur_segments()
    assert len(segments) == len(game.dinosaur) - 1
    left, top = DINOSAUR_ORIGIN
    for (start, _), (x, y, _) in zip(segments, game.dinosaur):
        assert start == (int(x) + left, top - int(y))


def test_cactus_segments_repeat_at_each_origin(game):
    segments = game.cactus_segments()
    per_cactus = len(CACTUS) - 1
    assert len(segments) == per_cactus * len(CACTUS_ORIGINS)
    (l0, t0), (l1, t1) = CACTUS_ORIGINS[0], CACTUS_ORIGINS[1]
    for first, second in zip(segments[:per_cactus], segments[per_cactus : 2 * per_cactus]):
        assert second[0] == (first[0][0] + l1 - l0, first[0][1] + t1 - t0)


def test_set_color(game):
    assert game.color == DEFAULT_COLOR
    game.set_color("red")
    assert game.color == "red"
    game.set_color(None)
    assert game.color == DEFAULT_COLOR


@pytest.mark.parametrize("width, height", [(0, 100), (100, 0), (-5, 10)])
def test_bad_size_rejected(width, height):
    with pytest.raises(ValueError):
        DinoGame(width, height)