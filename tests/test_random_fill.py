import random

import pytest

from transforma.random_fill import HIGH, LOW, fill_random, main


def test_values_in_range_and_count():
    values = fill_random(200, random.Random(3))
    assert len(values) == 200
    assert all(LOW <= v <= HIGH for v in values)


def test_default_count():
    assert len(fill_random(rng=random.Random(0))) == 5


def test_generator_is_consumed_in_order():
    whole = fill_random(10, random.Random(42))
    rng = random.Random(42)
    first = fill_random(5, rng)
    second = fill_random(5, rng)
    assert len(whole) == 10
    assert first + second == whole


def test_zero_count():
    assert fill_random(0, random.Random(1)) == []


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        fill_random(-1)


def test_main_prints_address_then_values_twice(capsys):
    assert main(["--seed", "7"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Dirección: 0x")
    numbers = [int(line) for line in lines[1:]]
    assert len(numbers) == 10
    assert numbers[:5] == numbers[5:]
    assert numbers[:5] == fill_random(5, random.Random(7))


def test_main_count_option(capsys):
    main(["--count", "3", "--seed", "1"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1 + 2 * 3


def test_main_rejects_negative_count():
    with pytest.raises(SystemExit):
        main(["--count", "-2"])