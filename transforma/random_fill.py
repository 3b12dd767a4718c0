"""Fill an array with random two-digit numbers and print it."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence

LOW = 10
HIGH = 99


def fill_random(count: int = 5, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random integers between 10 and 99 inclusive."""
    if count < 0:
        raise ValueError("count must be non-negative")
    rng = rng if rng is not None else random.Random()
    return [rng.randint(LOW, HIGH) for _ in range(count)]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the address of a fresh array, its values while filling, then again."""
    parser = argparse.ArgumentParser(description="Fill an array with random numbers.")
    parser.add_argument("--count", type=int, default=5, help="how many numbers")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must be non-negative")

    values = fill_random(args.count, random.Random(args.seed))
    out = sys.stdout
    print(f"Dirección: {hex(id(values))}", file=out)
    for value in values:
        print(value, file=out)
    for value in values:
        print(value, file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())