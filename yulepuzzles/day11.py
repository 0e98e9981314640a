"""Plutonian pebbles: count stones that split and change every time you blink."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from yulepuzzles.digits import number_of_digits, split_number

logger = logging.getLogger(__name__)


def parse(text: str) -> list[int]:
    """Parse whitespace-separated stone numbers."""
    return [int(value) for value in text.split()]


def read_input(path: str | Path) -> list[int]:
    """Read and parse the puzzle input file."""
    return parse(Path(path).read_text())


def _change(stone: int) -> tuple[int, ...]:
    """Return the stones a single stone becomes after one blink."""
    if stone == 0:
        return (1,)
    digits = number_of_digits(stone)
    if digits % 2 == 0:
        return split_number(stone, digits // 2)
    return (stone * 2024,)


def blink(stones: Iterable[int]) -> list[int]:
    """Return the row of stones after one blink."""
    return [new for stone in stones for new in _change(stone)]


def simulate(stones: Iterable[int], times: int) -> list[int]:
    """Return the row of stones after blinking ``times`` times."""
    row = list(stones)
    for _ in range(times):
        row = blink(row)
    return row


def count_stones(stones: Iterable[int], times: int) -> int:
    """Count the stones after blinking ``times`` times without building the row."""
    book: dict[tuple[int, int], int] = {}

    def offspring(stone: int, remaining: int) -> int:
        if remaining == 0:
            return 1
        key = (stone, remaining)
        if key not in book:
            book[key] = sum(offspring(new, remaining - 1) for new in _change(stone))
        return book[key]

    total = 0
    for index, stone in enumerate(stones):
        this_stone = offspring(stone, times)
        logger.debug("Stone[%d]=%d had %d offsprings", index, stone, this_stone)
        total += this_stone
    return total


def part_one(stones: list[int], times: int = 25) -> int:
    """Count the stones after blinking, by simulating the whole row."""
    return len(simulate(stones, times))


def part_two(stones: list[int], times: int = 75) -> int:
    """Count the stones after blinking, using memoised counting."""
    return count_stones(stones, times)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day11", description="Count stones after blinking.")
    parser.add_argument("input", help="path to the puzzle input")
    args = parser.parse_args(argv)

    try:
        stones = read_input(args.input)
    except (OSError, ValueError) as error:
        print(f"Ran into problems while reading input. Problem {error}", file=sys.stderr)
        return 1

    print(f"Part one solution is {part_one(stones)}")
    print(f"Part two solution is {part_two(stones)}")
    return 0