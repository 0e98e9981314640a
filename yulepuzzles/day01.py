"""Historian location lists: total distance and similarity score.

Also holds the small input and command-line helpers the other days share.
"""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def _stripped_lines(text: str) -> Iterator[str]:
    """Yield the non-empty lines of ``text`` with surrounding whitespace removed."""
    for raw in text.splitlines():
        line = raw.strip()
        if line:
            yield line


def _run_cli(
    argv: list[str] | None,
    prog: str,
    description: str,
    load: Callable[[str], Any],
    parts: Sequence[Callable[[Any], object]],
) -> int:
    """Parse the command line, load the input and print the answer of each part."""
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument("input", help="path to the puzzle input")
    args = parser.parse_args(argv)

    try:
        puzzle = load(args.input)
        for name, part in zip(("one", "two"), parts):
            print(f"Part {name} solution is {part(puzzle)}")
    except (OSError, ValueError) as error:
        print(f"Ran into problems while reading input. Problem {error}", file=sys.stderr)
        return 1
    return 0


@dataclass
class LocationLists:
    """The two columns of location ids."""

    left: list[int] = field(default_factory=list)
    right: list[int] = field(default_factory=list)


def parse(text: str) -> LocationLists:
    """Parse lines holding two whitespace-separated numbers each."""
    lists = LocationLists()
    for line in _stripped_lines(text):
        fields = line.split()
        if len(fields) > 2:
            raise ValueError(f"too many numbers in line: {line}")
        numbers = [int(value) for value in fields]
        lists.left.append(numbers[0])
        if len(numbers) == 2:
            lists.right.append(numbers[1])
    return lists


def read_input(path: str | Path) -> LocationLists:
    """Read the two location columns from a file."""
    return parse(Path(path).read_text())


def part_one(lists: LocationLists) -> int:
    """Sum the distances between the sorted columns, pairwise."""
    left = sorted(lists.left)
    right = sorted(lists.right)
    if len(right) < len(left):
        raise ValueError("the right list is shorter than the left list")
    return sum(abs(a - b) for a, b in zip(left, right))


def part_two(lists: LocationLists) -> int:
    """Sum each left number times how often it appears on the right."""
    counts = Counter(lists.right)
    return sum(number * counts[number] for number in lists.left)


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "day01", "Compare two location lists.", read_input, (part_one, part_two))