"""Corrupted memory: add up the products of valid mul instructions."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_INSTRUCTION = re.compile(r"do\(\)|don't\(\)|mul\(([0-9]+),([0-9]+)\)")


def parse(text: str) -> list[str]:
    """Return the non-empty, stripped lines of the memory dump."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def read_input(path: str | Path) -> list[str]:
    """Read and parse the puzzle input file."""
    return parse(Path(path).read_text())


def part_one(lines: list[str]) -> int:
    """Sum the products of every ``mul(a,b)`` instruction."""
    return sum(
        int(match[1]) * int(match[2]) for line in lines for match in _MUL.finditer(line)
    )


def part_two(lines: list[str]) -> int:
    """Sum the products of ``mul(a,b)`` instructions enabled by ``do()`` and ``don't()``.

    The enabled state starts on and carries over from one line to the next.
    """
    enabled = True
    total = 0
    for line in lines:
        for match in _INSTRUCTION.finditer(line):
            instruction = match[0]
            if instruction == "do()":
                enabled = True
            elif instruction == "don't()":
                enabled = False
            elif enabled:
                total += int(match[1]) * int(match[2])
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day03", description="Run corrupted mul instructions.")
    parser.add_argument("input", help="path to the puzzle input")
    args = parser.parse_args(argv)

    try:
        lines = read_input(args.input)
    except OSError as error:
        print(f"Ran into problems while reading input. Problem {error}", file=sys.stderr)
        return 1

    print(f"Part one solution is {part_one(lines)}")
    print(f"Part two solution is {part_two(lines)}")
    return 0