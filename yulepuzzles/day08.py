"""Resonant collinearity: find antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import combinations
from pathlib import Path

from yulepuzzles.day01 import _run_cli, _stripped_lines

Point = tuple[int, int]


def parse(text: str) -> list[str]:
    """Return the antenna map, one string per row."""
    return list(_stripped_lines(text))


def read_input(path: str | Path) -> list[str]:
    """Read the antenna map from a file."""
    return parse(Path(path).read_text())


def antennas(board: list[str]) -> dict[str, list[Point]]:
    """Group antenna positions by frequency; every character other than '.' is an antenna."""
    found: dict[str, list[Point]] = {}
    for y, row in enumerate(board):
        for x, cell in enumerate(row):
            if cell != ".":
                found.setdefault(cell, []).append((x, y))
    return found


def _ray(start: Point, step: Point, width: int, height: int, resonant: bool) -> Iterator[Point]:
    """Yield start + k*step for k = 2, 3, ... while on the map (only k = 2 unless resonant)."""
    multiplier = 2
    while True:
        x = start[0] + step[0] * multiplier
        y = start[1] + step[1] * multiplier
        if not (0 <= y < height and 0 <= x < width):
            return
        yield x, y
        if not resonant:
            return
        multiplier += 1


def antinodes(board: list[str], resonant: bool = False) -> set[Point]:
    """Return every antinode position on the map.

    Without ``resonant`` each pair of antennas makes one antinode behind each of
    them at the pair's distance. With it, antinodes repeat at every multiple of
    that distance up to the map's edge, and the antennas themselves count too.
    """
    if not board:
        return set()
    height = len(board)
    width = len(board[0])
    nodes: set[Point] = set()

    for positions in antennas(board).values():
        for a, b in combinations(positions, 2):
            dx, dy = a[0] - b[0], a[1] - b[1]
            if resonant:
                nodes.update((a, b))
            nodes.update(_ray(a, (-dx, -dy), width, height, resonant))
            nodes.update(_ray(b, (dx, dy), width, height, resonant))
    return nodes


def render(board: list[str], nodes: set[Point]) -> str:
    """Draw the map with '#' at antinodes and '.' everywhere else."""
    return "\n".join(
        "".join("#" if (x, y) in nodes else "." for x in range(len(row)))
        for y, row in enumerate(board)
    )


def part_one(board: list[str]) -> int:
    """Count the distinct antinode positions."""
    return len(antinodes(board))


def part_two(board: list[str]) -> int:
    """Count the distinct antinode positions with resonant harmonics."""
    return len(antinodes(board, resonant=True))


def _drawn_count(board: list[str], resonant: bool) -> int:
    """Print the antinode drawing and return how many antinodes it shows."""
    nodes = antinodes(board, resonant)
    print(render(board, nodes))
    return len(nodes)


def main(argv: list[str] | None = None) -> int:
    return _run_cli(
        argv,
        "day08",
        "Locate antenna antinodes.",
        read_input,
        (lambda board: _drawn_count(board, False), lambda board: _drawn_count(board, True)),
    )