"""Hiking trails: score and rate trailheads on a topographic map."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from yulepuzzles.day01 import _run_cli, _stripped_lines

Point = tuple[int, int]

_DELTAS: tuple[Point, ...] = ((1, 0), (0, 1), (0, -1), (-1, 0))


def parse(text: str) -> list[str]:
    """Return the topographic map, one string of heights per row."""
    return list(_stripped_lines(text))


def read_input(path: str | Path) -> list[str]:
    """Read the topographic map from a file."""
    return parse(Path(path).read_text())


def _uphill(board: list[str], position: Point) -> Iterator[Point]:
    """Yield the neighbours exactly one level above ``position``."""
    x, y = position
    target = chr(ord(board[y][x]) + 1)
    for dx, dy in _DELTAS:
        nx, ny = x + dx, y + dy
        if 0 <= ny < len(board) and 0 <= nx < len(board[ny]) and board[ny][nx] == target:
            yield nx, ny


def _trailheads(board: list[str]) -> Iterator[Point]:
    for y, row in enumerate(board):
        for x, cell in enumerate(row):
            if cell == "0":
                yield x, y


def part_one(board: list[str]) -> int:
    """Sum, over trailheads, the number of distinct peaks each can reach."""
    book: dict[Point, frozenset[Point]] = {}

    def peaks(position: Point) -> frozenset[Point]:
        if position in book:
            return book[position]
        x, y = position
        if board[y][x] == "9":
            found = frozenset({position})
        else:
            found = frozenset().union(*(peaks(n) for n in _uphill(board, position)))
        book[position] = found
        return found

    return sum(len(peaks(start)) for start in _trailheads(board))


def part_two(board: list[str]) -> int:
    """Sum, over trailheads, the number of distinct trails to any peak."""
    book: dict[Point, int] = {}

    def trails(position: Point) -> int:
        if position in book:
            return book[position]
        x, y = position
        if board[y][x] == "9":
            count = 1
        else:
            count = sum(trails(n) for n in _uphill(board, position))
        book[position] = count
        return count

    return sum(trails(start) for start in _trailheads(board))


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "day10", "Score hiking trailheads.", read_input, (part_one, part_two))