"""Word search: find XMAS in every direction and X-shaped MAS crosses."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from yulepuzzles.day01 import _run_cli, _stripped_lines

Point = tuple[int, int]

# Only forward directions: searching for the word and its reverse covers the rest
# without counting any occurrence twice.
_FORWARD: tuple[Point, ...] = ((1, 0), (1, 1), (0, 1), (1, -1))

_STENCILS: tuple[tuple[str, ...], ...] = (
    ("M.M", ".A.", "S.S"),
    ("S.S", ".A.", "M.M"),
    ("S.M", ".A.", "S.M"),
    ("M.S", ".A.", "M.S"),
)


def parse(text: str) -> list[str]:
    """Return the letter grid, one string per row."""
    return list(_stripped_lines(text))


def read_input(path: str | Path) -> list[str]:
    """Read the letter grid from a file."""
    return parse(Path(path).read_text())


def word_at(word: str, start: Point, direction: Point, lines: list[str]) -> bool:
    """Whether ``word`` is spelled from ``start`` stepping by ``direction``."""
    if not word:
        return False
    x, y = start
    dx, dy = direction
    for letter in word:
        if not (0 <= y < len(lines) and 0 <= x < len(lines[y])):
            return False
        if lines[y][x] != letter:
            return False
        x, y = x + dx, y + dy
    return True


def stencil_at(stencil: tuple[str, ...], start: Point, lines: list[str]) -> bool:
    """Whether a 3x3 stencil matches with its top-left corner at ``start``; '.' matches anything."""
    x0, y0 = start
    if not (0 <= y0 < len(lines) - 2 and 0 <= x0 < len(lines[y0]) - 2):
        return False
    return all(
        cell == "." or lines[y0 + dy][x0 + dx] == cell
        for dy, row in enumerate(stencil)
        for dx, cell in enumerate(row)
    )


def _starts(lines: list[str]) -> Iterator[Point]:
    width = len(lines[0]) if lines else 0
    for y in range(len(lines)):
        for x in range(width):
            yield x, y


def part_one(lines: list[str]) -> int:
    """Count occurrences of XMAS in any direction."""
    word = "XMAS"
    reverse = word[::-1]
    return sum(
        word_at(word, start, direction, lines) + word_at(reverse, start, direction, lines)
        for start in _starts(lines)
        for direction in _FORWARD
    )


def part_two(lines: list[str]) -> int:
    """Count X-shaped crosses of two MAS words."""
    return sum(
        stencil_at(stencil, start, lines) for start in _starts(lines) for stencil in _STENCILS
    )


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "day04", "Solve the XMAS word search.", read_input, (part_one, part_two))