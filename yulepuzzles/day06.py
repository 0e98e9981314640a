"""Guard patrol: trace the guard's route and find obstacles that trap it in a loop."""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path

from yulepuzzles.day01 import _run_cli, _stripped_lines

Point = tuple[int, int]


class Direction(IntEnum):
    """Heading of the guard, in clockwise order."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def delta(self) -> Point:
        """The (dx, dy) step taken when moving in this direction."""
        return _DELTAS[self]

    def turn_right(self) -> Direction:
        """The direction after a quarter turn clockwise."""
        return Direction((self + 1) % 4)


_DELTAS: dict[Direction, Point] = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


def parse(text: str) -> list[str]:
    """Return the lab map, one string per row."""
    return list(_stripped_lines(text))


def read_input(path: str | Path) -> list[str]:
    """Read the lab map from a file."""
    return parse(Path(path).read_text())


def find_guard(board: list[str]) -> Point:
    """Return the (x, y) position of the guard, marked with '^'."""
    for y, row in enumerate(board):
        x = row.find("^")
        if x != -1:
            return x, y
    raise ValueError("No guard here")


def _step(position: Point, direction: Direction) -> Point:
    dx, dy = direction.delta
    return position[0] + dx, position[1] + dy


def next_direction(
    board: list[str],
    direction: Direction,
    position: Point,
    obstacle: Point | None = None,
) -> Direction | None:
    """Return the direction the guard moves next, or None when the next step leaves the map.

    The guard turns right whenever the tile ahead is a '#' or the extra ``obstacle``.
    """
    for _ in range(4):
        x, y = _step(position, direction)
        if not (0 <= y < len(board) and 0 <= x < len(board[y])):
            return None
        if board[y][x] != "#" and (x, y) != obstacle:
            return direction
        direction = direction.turn_right()
    raise ValueError(f"the guard at {position} is boxed in on all sides")


def patrol(board: list[str], guard: Point) -> dict[Point, Direction]:
    """Map every tile the guard steps onto to the direction it last entered that tile with."""
    visited: dict[Point, Direction] = {}
    direction: Direction | None = Direction.UP
    position = guard
    while True:
        direction = next_direction(board, direction, position)
        if direction is None:
            return visited
        position = _step(position, direction)
        visited[position] = direction


def causes_loop(board: list[str], guard: Point, obstacle: Point) -> bool:
    """Whether an extra obstacle at ``obstacle`` makes the guard walk in circles forever."""
    seen: set[tuple[Point, Direction]] = set()
    direction: Direction | None = Direction.UP
    position = guard
    while True:
        state = (position, direction)
        if state in seen:
            return True
        seen.add(state)
        direction = next_direction(board, direction, position, obstacle)
        if direction is None:
            return False
        position = _step(position, direction)


def part_one(board: list[str]) -> int:
    """Count the distinct tiles the guard visits, the starting tile included."""
    guard = find_guard(board)
    return len(set(patrol(board, guard)) | {guard})


def part_two(board: list[str]) -> int:
    """Count the tiles on the guard's route where a new obstacle causes a loop."""
    guard = find_guard(board)
    return sum(causes_loop(board, guard, obstacle) for obstacle in patrol(board, guard))


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "day06", "Trace the guard's patrol.", read_input, (part_one, part_two))