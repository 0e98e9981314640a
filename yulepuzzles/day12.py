"""Garden groups: price fences around regions of the same plant."""

from __future__ import annotations

import argparse
import logging
import sys
from collections import deque
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

Point = tuple[int, int]

_DELTAS: tuple[Point, ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


@dataclass(frozen=True)
class Region:
    """A connected group of plots growing the same plant."""

    plant: str
    cells: frozenset[Point]

    @property
    def area(self) -> int:
        """The number of plots in the region."""
        return len(self.cells)


def parse(text: str) -> list[str]:
    """Return the non-empty, stripped rows of the garden."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def read_input(path: str | Path) -> list[str]:
    """Read and parse the puzzle input file."""
    return parse(Path(path).read_text())


def regions(board: list[str]) -> list[Region]:
    """Split the garden into regions, in the order their top-left plots are met."""
    assigned: set[Point] = set()
    found: list[Region] = []
    for y, row in enumerate(board):
        for x, plant in enumerate(row):
            if (x, y) in assigned:
                continue
            cells: set[Point] = set()
            pending = deque([(x, y)])
            while pending:
                px, py = pending.pop()
                if (px, py) in cells:
                    continue
                if not (0 <= py < len(board) and 0 <= px < len(board[py])):
                    continue
                if board[py][px] != plant:
                    continue
                cells.add((px, py))
                pending.extend((px + dx, py + dy) for dx, dy in _DELTAS)
            assigned |= cells
            found.append(Region(plant, frozenset(cells)))
    return found


def _fences(region: Region) -> set[tuple[Point, Point]]:
    """Every (plot, direction) pair where the neighbour lies outside the region."""
    return {
        ((x, y), (dx, dy))
        for x, y in region.cells
        for dx, dy in _DELTAS
        if (x + dx, y + dy) not in region.cells
    }


def perimeter(region: Region) -> int:
    """The number of unit fence segments around the region."""
    return len(_fences(region))


def sides(region: Region) -> int:
    """The number of straight fence sides around the region."""
    fences = _fences(region)
    count = 0
    for (x, y), (dx, dy) in fences:
        px, py = abs(dy), abs(dx)
        if ((x - px, y - py), (dx, dy)) not in fences:
            count += 1
    return count


def part_one(board: list[str]) -> int:
    """Total price with each region costing area times perimeter."""
    cost = 0
    for region in regions(board):
        price = region.area * perimeter(region)
        logger.debug("A region of %s plants with price %d", region.plant, price)
        cost += price
    return cost


def part_two(board: list[str]) -> int:
    """Total price with each region costing area times number of sides."""
    cost = 0
    for region in regions(board):
        price = region.area * sides(region)
        logger.debug("A region of %s plants with price %d", region.plant, price)
        cost += price
    return cost


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day12", description="Price garden fences.")
    parser.add_argument("input", help="path to the puzzle input")
    args = parser.parse_args(argv)

    try:
        board = read_input(args.input)
    except OSError as error:
        print(f"Ran into problems while reading input. Problem {error}", file=sys.stderr)
        return 1

    print(f"Part one solution is {part_one(board)}")
    print(f"Part two solution is {part_two(board)}")
    return 0