"""Claw contraption: find how many tokens it costs to win every winnable prize."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

Point = tuple[int, int]

PART_TWO_OFFSET = 10_000_000_000_000


@dataclass(frozen=True)
class Machine:
    """The moves of the two buttons and the location of the prize."""

    button_a: Point
    button_b: Point
    prize: Point


def parse_point(text: str) -> Point:
    """Parse ``X+94, Y+34`` or ``X=8400, Y=5400`` into a point."""
    parts = text.split(", ")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise ValueError(f"expected an X and a Y offset, value was {text}")
    if parts[0][0] != "X":
        raise ValueError(f"the X offset does not start with X, value was {text}")
    if parts[1][0] != "Y":
        raise ValueError(f"the Y offset does not start with Y, value was {text}")
    return int(parts[0][2:]), int(parts[1][2:])


def parse(text: str, prize_offset: int = 0) -> list[Machine]:
    """Parse machine descriptions; ``prize_offset`` is added to both prize coordinates."""
    machines = []
    button_a: Point = (0, 0)
    button_b: Point = (0, 0)
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        if line.startswith("Button A: "):
            button_a = parse_point(line[len("Button A: "):])
        elif line.startswith("Button B: "):
            button_b = parse_point(line[len("Button B: "):])
        elif line.startswith("Prize: "):
            x, y = parse_point(line[len("Prize: "):])
            machines.append(Machine(button_a, button_b, (x + prize_offset, y + prize_offset)))
        else:
            raise ValueError(f"unexpected line: {line}")
    return machines


def read_input(path: str | Path, prize_offset: int = 0) -> list[Machine]:
    """Read and parse the puzzle input file."""
    return parse(Path(path).read_text(), prize_offset)


def presses(machine: Machine) -> tuple[int, int]:
    """Return the (A, B) presses that reach the prize exactly, or (0, 0) if none do.

    Raises ZeroDivisionError when the buttons are parallel or A does not move along Y.
    """
    x1, y1 = machine.button_a
    x2, y2 = machine.button_b
    x, y = machine.prize

    dividend = x1 * y - y1 * x
    divisor = x1 * y2 - x2 * y1
    if divisor == 0:
        raise ZeroDivisionError("the two buttons move along the same line")
    if dividend % divisor != 0:
        return 0, 0
    press_b = dividend // divisor

    dividend = y - press_b * y2
    if y1 == 0:
        raise ZeroDivisionError("button A does not move along Y")
    if dividend % y1 != 0:
        return 0, 0
    press_a = dividend // y1

    return press_a, press_b


def total_tokens(machines: Iterable[Machine]) -> int:
    """Sum the tokens (3 per A press, 1 per B press) over machines that can be won."""
    tokens = 0
    for machine in machines:
        press_a, press_b = presses(machine)
        cost = press_a * 3 + press_b
        if press_a > 0 and press_b > 0:
            logger.debug(
                "It would take %d A and %d B buttons for a total of %d tokens to win %s",
                press_a,
                press_b,
                cost,
                machine,
            )
            tokens += cost
        else:
            logger.debug("Cannot beat the claw for %s", machine)
    return tokens


def part_one(text: str) -> int:
    """Tokens needed for the prizes as written."""
    return total_tokens(parse(text))


def part_two(text: str) -> int:
    """Tokens needed once every prize is moved far away."""
    return total_tokens(parse(text, PART_TWO_OFFSET))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day13", description="Win prizes from claw machines.")
    parser.add_argument("input", help="path to the puzzle input")
    args = parser.parse_args(argv)

    try:
        text = Path(args.input).read_text()
        first = part_one(text)
        second = part_two(text)
    except (OSError, ValueError, ZeroDivisionError) as error:
        print(f"Ran into problems while reading input. Problem {error}", file=sys.stderr)
        return 1

    print(f"Part one solution is {first}")
    print(f"Part two solution is {second}")
    return 0