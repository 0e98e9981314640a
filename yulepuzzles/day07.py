"""Bridge repair: find calibration equations that operators can make true."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from operator import add, mul
from pathlib import Path

from yulepuzzles.day01 import _run_cli, _stripped_lines
from yulepuzzles.digits import number_of_digits


@dataclass
class Equation:
    """A target value and the numbers to combine left to right."""

    target: int
    numbers: list[int] = field(default_factory=list)


def parse(text: str) -> list[Equation]:
    """Parse lines of the form ``target: n1 n2 ...``."""
    equations = []
    for line in _stripped_lines(text):
        target, separator, rest = line.partition(": ")
        if not separator:
            raise ValueError(f"missing ': ' in line: {line}")
        equations.append(Equation(int(target), [int(value) for value in rest.split(" ")]))
    return equations


def read_input(path: str | Path) -> list[Equation]:
    """Read the calibration equations from a file."""
    return parse(Path(path).read_text())


def _concat(left: int, right: int) -> int:
    return left * 10 ** number_of_digits(right) + right


def can_calibrate(equation: Equation, concatenate: bool = False) -> bool:
    """Whether +, * (and optionally digit concatenation) applied left to right reach the target."""
    target = equation.target
    numbers = equation.numbers
    if not numbers:
        raise ValueError("an equation needs at least one number")
    if len(numbers) == 1:
        return numbers[0] == target

    operators: tuple[Callable[[int, int], int], ...] = (add, mul)
    if concatenate:
        operators += (_concat,)

    last = len(numbers) - 1
    pending = [(1, numbers[0])]
    while pending:
        index, aggregate = pending.pop()
        for operator in operators:
            value = operator(aggregate, numbers[index])
            if value == target and index == last:
                return True
            if value <= target and index < last:
                pending.append((index + 1, value))
    return False


def part_one(equations: list[Equation]) -> int:
    """Sum the targets reachable with + and *."""
    return sum(eq.target for eq in equations if can_calibrate(eq))


def part_two(equations: list[Equation]) -> int:
    """Sum the targets reachable with +, * and concatenation."""
    return sum(eq.target for eq in equations if can_calibrate(eq, concatenate=True))


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "day07", "Check calibration equations.", read_input, (part_one, part_two))