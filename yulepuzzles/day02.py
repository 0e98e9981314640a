"""Reactor reports: count reports whose levels change safely."""

from __future__ import annotations

from itertools import pairwise
from pathlib import Path

from yulepuzzles.day01 import _run_cli, _stripped_lines


def parse(text: str) -> list[list[int]]:
    """Parse one report of whitespace-separated levels per line."""
    return [[int(value) for value in line.split()] for line in _stripped_lines(text)]


def read_input(path: str | Path) -> list[list[int]]:
    """Read the reactor reports from a file."""
    return parse(Path(path).read_text())


def without(report: list[int], skip: int | None = None) -> list[int]:
    """Return the report with the level at index ``skip`` removed (unchanged for None)."""
    if skip is None:
        return report
    if not 0 <= skip < len(report):
        raise IndexError(f"cannot skip level {skip} of a report with {len(report)} levels")
    return report[:skip] + report[skip + 1 :]


def is_safe(report: list[int], skip: int | None = None) -> bool:
    """Whether levels all rise or all fall by 1 to 3 at each step."""
    sign = None
    for previous, current in pairwise(without(report, skip)):
        delta = previous - current
        if delta == 0 or abs(delta) > 3:
            return False
        this_sign = 1 if delta > 0 else -1
        if sign is not None and this_sign != sign:
            return False
        sign = this_sign
    return True


def part_one(reports: list[list[int]]) -> int:
    """Count the safe reports."""
    return sum(is_safe(report) for report in reports)


def part_two(reports: list[list[int]]) -> int:
    """Count the reports that are safe once at most one level is removed."""
    return sum(
        any(is_safe(report, skip) for skip in (None, *range(len(report)))) for report in reports
    )


def main(argv: list[str] | None = None) -> int:
    return _run_cli(argv, "day02", "Count safe reactor reports.", read_input, (part_one, part_two))