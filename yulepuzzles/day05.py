"""Print queue: check page updates against ordering rules and fix the bad ones."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

Rule = tuple[int, int]


@dataclass
class Manual:
    """Ordering rules (before, after) and the page updates to check."""

    rules: list[Rule] = field(default_factory=list)
    updates: list[list[int]] = field(default_factory=list)


def parse(text: str) -> Manual:
    """Parse ``a|b`` rules, a blank line, then comma-separated updates."""
    manual = Manual()
    lines = iter(text.splitlines())

    for raw in lines:
        line = raw.strip()
        if not line:
            break
        before, _, after = line.partition("|")
        manual.rules.append((int(before), int(after)))

    for raw in lines:
        line = raw.strip()
        manual.updates.append([int(page) for page in line.split(",")])

    return manual


def read_input(path: str | Path) -> Manual:
    """Read and parse the puzzle input file."""
    return parse(Path(path).read_text())


def is_in_order(rules: list[Rule], positions: dict[int, int]) -> bool:
    """Whether no rule is broken by the given page positions."""
    for before, after in rules:
        if before in positions and after in positions and positions[before] > positions[after]:
            return False
    return True


def dependencies(rules: list[Rule]) -> dict[int, list[int]]:
    """Map each page to the pages that must come after it."""
    result: dict[int, list[int]] = {}
    for before, after in rules:
        result.setdefault(before, []).append(after)
    return result


def reorder(dependencies: dict[int, list[int]], update: list[int]) -> list[int]:
    """Return the update reordered so every page precedes the pages that must follow it.

    Each page is placed so that exactly enough room is left after it for the pages
    of the update that the rules say must come later; this assumes every pair of
    pages in the update is covered by a rule.
    """
    pages = set(update)
    followers = {
        page: [after for after in afters if after in pages]
        for page, afters in dependencies.items()
        if page in pages
    }

    ordered = [0] * len(update)
    for page in update:
        ordered[len(update) - len(followers.get(page, [])) - 1] = page
    return ordered


def _positions(update: list[int]) -> dict[int, int]:
    return {page: index for index, page in enumerate(update)}


def part_one(manual: Manual) -> int:
    """Sum the middle pages of the updates that are already in order."""
    return sum(
        update[len(update) // 2]
        for update in manual.updates
        if is_in_order(manual.rules, _positions(update))
    )


def part_two(manual: Manual) -> int:
    """Sum the middle pages of the out-of-order updates once they are fixed."""
    deps = dependencies(manual.rules)
    total = 0
    for update in manual.updates:
        if not is_in_order(manual.rules, _positions(update)):
            fixed = reorder(deps, update)
            total += fixed[len(fixed) // 2]
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day05", description="Check print queue updates.")
    parser.add_argument("input", help="path to the puzzle input")
    args = parser.parse_args(argv)

    try:
        manual = read_input(args.input)
    except (OSError, ValueError) as error:
        print(f"Ran into problems while reading input. Problem {error}", file=sys.stderr)
        return 1

    print(f"Part one solution is {part_one(manual)}")
    print(f"Part two solution is {part_two(manual)}")
    return 0