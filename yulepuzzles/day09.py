"""Disk fragmenter: compact files on a disk and compute the filesystem checksum."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from itertools import count
from pathlib import Path


@dataclass
class DiskMap:
    """Alternating file sizes and free-space sizes from the dense disk map."""

    block_sizes: list[int] = field(default_factory=list)
    free: list[int] = field(default_factory=list)


@dataclass
class Block:
    """A run of blocks holding one file, or free space when ``file_id`` is None."""

    size: int
    file_id: int | None = None

    @property
    def is_free(self) -> bool:
        """Whether this run is free space."""
        return self.file_id is None


def parse(text: str) -> DiskMap:
    """Parse digit strings: even positions are file sizes, odd positions free sizes."""
    disk = DiskMap()
    for raw in text.splitlines():
        line = raw.strip()
        for index, char in enumerate(line):
            if not "0" <= char <= "9":
                raise ValueError(f"unexpected character {ord(char)}")
            target = disk.block_sizes if index % 2 == 0 else disk.free
            target.append(int(char))
    return disk


def read_input(path: str | Path) -> DiskMap:
    """Read and parse the puzzle input file."""
    return parse(Path(path).read_text())


def compact_checksum(block_sizes: list[int], free: list[int]) -> int:
    """Move file blocks one at a time from the end into the leftmost free space; return the checksum."""
    layout: list[int | None] = []
    for file_id, size in enumerate(block_sizes):
        layout.extend([file_id] * size)
        if file_id < len(free):
            layout.extend([None] * free[file_id])

    left, right = 0, len(layout) - 1
    while left < right:
        if layout[left] is not None:
            left += 1
        elif layout[right] is None:
            right -= 1
        else:
            layout[left], layout[right] = layout[right], None
            left += 1
            right -= 1

    return sum(position * file_id for position, file_id in enumerate(layout) if file_id is not None)


def _blocks(disk: DiskMap) -> list[Block]:
    blocks: list[Block] = []
    for file_id, size in enumerate(disk.block_sizes):
        if file_id > 0 and file_id - 1 < len(disk.free):
            blocks.append(Block(disk.free[file_id - 1]))
        blocks.append(Block(size, file_id))
    if len(disk.free) >= len(disk.block_sizes) and disk.block_sizes:
        blocks.extend(Block(size) for size in disk.free[len(disk.block_sizes) - 1 :])
    return blocks


def defragment(disk: DiskMap) -> list[Block]:
    """Move whole files, highest id first and each once, into the leftmost free run that fits.

    Leftover free space becomes a new free run; adjacent free runs are never merged.
    """
    blocks = _blocks(disk)

    # Insertions happen only before the block being handled, so its distance
    # from the end of the list stays fixed.
    for from_end in count(1):
        index = len(blocks) - from_end
        if index <= 0:
            break
        moving = blocks[index]
        if moving.is_free:
            continue

        for target_index in range(1, index):
            target = blocks[target_index]
            if not target.is_free or target.size < moving.size:
                continue
            remainder = target.size - moving.size
            target.file_id, target.size = moving.file_id, moving.size
            moving.file_id = None
            if remainder:
                blocks.insert(target_index + 1, Block(remainder))
            break

    return blocks


def _checksum(blocks: list[Block]) -> int:
    total = 0
    position = 0
    for block in blocks:
        if block.file_id is not None:
            total += sum(range(position, position + block.size)) * block.file_id
        position += block.size
    return total


def part_one(disk: DiskMap) -> int:
    """Checksum after compacting block by block."""
    return compact_checksum(disk.block_sizes, disk.free)


def part_two(disk: DiskMap) -> int:
    """Checksum after moving whole files."""
    return _checksum(defragment(disk))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="day09", description="Compact a disk map.")
    parser.add_argument("input", help="path to the puzzle input")
    args = parser.parse_args(argv)

    try:
        disk = read_input(args.input)
    except (OSError, ValueError) as error:
        print(f"Ran into problems while reading input. Problem {error}", file=sys.stderr)
        return 1

    print(f"Part one solution is {part_one(disk)}")
    print(f"Part two solution is {part_two(disk)}")
    return 0