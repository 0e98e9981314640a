# yulepuzzles

Solvers for thirteen days of puzzles. Each day lives in its own module
(`yulepuzzles.day01` to `yulepuzzles.day13`) and solves two parts of the
same puzzle from one plain-text input. Only the standard library is used.

| Module  | Puzzle |
|---------|--------|
| `day01` | distance and similarity of two location lists |
| `day02` | safe reactor reports |
| `day03` | `mul(a,b)` instructions in corrupted memory, with `do()` / `don't()` |
| `day04` | XMAS word search and X-shaped MAS crosses |
| `day05` | page updates checked against ordering rules |
| `day06` | guard patrol and obstacles that cause a loop |
| `day07` | calibration equations with `+`, `*` and concatenation |
| `day08` | antenna antinodes |
| `day09` | disk compaction checksums |
| `day10` | trailhead scores and ratings |
| `day11` | stones that change and split on every blink |
| `day12` | fence prices by perimeter and by number of sides |
| `day13` | tokens needed to win claw machine prizes |

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## From the command line

Every day has a command that takes the path of a puzzle input file and
prints the solution of both parts:

```
yulepuzzles-day01 input.txt
yulepuzzles-day02 input.txt
...
yulepuzzles-day13 input.txt
```

Each prints `Part one solution is ...` and `Part two solution is ...`.
`yulepuzzles-day08` also prints a drawing of the map before each answer,
with `#` at every antinode. If the file cannot be read or parsed, the
command prints the problem to standard error and exits with status 1.

## From Python

Each module offers `parse(text)` to read an input given as a string,
`read_input(path)` to read it from a file, and `part_one` / `part_two` to
solve it.

```python
from yulepuzzles import day01

lists = day01.parse("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")
day01.part_one(lists)   # 11: total distance between the sorted lists
day01.part_two(lists)   # 31: similarity score
```

Malformed input raises `ValueError`.

Day 11 takes the number of blinks, defaulting to 25 for part one and 75 for
part two. Part one builds the whole row of stones; part two only counts
them, with memoisation:

```python
from yulepuzzles import day11

stones = day11.parse("125 17")
day11.part_one(stones, 25)   # 55312
day11.part_two(stones, 75)
```

Day 13 reads its machines straight from the text, because the second part
adds 10000000000000 to both coordinates of every prize:

```python
from yulepuzzles import day13

day13.part_one(text)
day13.part_two(text)
```

`day13.parse(text, prize_offset)` and `day13.presses(machine)` are also
available; `presses` raises `ZeroDivisionError` when the two buttons move
along the same line or button A does not move along Y.

The modules expose their building blocks too, for example
`day02.is_safe(report, skip)`, `day06.patrol(board, guard)`,
`day07.can_calibrate(equation, concatenate)`,
`day08.antinodes(board, resonant)`, `day09.defragment(disk)` and
`day12.regions(board)` with `day12.perimeter(region)` and
`day12.sides(region)`.

The helpers in `yulepuzzles.digits`, `number_of_digits(number)` and
`split_number(number, digits)`, count the decimal digits of a number and cut
it into the part above and the part below its lowest `digits` digits:

```python
from yulepuzzles.digits import number_of_digits, split_number

number_of_digits(1010)   # 4
split_number(1010, 2)    # (10, 10)
```

Days 11, 12 and 13 report per-stone, per-region and per-machine details
through the standard `logging` module at debug level.