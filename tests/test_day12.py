import pytest

from yulepuzzles.day12 import (
    Region,
    main,
    parse,
    part_one,
    part_two,
    perimeter,
    read_input,
    regions,
    sides,
)

SMALL = """
RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""

TINY1 = """
AAAA
BBCD
BBCC
EEEC
"""

TINY2 = """
OOOOO
OXOXO
OOOOO
OXOXO
OOOOO
"""


@pytest.mark.parametrize("text, expected", [(SMALL, 1930), (TINY1, 140), (TINY2, 772)])
def test_part_one(text, expected):
    assert part_one(parse(text)) == expected


@pytest.mark.parametrize("text, expected", [(SMALL, 1206), (TINY1, 80), (TINY2, 436)])
def test_part_two(text, expected):
    assert part_two(parse(text)) == expected


def test_regions_of_tiny_garden():
    found = {r.plant: r for r in regions(parse(TINY1))}
    assert len(regions(parse(TINY1))) == 5
    assert {p: r.area for p, r in found.items()} == {"A": 4, "B": 4, "C": 4, "D": 1, "E": 3}
    assert {p: perimeter(r) for p, r in found.items()} == {
        "A": 10,
        "B": 8,
        "C": 10,
        "D": 4,
        "E": 8,
    }
    assert {p: sides(r) for p, r in found.items()} == {"A": 4, "B": 4, "C": 8, "D": 4, "E": 4}


def test_separate_regions_of_same_plant():
    found = regions(parse(TINY2))
    assert len(found) == 5
    assert sorted(r.area for r in found if r.plant == "X") == [1, 1, 1, 1]


def test_regions_cover_every_plot_once():
    board = parse(SMALL)
    found = regions(board)
    cells = [cell for region in found for cell in region.cells]
    assert len(cells) == len(set(cells)) == sum(len(row) for row in board)


def test_single_plot_region():
    region = Region("Z", frozenset({(0, 0)}))
    assert perimeter(region) == 4
    assert sides(region) == 4


def test_read_input_and_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(TINY1)
    assert part_one(read_input(path)) == 140
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Part one solution is 140" in out
    assert "Part two solution is 80" in out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1