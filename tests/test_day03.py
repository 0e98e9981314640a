from yulepuzzles.day03 import main, parse, part_one, part_two, read_input

SMALL = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
WITH_DONT = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part_one_small():
    assert part_one(parse(SMALL)) == 161


def test_part_two_small():
    assert part_two(parse(SMALL)) == 161


def test_part_two_with_dont():
    assert part_two(parse(WITH_DONT)) == 48


def test_part_one_ignores_dont():
    assert part_one(parse(WITH_DONT)) == 161


def test_parse_skips_blank_lines_and_strips():
    assert parse("\n  mul(1,2)  \n\n") == ["mul(1,2)"]


def test_dont_carries_across_lines():
    assert part_two(parse("don't()\nmul(2,3)\ndo()\nmul(4,5)")) == 20


def test_malformed_mul_is_ignored():
    assert part_one(parse("mul( 2,3) mul(2 ,3) mul(2,3")) == 0


def test_read_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SMALL + "\n")
    assert part_one(read_input(path)) == 161


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(WITH_DONT)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Part one solution is 161" in out
    assert "Part two solution is 48" in out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1