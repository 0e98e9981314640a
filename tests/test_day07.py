import pytest

from yulepuzzles.day07 import Equation, can_calibrate, main, parse, part_one, part_two

EQUATIONS = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_parse_example():
    equations = parse(EQUATIONS)
    assert len(equations) == 9
    assert equations[0] == Equation(190, [10, 19])
    assert equations[-1] == Equation(292, [11, 6, 16, 20])


@pytest.mark.parametrize("bad_line", ["12: 3 x\n", "12 3 4\n"])
def test_parse_rejects(bad_line):
    with pytest.raises(ValueError):
        parse(bad_line)


@pytest.mark.parametrize(("solver", "total"), [(part_one, 3749), (part_two, 11387)])
def test_example_totals(solver, total):
    assert solver(parse(EQUATIONS)) == total


@pytest.mark.parametrize(
    ("equation", "concatenate", "expected"),
    [
        (Equation(190, [10, 19]), False, True),
        (Equation(3267, [81, 40, 27]), False, True),
        (Equation(292, [11, 6, 16, 20]), False, True),
        (Equation(83, [17, 5]), False, False),
        (Equation(7290, [6, 8, 6, 15]), False, False),
        (Equation(156, [15, 6]), True, True),
        (Equation(7290, [6, 8, 6, 15]), True, True),
        (Equation(192, [17, 8, 14]), True, True),
        (Equation(21037, [9, 7, 18, 13]), True, False),
        (Equation(5, [5]), False, True),
        (Equation(5, [4]), False, False),
    ],
)
def test_can_calibrate(equation, concatenate, expected):
    assert can_calibrate(equation, concatenate) is expected


def test_empty_equation_raises():
    with pytest.raises(ValueError):
        can_calibrate(Equation(5, []))


def test_command_line(tmp_path, capsys):
    equations_file = tmp_path / "equations.txt"
    equations_file.write_text(EQUATIONS)
    assert main([str(equations_file)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Part one solution is 3749",
        "Part two solution is 11387",
    ]
    assert main([str(tmp_path / "gone.txt")]) == 1