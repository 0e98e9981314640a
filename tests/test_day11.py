import pytest

from yulepuzzles.day11 import (
    blink,
    count_stones,
    main,
    parse,
    part_one,
    part_two,
    read_input,
    simulate,
)


@pytest.mark.parametrize("solve", [part_one, part_two])
def test_small(solve):
    assert solve(parse("125 17"), 25) == 55312


@pytest.mark.parametrize("solve", [part_one, part_two])
def test_tiny_one_blink(solve):
    assert solve(parse("0 1 10 99 999"), 1) == 7


@pytest.mark.parametrize("solve", [part_one, part_two])
def test_tiny_six_blinks(solve):
    assert solve(parse("125 17"), 6) == 22


def test_parse_numbers():
    assert parse("125 17\n") == [125, 17]


def test_parse_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse("1 x")


def test_blink_rules():
    assert blink([0, 1, 10, 99, 999]) == [1, 2024, 1, 0, 9, 9, 2021976]


def test_simulate_steps():
    assert simulate([125, 17], 1) == [253000, 1, 7]
    assert simulate([125, 17], 2) == [253, 0, 2024, 14168]


def test_simulate_zero_times_is_identity():
    assert simulate([3, 4], 0) == [3, 4]


@pytest.mark.parametrize("times", range(0, 10))
def test_count_matches_simulation(times):
    stones = [0, 7, 125, 17]
    assert count_stones(stones, times) == len(simulate(stones, times))


def test_read_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("125 17\n")
    assert read_input(path) == [125, 17]


def test_main_reports_solution(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("125 17\n")
    assert main([str(path)]) == 0
    assert "Part one solution is 55312" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1