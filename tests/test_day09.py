import pytest

from yulepuzzles.day09 import (
    Block,
    DiskMap,
    compact_checksum,
    defragment,
    main,
    parse,
    part_one,
    part_two,
    read_input,
)

SMALL = "2333133121414131402"


def _draw(blocks):
    return "".join(("." if block.file_id is None else str(block.file_id)) * block.size for block in blocks)


def test_small_part_one():
    assert part_one(parse(SMALL)) == 1928


def test_tiny_part_one():
    assert part_one(parse("12345")) == 60


def test_small_part_two():
    assert part_two(parse(SMALL)) == 2858


def test_parse_splits_files_and_free():
    disk = parse("12345")
    assert disk == DiskMap(block_sizes=[1, 3, 5], free=[2, 4])


def test_parse_rejects_non_digits():
    with pytest.raises(ValueError, match="unexpected character 120"):
        parse("12x4")


def test_compact_checksum_leaves_inputs_untouched():
    sizes, free = [1, 3, 5], [2, 4]
    assert compact_checksum(sizes, free) == 60
    assert sizes == [1, 3, 5]
    assert free == [2, 4]


def test_compact_checksum_without_free_space():
    # 0111 -> 0*0 + 1*1 + 2*1 + 3*1
    assert compact_checksum([1, 3], [0]) == 6


def test_defragment_layout():
    blocks = defragment(parse(SMALL))
    assert _draw(blocks) == "00992111777.44.333....5555.6666.....8888.."


def test_defragment_preserves_total_size():
    disk = parse(SMALL)
    total = sum(disk.block_sizes) + sum(disk.free)
    assert sum(block.size for block in defragment(disk)) == total


def test_block_is_free():
    assert Block(3).is_free
    assert not Block(3, 0).is_free


def test_read_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(SMALL + "\n")
    assert part_two(read_input(path)) == 2858


def test_main_prints_solutions(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SMALL)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Part one solution is 1928" in out
    assert "Part two solution is 2858" in out


def test_main_reports_bad_input(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("12a")
    assert main([str(path)]) == 1