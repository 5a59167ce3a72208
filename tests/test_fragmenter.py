import pytest

from diskfrag.fragmenter import checksum_part1, checksum_part2, parse_disk_map
from diskfrag.types import InvalidInputError


def test_part1_example(example_map: str):
    assert checksum_part1(example_map) == 1928


def test_part2_example(example_map: str):
    assert checksum_part2(example_map) == 2858


@pytest.mark.parametrize("disk_map", ["", "0", "00000"])
def test_empty_disk(disk_map: str):
    assert checksum_part1(disk_map) == 0
    assert checksum_part2(disk_map) == 0


def test_deterministic(example_map: str):
    assert checksum_part1(example_map) == checksum_part1(example_map)
    assert checksum_part2(example_map) == checksum_part2(example_map)


def test_no_free_space():
    # Nada se move, o checksum é o do disco original: 0 1 1 2 2 2
    assert checksum_part1("10203") == 1 + 2 + 6 + 8 + 10
    assert checksum_part2("10203") == 1 + 2 + 6 + 8 + 10


def test_large_checksum():
    # Ultrapassa o limite de 32 bits
    disk_map = "9" * 2001
    assert checksum_part1(disk_map) > 2**31
    assert checksum_part2(disk_map) > 2**31


def test_invalid_input():
    with pytest.raises(InvalidInputError):
        checksum_part1("123a45")
    with pytest.raises(InvalidInputError):
        checksum_part2("123a45")
    with pytest.raises(InvalidInputError):
        parse_disk_map("123a45")
