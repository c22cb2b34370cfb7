import pytest

from advent24.day19 import (
    can_create,
    count_arrangements,
    count_possible,
    count_ways,
    main,
    parse,
)

DUMMY = """r, wr, b, g, bwu, rb, gb, br

brwrr
bggr
gbbr
rrbgbr
ubwu
bwurrg
brgr
bbrgwb"""

TOWELS = ["r", "wr", "b", "g", "bwu", "rb", "gb", "br"]


def test_part1():
    assert count_possible(DUMMY) == 6


def test_part2():
    assert count_arrangements(DUMMY) == 16


def test_parse():
    towels, targets = parse(DUMMY)
    assert towels == TOWELS
    assert targets[0] == "brwrr"
    assert len(targets) == 8


def test_parse_requires_blank_line():
    with pytest.raises(ValueError):
        parse("r, b\nrb")


@pytest.mark.parametrize(
    "design, possible",
    [("brwrr", True), ("bggr", True), ("ubwu", False), ("bbrgwb", False)],
)
def test_can_create(design, possible):
    assert can_create(design, TOWELS, {}) is possible


@pytest.mark.parametrize(
    "design, ways",
    [
        ("brwrr", 2),
        ("bggr", 1),
        ("gbbr", 4),
        ("rrbgbr", 6),
        ("ubwu", 0),
        ("bwurrg", 1),
        ("brgr", 2),
        ("bbrgwb", 0),
    ],
)
def test_count_ways(design, ways):
    assert count_ways(design, TOWELS, {}) == ways


def test_empty_pattern():
    assert count_ways("", TOWELS) == 1
    assert can_create("", TOWELS) is True


def test_main_part2(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(DUMMY)
    main([str(path), "--part", "2"])
    assert capsys.readouterr().out.strip() == "16"