import pytest

from advent24.day23 import Connection, parse

EXAMPLE = """kh-tc
qp-kh
de-cg
ka-co
yn-aq
qp-ub
cg-tb
vc-aq
tb-ka
wh-tc
yn-cg
kh-ub
ta-co
de-co
tc-td
tb-wq
wh-td
ta-ka
td-qp
aq-cg
wq-ub
ub-vc
de-ta
wq-aq
wq-vc
wh-yn
ka-de
kh-ta
co-tc
wh-qp
tb-vc
td-yn"""


def test_unseen_left_name_starts_new_group():
    assert parse("kh-tc\nqp-kh") == [
        Connection(["kh", "tc"]),
        Connection(["qp", "kh"]),
    ]


def test_known_left_name_extends_group():
    assert parse("a-b\nb-c") == [Connection(["a", "b", "c"])]


def test_example_node_count_invariant():
    groups = parse(EXAMPLE)
    lines = EXAMPLE.splitlines()
    # each new group holds two names, each extension adds one
    assert sum(len(group.nodes) for group in groups) == len(lines) + len(groups)


def test_example_every_left_name_is_grouped():
    groups = parse(EXAMPLE)
    grouped = {name for group in groups for name in group.nodes}
    assert {line.split("-")[0] for line in EXAMPLE.splitlines()} <= grouped


def test_example_groups_start_with_a_pair_from_input():
    pairs = {tuple(line.split("-")) for line in EXAMPLE.splitlines()}
    assert all(tuple(group.nodes[:2]) in pairs for group in parse(EXAMPLE))


def test_empty_input_gives_no_groups():
    assert parse("") == []


def test_missing_dash_raises():
    with pytest.raises(ValueError):
        parse("kh tc")