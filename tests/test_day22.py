import pytest

from advent24.day22 import (
    best_bananas,
    best_sequence,
    main,
    next_secret,
    parse,
    price_changes,
    secret_sum,
)

SEQUENCE_FROM_123 = [
    123,
    15887950,
    16495136,
    527345,
    704524,
    1553684,
    12683156,
    11100544,
    12249484,
    7753432,
    5908254,
]


def test_parse():
    assert parse("1\n10\n100\n2024") == [1, 10, 100, 2024]


def test_one_number_sequence():
    secrets = parse("123")
    for _ in range(10):
        secrets.append(next_secret(secrets[-1]))
    assert secrets == SEQUENCE_FROM_123


@pytest.mark.parametrize("seed, expected", [(1, 8685429), (10, 4700978)])
def test_secret_after_2000_rounds(seed, expected):
    assert secret_sum(str(seed)) == expected


def test_secret_sum_four_numbers():
    assert secret_sum("1\n10\n100\n2024") == 37327623


def test_price_differences_for_123():
    prices = [value % 10 for value in SEQUENCE_FROM_123]
    computed = []
    secret = 123
    for _ in range(10):
        secret = next_secret(secret)
        computed.append(secret % 10)
    assert computed == prices[1:]
    diffs = [b - a for a, b in zip(prices, prices[1:])][:9]
    assert diffs == [-3, 6, -1, -1, 0, 2, -2, 0, -2]


def test_price_changes_for_123():
    changes = price_changes(123, 10)
    assert len(changes) == 6
    assert changes[(-3, 6, -1, -1)] == 4
    assert changes[(6, -1, -1, 0)] == 4
    assert changes[(2, -2, 0, -2)] == 2


def test_best_sequence_four_numbers():
    assert best_sequence("1\n2\n3\n2024") == ((-2, 1, -1, 3), 23)


def test_best_bananas_four_numbers():
    assert best_bananas("1\n2\n3\n2024") == 23


def test_best_sequence_empty_input():
    with pytest.raises(ValueError):
        best_sequence("")


def test_main_prints_sum(tmp_path, capsys):
    path = tmp_path / "secrets.txt"
    path.write_text("1\n10\n100\n2024")
    main([str(path)])
    assert capsys.readouterr().out.strip() == "37327623"