"""Monkey market secrets: pseudorandom sequences and the best price signal."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

_MASK = 0xFFFFFF
_ROUNDS = 2000

Sequence = tuple[int, int, int, int]


def parse(text: str) -> list[int]:
    """One initial secret per line."""
    return [int(line) for line in text.splitlines()]


def next_secret(seed: int) -> int:
    """Advance a secret by one round of mixing and pruning."""
    result = (seed ^ (seed << 6)) & _MASK
    result = (result ^ (result >> 5)) & _MASK
    return (result ^ (result << 11)) & _MASK


def _evolve(seed: int, rounds: int) -> int:
    for _ in range(rounds):
        seed = next_secret(seed)
    return seed


def secret_sum(text: str) -> int:
    """Sum of every buyer's secret after 2000 rounds."""
    return sum(_evolve(seed, _ROUNDS) for seed in parse(text))


def price_changes(seed: int, length: int) -> dict[Sequence, int]:
    """Map each run of four price changes to the price at its first occurrence."""
    prices = [seed % 10]
    secret = seed
    for _ in range(length):
        secret = next_secret(secret)
        prices.append(secret % 10)

    found: dict[Sequence, int] = {}
    for i in range(4, length):
        key = (
            prices[i - 3] - prices[i - 4],
            prices[i - 2] - prices[i - 3],
            prices[i - 1] - prices[i - 2],
            prices[i] - prices[i - 1],
        )
        found.setdefault(key, prices[i])
    return found


def best_sequence(text: str) -> tuple[Sequence, int]:
    """The change sequence that earns the most, and what it earns."""
    totals: Counter[Sequence] = Counter()
    for seed in parse(text):
        totals.update(price_changes(seed, _ROUNDS))
    if not totals:
        raise ValueError("no price change sequences in the input")
    return max(totals.items(), key=lambda item: item[1])


def best_bananas(text: str) -> int:
    """Most that can be earned with a single change sequence."""
    return best_sequence(text)[1]


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="day22")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(secret_sum(text) if args.part == 1 else best_bananas(text))


if __name__ == "__main__":
    main()