"""Towel arrangements: which designs can be built, and in how many ways."""

from __future__ import annotations

import argparse
from pathlib import Path


def parse(text: str) -> tuple[list[str], list[str]]:
    """Return the towel patterns and the target designs."""
    towels, sep, targets = text.partition("\n\n")
    if not sep:
        raise ValueError("expected a blank line between towels and designs")
    return [towel.strip() for towel in towels.split(",")], targets.splitlines()


def can_create(pattern: str, towels: list[str], cache: dict[str, bool] | None = None) -> bool:
    """Whether ``pattern`` can be built by concatenating towels."""
    if cache is None:
        cache = {}
    if pattern in cache:
        return cache[pattern]
    if not pattern:
        return True
    result = any(
        can_create(pattern[len(towel):], towels, cache)
        for towel in towels
        if pattern.startswith(towel)
    )
    cache[pattern] = result
    return result


def count_ways(pattern: str, towels: list[str], cache: dict[str, int] | None = None) -> int:
    """Number of distinct towel sequences that build ``pattern``."""
    if cache is None:
        cache = {}
    if not pattern:
        return 1
    if pattern in cache:
        return cache[pattern]
    total = sum(
        count_ways(pattern[len(towel):], towels, cache)
        for towel in towels
        if pattern.startswith(towel)
    )
    cache[pattern] = total
    return total


def count_possible(text: str) -> int:
    """Count the designs that can be built at all."""
    towels, targets = parse(text)
    cache: dict[str, bool] = {}
    return sum(1 for target in targets if can_create(target, towels, cache))


def count_arrangements(text: str) -> int:
    """Sum the number of ways every design can be built."""
    towels, targets = parse(text)
    cache: dict[str, int] = {}
    return sum(count_ways(target, towels, cache) for target in targets)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="day19")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(count_possible(text) if args.part == 1 else count_arrangements(text))


if __name__ == "__main__":
    main()