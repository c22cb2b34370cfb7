"""Falling bytes on a square memory grid: shortest escape and the first cut-off."""

from __future__ import annotations

import argparse
from collections import deque
from pathlib import Path

Grid = list[list[str]]
Block = tuple[int, int]

_DEFAULT_SIZE = 71
_DEFAULT_COUNT = 1025
_STEPS = ((0, 1), (-1, 0), (1, 0), (0, -1))


def parse(text: str) -> list[Block]:
    """One ``x,y`` byte position per line."""
    blocks: list[Block] = []
    for line in text.splitlines():
        x, sep, y = line.partition(",")
        if not sep:
            raise ValueError(f"expected 'x,y' in {line!r}")
        blocks.append((int(x), int(y)))
    return blocks


def create_grid(size: int) -> Grid:
    """An empty ``size`` by ``size`` grid."""
    return [["."] * size for _ in range(size)]


def path_length(grid: Grid) -> int | None:
    """Fewest steps from the top-left to the bottom-right corner, or None."""
    size = len(grid)
    start = (0, 0)
    end = (size - 1, size - 1)
    distances = {start: 0}
    pending = deque([start])
    while pending:
        position = pending.popleft()
        if position == end:
            return distances[position]
        r, c = position
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < size and 0 <= nc < size):
                continue
            if grid[nr][nc] == "#" or (nr, nc) in distances:
                continue
            distances[(nr, nc)] = distances[position] + 1
            pending.append((nr, nc))
    return None


def _drop(grid: Grid, block: Block) -> None:
    x, y = block
    grid[y][x] = "#"


def shortest_path(text: str, grid_size: int, count: int) -> int:
    """Steps to escape after the first ``count`` bytes fell, or 0 if cut off."""
    blocks = parse(text)
    if count > len(blocks):
        raise ValueError(f"only {len(blocks)} bytes given, {count} requested")
    grid = create_grid(grid_size)
    for block in blocks[:count]:
        _drop(grid, block)
    length = path_length(grid)
    return 0 if length is None else length


def first_blocking(text: str, grid_size: int) -> Block:
    """The first byte after whose fall the exit can no longer be reached."""
    grid = create_grid(grid_size)
    for block in parse(text):
        _drop(grid, block)
        if path_length(grid) is None:
            return block
    raise ValueError("no byte cuts off the exit")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="day18")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    parser.add_argument("--size", type=int, default=_DEFAULT_SIZE)
    parser.add_argument("--count", type=int, default=_DEFAULT_COUNT)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    if args.part == 1:
        print(shortest_path(text, args.size, args.count))
    else:
        x, y = first_blocking(text, args.size)
        print(f"{x},{y}")


if __name__ == "__main__":
    main()