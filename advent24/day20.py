"""Race track cheats: how much time removing a single wall can save."""

from __future__ import annotations

import argparse
from collections import Counter, deque
from pathlib import Path

__all__ = ["cheat_savings", "count_cheats", "main", "parse", "path_length"]

Grid = list[list[str]]
Position = tuple[int, int]

_THRESHOLD = 100
_STEPS = ((0, 1), (-1, 0), (1, 0), (0, -1))


def parse(text: str) -> tuple[Grid, Position, Position]:
    """Read the track; return the grid with the end cleared, plus start and end."""
    grid: Grid = []
    start: Position = (0, 0)
    end: Position = (0, 0)
    for r, line in enumerate(text.splitlines()):
        row: list[str] = []
        for c, ch in enumerate(line):
            if ch == "E":
                end = (r, c)
                row.append(".")
                continue
            if ch == "S":
                start = (r, c)
            row.append(ch)
        grid.append(row)
    return grid, start, end


def path_length(grid: Grid, start: Position, end: Position) -> int | None:
    """Fewest steps from ``start`` to ``end`` avoiding walls, or None."""
    distances = {start: 0}
    pending = deque([start])
    while pending:
        position = pending.popleft()
        if position == end:
            return distances[position]
        r, c = position
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < len(grid) and 0 <= nc < len(grid[nr])):
                continue
            if grid[nr][nc] == "#" or (nr, nc) in distances:
                continue
            distances[(nr, nc)] = distances[position] + 1
            pending.append((nr, nc))
    return None


def cheat_savings(text: str) -> dict[int, int]:
    """Map each saving to how many inner walls give it when removed alone."""
    grid, start, end = parse(text)
    baseline = path_length(grid, start, end)
    if baseline is None:
        raise ValueError("the end cannot be reached")
    savings: Counter[int] = Counter()
    for r in range(1, len(grid) - 1):
        row = grid[r]
        for c in range(1, len(row) - 1):
            if row[c] != "#":
                continue
            row[c] = "."
            length = path_length(grid, start, end)
            row[c] = "#"
            if length is not None and length < baseline:
                savings[baseline - length] += 1
    return dict(sorted(savings.items()))


def count_cheats(text: str, threshold: int = _THRESHOLD) -> int:
    """Number of walls whose removal saves at least ``threshold`` steps."""
    return sum(
        count for saving, count in cheat_savings(text).items() if saving >= threshold
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="day20")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--threshold", type=int, default=_THRESHOLD)
    args = parser.parse_args(argv)
    print(count_cheats(args.input.read_text(), args.threshold))


if __name__ == "__main__":
    main()