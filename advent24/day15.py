"""Warehouse robot pushing single-cell crates around."""

from __future__ import annotations

import argparse
from enum import Enum
from pathlib import Path

Grid = list[list[str]]


class Direction(Enum):
    """A move instruction, valued by its symbol."""

    LEFT = "<"
    UP = "^"
    RIGHT = ">"
    DOWN = "v"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}

_SYMBOLS = {direction.value for direction in Direction}


def parse(text: str) -> tuple[Grid, list[Direction]]:
    """Split the input into the grid and the list of moves."""
    grid: Grid = []
    moves: list[Direction] = []
    lines = iter(text.splitlines())
    for line in lines:
        if not line:
            break
        grid.append(list(line))
    for line in lines:
        moves.extend(Direction(ch) for ch in line if ch in _SYMBOLS)
    return grid, moves


def extract_robot(grid: Grid) -> tuple[int, int] | None:
    """Find the robot, clear its cell and return its ``(x, y)``."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == "@":
                row[x] = "."
                return x, y
    return None


def render(grid: Grid, x: int, y: int) -> str:
    """Draw the grid with the robot at ``(x, y)``."""
    return "\n".join(
        "".join("@" if (cx, cy) == (x, y) else cell for cx, cell in enumerate(row))
        for cy, row in enumerate(grid)
    )


def _inside(grid: Grid, x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def move_robot(grid: Grid, direction: Direction, x: int, y: int) -> tuple[int, int]:
    """Push any crates ahead, then step if possible; return the new position."""
    dx, dy = direction.delta
    nx, ny = x + dx, y + dy
    if grid[ny][nx] == "O":
        cx, cy = nx, ny
        while _inside(grid, cx, cy):
            cell = grid[cy][cx]
            if cell == ".":
                grid[cy][cx] = "O"
                grid[ny][nx] = "."
                break
            if cell == "#":
                break
            cx, cy = cx + dx, cy + dy
    if grid[ny][nx] == ".":
        return nx, ny
    return x, y


def gps_sum(text: str) -> int:
    """Run all moves and sum ``100 * row + column`` over every crate."""
    grid, moves = parse(text)
    robot = extract_robot(grid)
    if robot is None:
        raise ValueError("no robot in the grid")
    x, y = robot
    for direction in moves:
        x, y = move_robot(grid, direction, x, y)
    return sum(
        100 * r + c
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == "O"
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="day15")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    print(gps_sum(args.input.read_text()))


if __name__ == "__main__":
    main()