"""Warehouse robot pushing double-width crates around."""

from __future__ import annotations

import argparse
from pathlib import Path

from .day15 import Direction, render

__all__ = [
    "Direction",
    "can_crate_move",
    "extract_robot",
    "gps_sum",
    "main",
    "move_crate",
    "move_robot",
    "parse",
    "render",
]

Grid = list[list[str]]

_WIDEN = {"O": ("[", "]"), "@": ("@", ".")}
_SYMBOLS = {direction.value for direction in Direction}


def parse(text: str) -> tuple[Grid, list[Direction]]:
    """Split the input into the widened grid and the list of moves."""
    grid: Grid = []
    moves: list[Direction] = []
    lines = iter(text.splitlines())
    for line in lines:
        if not line:
            break
        grid.append([cell for ch in line for cell in _WIDEN.get(ch, (ch, ch))])
    for line in lines:
        moves.extend(Direction(ch) for ch in line if ch in _SYMBOLS)
    return grid, moves


def extract_robot(grid: Grid) -> tuple[int, int] | None:
    """Find the robot, clear its cell and return its ``(x, y)``, or None."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == "@":
                row[x] = "."
                return x, y
    return None


def can_crate_move(grid: Grid, direction: Direction, x: int, y: int) -> bool:
    """Whether the crate whose left half is at ``(x, y)`` can move one step."""
    if direction is Direction.LEFT:
        ahead = grid[y][x - 1]
        if ahead == ".":
            return True
        if ahead == "]":
            return can_crate_move(grid, direction, x - 2, y)
        return False
    if direction is Direction.RIGHT:
        ahead = grid[y][x + 2]
        if ahead == ".":
            return True
        if ahead == "[":
            return can_crate_move(grid, direction, x + 2, y)
        return False

    ny = y + direction.delta[1]
    row = grid[ny]
    if row[x] == "." and row[x + 1] == ".":
        return True
    if row[x] == "[":
        return can_crate_move(grid, direction, x, ny)
    if row[x - 1] == "[" and row[x + 1] == ".":
        return can_crate_move(grid, direction, x - 1, ny)
    if row[x] == "." and row[x + 1] == "[":
        return can_crate_move(grid, direction, x + 1, ny)
    if row[x - 1] == "[" and row[x] == "]" and row[x + 1] == "[" and row[x + 2] == "]":
        left_ok = can_crate_move(grid, direction, x - 1, ny)
        right_ok = can_crate_move(grid, direction, x + 1, ny)
        return left_ok and right_ok
    return False


def move_crate(grid: Grid, direction: Direction, x: int, y: int) -> None:
    """Move the crate whose left half is at ``(x, y)``, pushing crates ahead of it."""
    row = grid[y]
    if direction is Direction.LEFT:
        if row[x - 1] == "]":
            move_crate(grid, direction, x - 2, y)
        row[x - 1] = "["
        row[x] = "]"
        row[x + 1] = "."
        return
    if direction is Direction.RIGHT:
        if row[x + 2] == "[":
            move_crate(grid, direction, x + 2, y)
        row[x + 1] = "["
        row[x + 2] = "]"
        row[x] = "."
        return

    ny = y + direction.delta[1]
    ahead = grid[ny]
    if ahead[x] == "[":
        move_crate(grid, direction, x, ny)
    if ahead[x] == "]" and ahead[x + 1] == ".":
        move_crate(grid, direction, x - 1, ny)
    if ahead[x] == "." and ahead[x + 1] == "[":
        move_crate(grid, direction, x + 1, ny)
    if ahead[x] == "]" and ahead[x + 1] == "[":
        move_crate(grid, direction, x - 1, ny)
        move_crate(grid, direction, x + 1, ny)
    if ahead[x] == "." and ahead[x + 1] == ".":
        ahead[x] = "["
        ahead[x + 1] = "]"
        row[x] = "."
        row[x + 1] = "."


def move_robot(grid: Grid, direction: Direction, x: int, y: int) -> tuple[int, int]:
    """Push any crates ahead if they can move, then step; return the new position."""
    row = grid[y]
    if direction is Direction.LEFT:
        if row[x - 1] == "]" and can_crate_move(grid, direction, x - 2, y):
            move_crate(grid, direction, x - 2, y)
        if row[x - 1] == ".":
            return x - 1, y
        return x, y
    if direction is Direction.RIGHT:
        if row[x + 1] == "[" and can_crate_move(grid, direction, x + 1, y):
            move_crate(grid, direction, x + 1, y)
        if row[x + 1] == ".":
            return x + 1, y
        return x, y

    ny = y + direction.delta[1]
    ahead = grid[ny]
    if ahead[x] == "[" and can_crate_move(grid, direction, x, ny):
        move_crate(grid, direction, x, ny)
    if ahead[x - 1] == "[" and can_crate_move(grid, direction, x - 1, ny):
        move_crate(grid, direction, x - 1, ny)
    if ahead[x] == ".":
        return x, ny
    return x, y


def gps_sum(text: str) -> int:
    """Run all moves and sum ``100 * row + column`` over every crate's left half."""
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
        if cell == "["
    )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="day15_wide")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    print(gps_sum(args.input.read_text()))


if __name__ == "__main__":
    main()