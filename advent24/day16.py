"""Reindeer maze: cheapest route score and the tiles on every cheapest route."""

from __future__ import annotations

import argparse
import heapq
from collections import defaultdict, deque
from enum import Enum
from itertools import count
from pathlib import Path

Grid = list[list[str]]
Position = tuple[int, int]

_STEP_COST = 1
_TURN_COST = 1000


class Heading(Enum):
    """A compass heading, valued by its ``(row, column)`` step."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    def turns(self) -> tuple[Heading, Heading]:
        """The two headings reached by a quarter turn."""
        if self in (Heading.NORTH, Heading.SOUTH):
            return Heading.EAST, Heading.WEST
        return Heading.NORTH, Heading.SOUTH

    def ahead(self, position: Position) -> Position:
        """The position one step ahead of ``position``."""
        dr, dc = self.value
        return position[0] + dr, position[1] + dc


def parse(text: str) -> tuple[Grid, Position, Position]:
    """Return the grid, the start and the end as ``(row, column)``.

    The end cell is stored as an open floor tile.
    """
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


def _is_open(grid: Grid, position: Position) -> bool:
    r, c = position
    return 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] != "#"


def lowest_score(text: str) -> int:
    """Score of the cheapest route from start to end, or 0 if there is none.

    Each step forward costs 1; a step that also turns a quarter costs 1001.
    """
    grid, start, end = parse(text)
    tiebreak = count()
    queue: list[tuple[int, int, Position, Heading]] = [(0, next(tiebreak), start, Heading.EAST)]
    visited: set[tuple[Position, Heading]] = set()

    while queue:
        cost, _, position, heading = heapq.heappop(queue)
        if (position, heading) in visited:
            continue
        visited.add((position, heading))
        if position == end:
            return cost

        options = [(heading, _STEP_COST)]
        options.extend((turned, _TURN_COST + _STEP_COST) for turned in heading.turns())
        for new_heading, step_cost in options:
            target = new_heading.ahead(position)
            if _is_open(grid, target) and (target, new_heading) not in visited:
                heapq.heappush(queue, (cost + step_cost, next(tiebreak), target, new_heading))
    return 0


def best_path_tiles(text: str) -> int:
    """Number of tiles lying on at least one cheapest route.

    Moving forward costs 1 and turning in place a quarter costs 1000.
    """
    grid, start, end = parse(text)
    State = tuple[Position, Heading]
    origin: State = (start, Heading.EAST)
    tiebreak = count()
    lowest: dict[State, int] = {origin: 0}
    predecessors: defaultdict[State, list[State]] = defaultdict(list)
    queue: list[tuple[int, int, State]] = [(0, next(tiebreak), origin)]
    best: int | None = None
    ends: list[State] = []

    while queue:
        cost, _, state = heapq.heappop(queue)
        if cost > lowest[state]:
            continue
        position, heading = state
        if position == end:
            if best is not None and cost > best:
                break
            best = cost
            ends.append(state)

        options: list[tuple[State, int]] = []
        forward = heading.ahead(position)
        if _is_open(grid, forward):
            options.append(((forward, heading), cost + _STEP_COST))
        options.extend(((position, turned), cost + _TURN_COST) for turned in heading.turns())

        for new_state, new_cost in options:
            known = lowest.get(new_state)
            if known is not None and new_cost > known:
                continue
            if known is None or new_cost < known:
                lowest[new_state] = new_cost
                predecessors[new_state] = []
                heapq.heappush(queue, (new_cost, next(tiebreak), new_state))
            predecessors[new_state].append(state)

    seen: set[State] = set(ends)
    pending = deque(ends)
    while pending:
        for previous in predecessors.get(pending.popleft(), ()):
            if previous not in seen:
                seen.add(previous)
                pending.append(previous)
    return len({position for position, _ in seen})


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="day16")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(lowest_score(text) if args.part == 1 else best_path_tiles(text))


if __name__ == "__main__":
    main()