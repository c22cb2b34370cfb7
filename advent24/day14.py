"""Robots patrolling a wrapping grid: safety factor and frame rendering."""

from __future__ import annotations

import argparse
import math
import re
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

_INT = r"[+-]?\d+"
_POSITION = re.compile(rf"p=({_INT}),({_INT})")
_VELOCITY = re.compile(rf" v=({_INT}),({_INT})")


@dataclass(frozen=True)
class Robot:
    """A robot with a starting position and a velocity per step."""

    x: int
    y: int
    vx: int
    vy: int

    def position_after(self, steps: int, width: int, height: int) -> tuple[int, int]:
        """Return the position after ``steps`` moves on a wrapping grid."""
        return (self.x + self.vx * steps) % width, (self.y + self.vy * steps) % height


def _parse_pair(pattern: re.Pattern[str], text: str, what: str) -> tuple[str, tuple[int, int]]:
    match = pattern.match(text)
    if match is None:
        raise ValueError(f"expected {what} at {text[:20]!r}")
    return text[match.end():], (int(match[1]), int(match[2]))


def parse_position(text: str) -> tuple[str, tuple[int, int]]:
    """Parse ``p=x,y`` at the start of ``text``; return the rest and the pair."""
    return _parse_pair(_POSITION, text, "position")


def parse_velocity(text: str) -> tuple[str, tuple[int, int]]:
    """Parse `` v=x,y`` at the start of ``text``; return the rest and the pair."""
    return _parse_pair(_VELOCITY, text, "velocity")


def parse_robot(text: str) -> tuple[str, Robot]:
    """Parse one robot line at the start of ``text``; return the rest and the robot."""
    rest, (x, y) = parse_position(text)
    rest, (vx, vy) = parse_velocity(rest)
    return rest, Robot(x, y, vx, vy)


def _strip_line_ending(text: str) -> str | None:
    for ending in ("\r\n", "\n"):
        if text.startswith(ending):
            return text[len(ending):]
    return None


def parse(text: str) -> list[Robot]:
    """Parse robots separated by line endings; at least one is required."""
    rest, robot = parse_robot(text)
    robots = [robot]
    while (after := _strip_line_ending(rest)) is not None:
        try:
            rest, robot = parse_robot(after)
        except ValueError:
            break
        robots.append(robot)
    return robots


def safety_factor(text: str, width: int, height: int, iterations: int) -> int:
    """Multiply the robot counts of the four quadrants after ``iterations`` steps."""
    mid_x, mid_y = width // 2, height // 2
    quadrants: Counter[tuple[bool, bool]] = Counter()
    for robot in parse(text):
        x, y = robot.position_after(iterations, width, height)
        if x == mid_x or y == mid_y:
            continue
        quadrants[(x > mid_x, y > mid_y)] += 1
    return math.prod(
        quadrants[key]
        for key in ((False, False), (True, False), (False, True), (True, True))
    )


def render(positions: Iterable[tuple[int, int]], width: int, height: int) -> str:
    """Draw occupied cells as ``X`` and empty cells as ``.``."""
    occupied = set(positions)
    return "\n".join(
        "".join("X" if (x, y) in occupied else "." for x in range(width))
        for y in range(height)
    )


def frames(text: str, width: int, height: int, count: int) -> Iterator[tuple[int, str]]:
    """Yield ``(step, picture)`` for the first ``count`` steps."""
    robots = parse(text)
    for step in range(count):
        positions = (robot.position_after(step, width, height) for robot in robots)
        yield step, render(positions, width, height)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="day14")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    parser.add_argument("--width", type=int, default=101)
    parser.add_argument("--height", type=int, default=103)
    parser.add_argument("--iterations", type=int, default=100)
    parser.add_argument("--frames", type=int, default=10000)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    if args.part == 1:
        print(safety_factor(text, args.width, args.height, args.iterations))
    else:
        for step, picture in frames(text, args.width, args.height, args.frames):
            print(step)
            print(picture)
            print()


if __name__ == "__main__":
    main()