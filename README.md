# advent24

Solvers for a set of December 2024 puzzles: robots wandering a wrapping
grid, crate-pushing warehouses, reindeer mazes, a three-bit virtual
machine, falling bytes, towel patterns, racetrack cheats, monkey-market
secret numbers, LAN party connections and a logic-gate circuit.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

Each day lives in its own module and takes the puzzle input as text.

```python
from advent24 import day14, day15, day17, day19, day22

robots = open("robots.txt").read()
print(day14.safety_factor(robots, 11, 7, 100))

print(day15.gps_sum(open("warehouse.txt").read()))

machine = open("machine.txt").read()
print(day17.run_program(machine))   # e.g. "4,6,3,5,6,3,5,2,1,0,"
print(day17.find_quine(machine))

towels = open("towels.txt").read()
print(day19.count_possible(towels))
print(day19.count_arrangements(towels))

print(day22.next_secret(123))          # 15887950
print(day22.secret_sum("1\n10\n100\n2024"))
```

What each module offers:

| Module                | Names |
|-----------------------|-------|
| `advent24.day14`      | `Robot` (with `position_after`), `parse_position`, `parse_velocity`, `parse_robot`, `parse`, `safety_factor`, `render`, `frames` |
| `advent24.day15`      | `Direction`, `parse`, `extract_robot`, `render`, `move_robot`, `gps_sum` |
| `advent24.day15_wide` | `parse`, `extract_robot`, `can_crate_move`, `move_crate`, `move_robot`, `gps_sum` (crates two cells wide) |
| `advent24.day16`      | `Heading`, `parse`, `lowest_score`, `best_path_tiles` |
| `advent24.day17`      | `Machine` (with `combo`, `step`, `run`, `output_text`), `parse`, `run_program`, `find_quine` |
| `advent24.day18`      | `parse`, `create_grid`, `path_length`, `shortest_path`, `first_blocking` |
| `advent24.day19`      | `parse`, `can_create`, `count_ways`, `count_possible`, `count_arrangements` |
| `advent24.day20`      | `parse`, `path_length`, `cheat_savings`, `count_cheats` |
| `advent24.day22`      | `parse`, `next_secret`, `secret_sum`, `price_changes`, `best_sequence`, `best_bananas` |
| `advent24.day23`      | `Connection`, `parse` |
| `advent24.day24`      | `Op`, `Gate`, `parse`, `evaluate`, `z_output` |

Some behaviour worth knowing:

- `day17.run_program` stops after at most 101 instructions and returns every
  output value followed by a comma. `find_quine` raises `ValueError` when no
  value of register A makes the program print itself.
- `day18.shortest_path` returns 0 when the exit cannot be reached;
  `first_blocking` raises `ValueError` when no byte cuts the exit off.
- `day16.lowest_score` returns 0 when the end cannot be reached.
- `day20.cheat_savings` maps each saving to the number of single inner walls
  whose removal gives it.

## Commands

Installing the package also installs one command per day. Each reads a
puzzle input file (`input.txt` in the current directory unless a path is
given) and prints the answer.

| Command               | Options |
|-----------------------|---------|
| `advent24-day14`      | `--part {1,2}`, `--width` (101), `--height` (103), `--iterations` (100), `--frames` (10000) |
| `advent24-day15`      | none |
| `advent24-day15-wide` | none |
| `advent24-day16`      | `--part {1,2}` |
| `advent24-day17`      | `--part {1,2}` |
| `advent24-day18`      | `--part {1,2}`, `--size` (71), `--count` (1025) |
| `advent24-day19`      | `--part {1,2}` |
| `advent24-day20`      | `--threshold` (100) |
| `advent24-day22`      | `--part {1,2}` |
| `advent24-day24`      | none |

For example:

```
advent24-day18 bytes.txt --part 2 --size 7
```

## What the package does not do

- `advent24-day14 --part 2` prints each frame numbered by its step; it does
  not pick out the frame with a picture in it. That is left to the reader.
- `advent24.day23` only groups the connection pairs in reading order; it
  computes no answer for that day and has no command.