"""A three-bit virtual machine and a search for a self-printing input."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path

_STEP_LIMIT = 101


@dataclass
class Machine:
    """Registers, program counter, program and collected output."""

    a: int
    b: int
    c: int
    program: tuple[int, ...]
    pc: int = 0
    output: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.program = tuple(self.program)

    @property
    def output_text(self) -> str:
        return ",".join(map(str, self.output))

    def combo(self, operand: int) -> int:
        """Resolve a combo operand to its value."""
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        if operand == 7:
            raise ValueError("combo operand 7 is reserved")
        raise ValueError(f"operand {operand} is larger than three bits")

    def step(self) -> bool:
        """Execute one instruction; return False once the program has halted."""
        opcode = self.program[self.pc]
        operand = self.program[self.pc + 1]
        next_pc = self.pc + 2
        if opcode == 0:
            self.a = self.a >> self.combo(operand)
        elif opcode == 1:
            self.b ^= operand
        elif opcode == 2:
            self.b = self.combo(operand) % 8
        elif opcode == 3:
            if self.a != 0:
                next_pc = operand
        elif opcode == 4:
            self.b ^= self.c
        elif opcode == 5:
            self.output.append(self.combo(operand) % 8)
        elif opcode == 6:
            self.b = self.a >> self.combo(operand)
        elif opcode == 7:
            self.c = self.a >> self.combo(operand)
        else:
            raise ValueError(f"unknown opcode {opcode}")
        self.pc = next_pc
        return self.pc < len(self.program)

    def run(self, limit: int | None = None) -> list[int]:
        """Step until halted or ``limit`` instructions ran; return the output."""
        steps = 0
        while limit is None or steps < limit:
            steps += 1
            if not self.step():
                break
        return self.output


def _field(line: str) -> str:
    _, sep, value = line.partition(":")
    if not sep:
        raise ValueError(f"expected 'name: value' in {line!r}")
    return value.strip()


def parse(text: str) -> Machine:
    """Build a machine from the register lines and the program line."""
    lines = text.splitlines()
    if len(lines) < 5:
        raise ValueError("expected three registers, a blank line and a program")
    a, b, c = (int(_field(line)) for line in lines[:3])
    program = tuple(int(item) for item in _field(lines[4]).split(","))
    return Machine(a, b, c, program)


def run_program(text: str) -> str:
    """Run the program and return every output value followed by a comma."""
    machine = parse(text)
    machine.run(_STEP_LIMIT)
    return "".join(f"{value}," for value in machine.output)


def _search(prefix: int, program: tuple[int, ...], b: int, c: int) -> int | None:
    expected = list(program)
    for low in range(8):
        candidate = (prefix << 3) | low
        output = Machine(candidate, b, c, program).run()
        if output == expected:
            return candidate
        if len(output) > len(expected):
            return None
        if not output or expected[-len(output):] == output:
            found = _search(candidate, program, b, c)
            if found is not None:
                return found
    return None


def find_quine(text: str) -> int:
    """Find a value of register A for which the program prints itself."""
    machine = parse(text)
    for start in range(1, 8):
        found = _search(start, machine.program, machine.b, machine.c)
        if found is not None:
            return found
    raise ValueError("no value of register A reproduces the program")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="day17")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2), default=1)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(run_program(text) if args.part == 1 else find_quine(text))


if __name__ == "__main__":
    main()