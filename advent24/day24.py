"""Boolean gate circuit: evaluate the wires and read the ``z`` number."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Op(Enum):
    """A logic gate operation."""

    AND = "AND"
    OR = "OR"
    XOR = "XOR"

    def apply(self, left: bool, right: bool) -> bool:
        if self is Op.AND:
            return left and right
        if self is Op.OR:
            return left or right
        return left != right


@dataclass(frozen=True)
class Gate:
    """A gate combining two input wires into an output wire."""

    left: str
    right: str
    op: Op
    out: str


def _parse_initial(line: str) -> tuple[str, bool]:
    name, sep, value = line.partition(":")
    if not sep:
        raise ValueError(f"expected 'wire: value' in {line!r}")
    return name, int(value.strip()) != 0


def _parse_gate(line: str) -> Gate:
    parts = line.split(" ")
    if len(parts) < 5:
        raise ValueError(f"expected 'a OP b -> out' in {line!r}")
    left, op, right, _, out = parts[:5]
    try:
        operation = Op(op)
    except ValueError:
        raise ValueError(f"illegal operation: {op!r}") from None
    return Gate(left, right, operation, out)


def parse(text: str) -> tuple[dict[str, bool], list[Gate]]:
    """Return the initial wire values and the gates."""
    initial, sep, gates = text.partition("\n\n")
    if not sep:
        raise ValueError("expected a blank line between wires and gates")
    values = dict(_parse_initial(line) for line in initial.splitlines())
    return values, [_parse_gate(line) for line in gates.splitlines()]


def _wire(name: str, values: dict[str, bool], gates: list[Gate]) -> bool:
    if name in values:
        return values[name]
    source = next((gate for gate in gates if gate.out == name), None)
    if source is None:
        raise KeyError(f"wire {name!r} has no value and no gate drives it")
    return evaluate(source, values, gates)


def evaluate(gate: Gate, values: dict[str, bool], gates: list[Gate]) -> bool:
    """Compute a gate's output, evaluating undriven inputs through ``gates``."""
    left = _wire(gate.left, values, gates)
    right = _wire(gate.right, values, gates)
    return gate.op.apply(left, right)


def z_output(text: str) -> int:
    """Evaluate every gate and read ``z00``, ``z01``, ... as a binary number."""
    values, gates = parse(text)
    for gate in gates:
        values[gate.out] = evaluate(gate, values, gates)
    result = 0
    index = 0
    while (key := f"z{index:02}") in values:
        result |= int(values[key]) << index
        index += 1
    return result


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="day24")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    print(z_output(args.input.read_text()))


if __name__ == "__main__":
    main()