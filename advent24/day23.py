"""LAN party connections grouped as the pairs are read."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Connection:
    """A group of computer names gathered from connection pairs."""

    nodes: list[str] = field(default_factory=list)


def parse(text: str) -> list[Connection]:
    """Group the ``a-b`` pairs of ``text`` in reading order.

    A pair whose left name is already in a group extends that group with the
    right name. A pair naming the same computer twice extends the first
    non-empty group with it. Any other pair starts a new group.
    """
    groups: list[Connection] = []
    for line in text.splitlines():
        left, sep, right = line.partition("-")
        if not sep:
            raise ValueError(f"expected 'a-b' in {line!r}")
        for group in groups:
            if left in group.nodes:
                group.nodes.append(right)
                break
            if group.nodes and left == right:
                group.nodes.append(left)
                break
        else:
            groups.append(Connection([left, right]))
    return groups