from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


def edge_key(a: int, b: int) -> Tuple[int, int]:
    """Orientation-free key for the pair {a, b}."""
    return (a, b) if a <= b else (b, a)


@dataclass(frozen=True)
class Edge:
    source: int
    destination: int
    weight: int = 1

    def __post_init__(self) -> None:
        if self.source == self.destination:
            raise ValueError(f"self-loop on node {self.source} is not a valid edge")

    @property
    def key(self) -> Tuple[int, int]:
        return edge_key(self.source, self.destination)

    def connects(self, a: int, b: int) -> bool:
        return self.key == edge_key(a, b)

    def other(self, node_id: int) -> int:
        if node_id == self.source:
            return self.destination
        if node_id == self.destination:
            return self.source
        raise ValueError(f"node {node_id} is not an endpoint of {self}")
