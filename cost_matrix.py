"""
Dense cost-matrix graph for the routing simulator.

Implements the Graph interface over an N x N table. The integer sentinel used
by topology files is translated to math.inf on the way in, so it can never
collide with a real cost and sums of unreachable legs stay unreachable.
"""

from typing import Dict, List, Mapping, Optional, Sequence
import math

from graph import Graph


DEFAULT_SENTINEL = 9999


class CostMatrixGraph(Graph):
    """
    Directed, weighted graph backed by a row-major cost table.

    Symmetry is not required. Diagonal entries are kept as given.
    """

    def __init__(self, costs: Sequence[Sequence[float]]) -> None:
        n = len(costs)
        rows: List[List[float]] = []
        for i, row in enumerate(costs):
            if len(row) != n:
                raise ValueError(f"Cost matrix row {i} has {len(row)} entries, expected {n}.")
            rows.append(list(row))
        self._costs = rows

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[int]], sentinel: Optional[int] = DEFAULT_SENTINEL
    ) -> "CostMatrixGraph":
        """
        Build a graph from integer rows, mapping the sentinel to math.inf.
        """
        return cls([[math.inf if c == sentinel else c for c in row] for row in rows])

    def __len__(self) -> int:
        return len(self._costs)

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Sequence[int]:
        return range(len(self._costs))

    def outgoing(self, node: int) -> Mapping[int, float]:
        out: Dict[int, float] = {}
        for dst, c in enumerate(self._costs[node]):
            if dst != node and c != math.inf:
                out[dst] = c
        return out

    def cost(self, src: int, dst: int) -> float:
        return self._costs[src][dst]
