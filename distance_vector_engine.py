"""
Simple Bellman–Ford-style distance-vector engine.

Every node learns from every other node's current vector until a full scan
over the network leaves all tables unchanged.
"""

from typing import List, Optional
import math

from algorithms import DistanceVectorEngine
from graph import Graph
from routing import DistanceVectorResult


class ConvergenceError(RuntimeError):
    """Raised when the tables still change after the configured pass cap."""


class SimpleDistanceVectorEngine(DistanceVectorEngine):
    """
    Full-table DV relaxation over a dense distance table.

    Args:
        max_passes: optional cap on full scans. None keeps scanning until
            convergence, which never happens on a negative-cost cycle.
    """

    def __init__(self, max_passes: Optional[int] = None) -> None:
        if max_passes is not None and max_passes < 1:
            raise ValueError("max_passes must be at least 1")
        self.max_passes = max_passes

    def converge(self, graph: Graph) -> DistanceVectorResult:
        """
        Initialise from the direct costs and relax until a quiet scan.

        The distance table starts as a copy of the cost matrix. Any direct
        edge i -> j (i != j) seeds next_hop[i][j] = j; everything else starts
        with no next hop.
        """
        nodes = list(graph.nodes())
        dist: List[List[float]] = [[graph.cost(i, j) for j in nodes] for i in nodes]
        next_hop: List[List[Optional[int]]] = [
            [j if i != j and dist[i][j] != math.inf else None for j in nodes] for i in nodes
        ]

        passes = 0
        while True:
            if self.max_passes is not None and passes >= self.max_passes:
                raise ConvergenceError(
                    f"Distance vectors still changing after {passes} passes."
                )
            passes += 1
            if self.relax_pass(dist, next_hop) == 0:
                break

        return DistanceVectorResult(dist=dist, next_hop=next_hop, passes=passes)

    @staticmethod
    def relax_pass(dist: List[List[float]], next_hop: List[List[Optional[int]]]) -> int:
        """
        One scan over every ordered triple (i, j, k); returns the update count.

        If going through k beats the current i -> j cost we adopt it and
        forward towards k's first hop. Reads see writes made earlier in the
        same scan, so news can travel more than one hop per pass.
        """
        n = len(dist)
        updates = 0
        for i in range(n):
            row_i = dist[i]
            for j in range(n):
                for k in range(n):
                    candidate = row_i[k] + dist[k][j]
                    if candidate < row_i[j]:
                        row_i[j] = candidate
                        next_hop[i][j] = next_hop[i][k]
                        updates += 1
        return updates
