"""
Directed, weighted graph abstraction for the routing simulator.

Nodes are integer indices 0..N-1.
Edges are directed: u -> v with a non-negative cost.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Sequence


class Graph(ABC):
    """Directed, weighted graph over integer node indices."""

    @abstractmethod
    def nodes(self) -> Sequence[int]:
        """Return all nodes in the graph, in index order."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: int) -> Mapping[int, float]:
        """
        Outgoing neighbours and edge costs for a given node.

        Returns: dict[int, float], unreachable pairs omitted.
        """
        raise NotImplementedError

    @abstractmethod
    def cost(self, src: int, dst: int) -> float:
        """
        Direct edge cost src -> dst, or math.inf when there is no edge.
        """
        raise NotImplementedError
