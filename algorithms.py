"""
Algorithm interfaces for routing.

Keeps graph algorithms separate from table building and reporting.
"""

from abc import ABC, abstractmethod
from typing import Optional

from graph import Graph
from routing import DistanceVectorResult, ShortestPathTree


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: int) -> ShortestPathTree:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            ShortestPathTree rooted at source; unreached nodes keep math.inf
            cost and a None predecessor.
        """
        raise NotImplementedError

    @abstractmethod
    def first_hop(self, tree: ShortestPathTree, dest: int) -> Optional[int]:
        """
        First node after tree.source on the path to dest, None if unreachable.
        """
        raise NotImplementedError


class DistanceVectorEngine(ABC):
    """
    Interface for a Bellman–Ford-style distance-vector computation.
    """

    @abstractmethod
    def converge(self, graph: Graph) -> DistanceVectorResult:
        """
        Relax every node's distance vector until no table changes.

        Returns:
            Distance and next-hop tables for every (source, dest) pair.
        """
        raise NotImplementedError
