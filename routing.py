"""
Routing data structures shared by both engines and the reporter.

Unreachable costs are math.inf; a missing next hop is None.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class RouteEntry:
    """
    Single forwarding entry in a node's routing table.
    """
    dest: int
    cost: float
    next_hop: Optional[int]  # None for self and unreachable destinations


@dataclass
class DistanceVectorResult:
    """
    Converged DV state for the whole network.

    dist[i][j] is the best cost from i to j and next_hop[i][j] the first hop
    on that path. passes counts full relaxation scans, the final quiet one
    included.
    """
    dist: List[List[float]]
    next_hop: List[List[Optional[int]]]
    passes: int


@dataclass
class ShortestPathTree:
    """
    Single-source search output: distance array and predecessor array.
    """
    source: int
    dist: List[float]
    prev: List[Optional[int]]
