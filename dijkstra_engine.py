"""
Array-based DijkstraEngine implementation for link-state routing.

Selection is a linear scan rather than a heap so that ties are broken
deterministically by lowest node index.
"""

from typing import List, Optional
import math

from algorithms import DijkstraEngine
from graph import Graph
from routing import ShortestPathTree


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra with O(N) minimum selection.

    Complexity:
        O(N^2) per source, O(N^3) for a full link-state table.
    """

    def shortest_paths(self, graph: Graph, source: int) -> ShortestPathTree:
        """
        Greedy expansion from source recording predecessors.

        Each iteration settles the unvisited node with the smallest tentative
        cost; the first minimum found while scanning indices wins ties. The
        search stops early once only unreachable nodes are left. Edges are
        relaxed only towards unvisited neighbours.
        """
        n = len(graph.nodes())
        dist: List[float] = [math.inf] * n
        prev: List[Optional[int]] = [None] * n
        visited = [False] * n
        dist[source] = 0

        for _ in range(n):
            u = -1
            for j in range(n):
                if not visited[j] and (u == -1 or dist[j] < dist[u]):
                    u = j

            if u == -1 or dist[u] == math.inf:
                break  # remaining nodes are unreachable

            visited[u] = True

            for v, w in graph.outgoing(u).items():
                if visited[v]:
                    continue
                alt = dist[u] + w
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u

        return ShortestPathTree(source=source, dist=dist, prev=prev)

    def first_hop(self, tree: ShortestPathTree, dest: int) -> Optional[int]:
        """
        Walk predecessors back from dest until the node whose parent is the source.

        Hitting a missing predecessor first means dest is not in the tree.
        """
        if dest == tree.source:
            return None

        hop = dest
        while tree.prev[hop] != tree.source and tree.prev[hop] is not None:
            hop = tree.prev[hop]

        if tree.prev[hop] is None:
            return None
        return hop
