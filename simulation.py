"""
Simulation utilities: run an engine over the whole network and collect
per-node routing tables.
"""

from typing import Dict, List, Mapping, Tuple

from algorithms import DijkstraEngine, DistanceVectorEngine
from graph import Graph
from routing import DistanceVectorResult, RouteEntry


RoutingTables = Dict[int, List[RouteEntry]]


def run_dvr(graph: Graph, engine: DistanceVectorEngine) -> Tuple[DistanceVectorResult, RoutingTables]:
    """
    Converge distance vectors and split them into one table per node.

    Each table lists every destination, the node itself included.
    """
    result = engine.converge(graph)
    tables: RoutingTables = {}
    for i in graph.nodes():
        tables[i] = [
            RouteEntry(dest=j, cost=result.dist[i][j], next_hop=result.next_hop[i][j])
            for j in graph.nodes()
        ]
    return result, tables


def run_lsr(graph: Graph, engine: DijkstraEngine) -> RoutingTables:
    """
    Run a shortest-path search from every source and derive first hops.

    The source's own row is omitted from its table.
    """
    tables: RoutingTables = {}
    for src in graph.nodes():
        tree = engine.shortest_paths(graph, src)
        tables[src] = [
            RouteEntry(dest=d, cost=tree.dist[d], next_hop=engine.first_hop(tree, d))
            for d in graph.nodes()
            if d != src
        ]
    return tables


def tables_agree(dvr_tables: Mapping[int, List[RouteEntry]], lsr_tables: Mapping[int, List[RouteEntry]]) -> List[Tuple[int, int, float, float]]:
    """
    Compare costs between two sets of tables.

    Returns (node, dest, dvr_cost, lsr_cost) for every mismatch; an empty
    list means both algorithms found the same shortest-path costs. Next hops
    are not compared since equal-cost paths may legitimately differ.
    """
    mismatches: List[Tuple[int, int, float, float]] = []
    for node, lsr_entries in lsr_tables.items():
        dvr_costs = {e.dest: e.cost for e in dvr_tables.get(node, [])}
        for entry in lsr_entries:
            dvr_cost = dvr_costs.get(entry.dest)
            if dvr_cost != entry.cost:
                mismatches.append((node, entry.dest, dvr_cost, entry.cost))
    return mismatches
