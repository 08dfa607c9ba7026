"""
Text and CSV rendering of routing tables.
"""

from pathlib import Path
from typing import Iterable, List, Mapping, Optional, TextIO
import csv
import math

from cost_matrix import DEFAULT_SENTINEL
from routing import RouteEntry


SELF_HOP = "-"
NO_HOP = "none"


def format_cost(cost: float, sentinel: int = DEFAULT_SENTINEL) -> str:
    if cost == math.inf:
        return str(sentinel)
    return str(int(cost)) if float(cost).is_integer() else str(cost)


def format_next_hop(node: int, entry: RouteEntry) -> str:
    if entry.dest == node:
        return SELF_HOP
    if entry.next_hop is None:
        return NO_HOP
    return str(entry.next_hop)


def format_table(node: int, entries: Iterable[RouteEntry], sentinel: int = DEFAULT_SENTINEL) -> str:
    """
    Render one node's table: header lines, one tab-separated row per
    destination, then a blank line.
    """
    lines: List[str] = [f"Node {node} Routing Table:", "Dest\tCost\tNext Hop"]
    for entry in entries:
        lines.append(f"{entry.dest}\t{format_cost(entry.cost, sentinel)}\t{format_next_hop(node, entry)}")
    return "\n".join(lines) + "\n\n"


def write_report(
    title: Optional[str],
    tables: Mapping[int, List[RouteEntry]],
    stream: TextIO,
    sentinel: int = DEFAULT_SENTINEL,
) -> None:
    """Write every node's table to stream in node order."""
    if title:
        stream.write(f"--- {title} ---\n")
    for node in sorted(tables):
        stream.write(format_table(node, tables[node], sentinel))


def write_routes_csv(
    path: Path,
    algorithm_tables: Mapping[str, Mapping[int, List[RouteEntry]]],
    sentinel: int = DEFAULT_SENTINEL,
) -> None:
    """
    Write all routes to CSV for downstream analysis.

    One row per (algorithm, node, dest). Unreachable costs are written as the
    sentinel and missing next hops as an empty field.
    """
    fieldnames = ["algorithm", "node", "dest", "cost", "next_hop"]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for algorithm, tables in algorithm_tables.items():
            for node in sorted(tables):
                for entry in tables[node]:
                    writer.writerow(
                        {
                            "algorithm": algorithm,
                            "node": node,
                            "dest": entry.dest,
                            "cost": format_cost(entry.cost, sentinel),
                            "next_hop": "" if entry.next_hop is None else entry.next_hop,
                        }
                    )
