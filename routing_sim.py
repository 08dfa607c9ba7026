"""
CLI to compute DVR and LSR routing tables for a cost-matrix topology.

Reads the topology file, converges distance vectors over the whole network,
runs a link-state shortest-path search from every node, and prints each
node's routing table.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence
import argparse
import sys

from config import Config, load_config
from dijkstra_engine import SimpleDijkstraEngine
from distance_vector_engine import ConvergenceError, SimpleDistanceVectorEngine
from graph import Graph
from reporter import write_report, write_routes_csv
from simulation import RoutingTables, run_dvr, run_lsr, tables_agree
from topology_loader import MalformedTopologyError, load_cost_matrix


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on bad usage; this tool exits with 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="routing-sim",
        description="Compute distance-vector and link-state routing tables from a cost matrix.",
    )
    parser.add_argument("input_file", type=Path, help="Topology file: N followed by N*N costs")
    parser.add_argument("--config", type=Path, default=None, help="YAML run configuration")
    parser.add_argument(
        "--algorithm",
        choices=["dvr", "lsr", "both"],
        default=None,
        help="Which routing algorithm(s) to run (default: both)",
    )
    parser.add_argument("--max-passes", type=int, default=None, help="Cap on DV relaxation passes")
    parser.add_argument("--sentinel", type=int, default=None, help="Cost value meaning 'no direct edge'")
    parser.add_argument("--csv", type=Path, default=None, help="Also write all routes to this CSV file")
    parser.add_argument("--check", action="store_true", help="Fail if DVR and LSR costs disagree")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress progress messages")
    return parser


def run(graph: Graph, cfg: Config, stream, log=None) -> Dict[str, RoutingTables]:
    """
    Run the configured algorithms in order and report each to stream.

    Returns the tables per algorithm name.
    """
    log = log or (lambda msg: None)
    results: Dict[str, RoutingTables] = {}

    for algorithm in cfg.algorithms:
        if algorithm == "dvr":
            stream.write("\n--- Distance Vector Routing Simulation ---\n")
            engine = SimpleDistanceVectorEngine(max_passes=cfg.max_passes)
            dv_result, tables = run_dvr(graph, engine)
            log(f"[dvr] converged after {dv_result.passes} pass(es)")
            write_report("DVR Final Tables", tables, stream, cfg.sentinel)
        else:
            stream.write("\n--- Link State Routing Simulation ---\n")
            tables = run_lsr(graph, SimpleDijkstraEngine())
            log(f"[lsr] computed shortest-path trees for {len(tables)} source(s)")
            write_report(None, tables, stream, cfg.sentinel)
        results[algorithm] = tables

    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    def log(msg: str) -> None:
        if not args.quiet:
            print(msg, file=sys.stderr)

    try:
        cfg = load_config(args.config) if args.config else Config()
        algorithms: Optional[List[str]] = None
        if args.algorithm == "both":
            algorithms = ["dvr", "lsr"]
        elif args.algorithm:
            algorithms = [args.algorithm]
        cfg = cfg.with_overrides(
            sentinel=args.sentinel, max_passes=args.max_passes, algorithms=algorithms
        )
    except OSError as exc:
        print(f"Error: Could not read config {args.config}: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        graph = load_cost_matrix(args.input_file, sentinel=cfg.sentinel, log=log)
    except OSError:
        print(f"Error: Could not open file {args.input_file}", file=sys.stderr)
        return 1
    except MalformedTopologyError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    log(f"[load] read {len(graph)} node(s) from {args.input_file}")

    try:
        results = run(graph, cfg, sys.stdout, log)
    except ConvergenceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.csv:
        write_routes_csv(args.csv, results, cfg.sentinel)
        log(f"[csv] wrote routes to {args.csv}")

    if args.check:
        if "dvr" not in results or "lsr" not in results:
            print("Error: --check needs both dvr and lsr", file=sys.stderr)
            return 1
        mismatches = tables_agree(results["dvr"], results["lsr"])
        for node, dest, dvr_cost, lsr_cost in mismatches:
            print(f"[check] node={node} dest={dest} dvr={dvr_cost} lsr={lsr_cost}", file=sys.stderr)
        if mismatches:
            print(f"Error: {len(mismatches)} cost mismatch(es) between DVR and LSR", file=sys.stderr)
            return 1
        log("[check] DVR and LSR costs agree")

    return 0


if __name__ == "__main__":
    sys.exit(main())
