"""
Reads cost-matrix topology files.

Format: the node count N followed by N*N integer costs, row-major, separated
by any whitespace. The sentinel integer marks a missing direct edge.
"""

from pathlib import Path
from typing import Callable, List, Optional, Sequence

from cost_matrix import DEFAULT_SENTINEL, CostMatrixGraph


class MalformedTopologyError(ValueError):
    """Raised when a topology file cannot be read as a cost matrix."""


def parse_cost_matrix(
    text: str, sentinel: int = DEFAULT_SENTINEL, log: Optional[Callable[[str], None]] = None
) -> CostMatrixGraph:
    """
    Parse topology text into a CostMatrixGraph.

    Negative costs are rejected: distance-vector relaxation never settles on
    a negative cycle. Tokens after the N*N costs are ignored and reported
    through log.
    """
    log = log or (lambda msg: None)
    tokens = text.split()
    if not tokens:
        raise MalformedTopologyError("Topology is empty; expected a node count.")

    values = [_to_int(tok, pos) for pos, tok in enumerate(tokens)]
    n = values[0]
    if n < 0:
        raise MalformedTopologyError(f"Node count must be non-negative, got {n}.")

    costs = values[1:]
    if len(costs) < n * n:
        raise MalformedTopologyError(
            f"Expected {n * n} costs for {n} nodes, found {len(costs)}."
        )
    if len(costs) > n * n:
        log(f"[load] ignoring {len(costs) - n * n} trailing token(s) after the cost matrix")

    rows: List[List[int]] = [costs[i * n:(i + 1) * n] for i in range(n)]
    _check_non_negative(rows)
    return CostMatrixGraph.from_rows(rows, sentinel=sentinel)


def load_cost_matrix(
    path: Path, sentinel: int = DEFAULT_SENTINEL, log: Optional[Callable[[str], None]] = None
) -> CostMatrixGraph:
    """
    Load a topology file. OSError from opening the file propagates; bytes
    that are not valid text are reported as a malformed topology.
    """
    try:
        with Path(path).open(encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise MalformedTopologyError(f"Topology file {path} is not valid text: {exc.reason}.") from None
    return parse_cost_matrix(text, sentinel=sentinel, log=log)


def _to_int(token: str, pos: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise MalformedTopologyError(f"Token {pos} ({token!r}) is not an integer.") from None


def _check_non_negative(rows: Sequence[Sequence[int]]) -> None:
    for i, row in enumerate(rows):
        for j, c in enumerate(row):
            if c < 0:
                raise MalformedTopologyError(f"Negative cost {c} on edge {i} -> {j}.")
