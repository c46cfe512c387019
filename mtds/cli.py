"""Command-line entry point for the triangle-dense subgraph search."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from mtds.adjacency import build_adjacency_list, format_adjacency_list
from mtds.search import locally_optimal_triangle_dense_subgraph

_DEFAULT_SEED = (1, 2, 4)
_DEFAULT_THETA = 0.1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mtds",
        description="Find a locally optimal triangle-dense subgraph around a seed set.",
    )
    parser.add_argument("graph", help="edge-list file with one 'u v' pair per line")
    parser.add_argument(
        "seeds",
        nargs="*",
        type=int,
        default=list(_DEFAULT_SEED),
        help="seed vertices (default: 1 2 4)",
    )
    parser.add_argument(
        "--theta",
        type=float,
        default=_DEFAULT_THETA,
        help="triangle density threshold (default: 0.1)",
    )
    parser.add_argument(
        "--graph-size",
        type=int,
        default=None,
        help="number of vertices to scan (default: all vertices in the file)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search and print the adjacency list and the resulting subgraph."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        adjacency = build_adjacency_list(args.graph)
    except OSError:
        print(f"Failed to open file: {args.graph}", file=sys.stderr)
        return 1

    missing = sorted(s for s in set(args.seeds) if not 0 <= s < len(adjacency))
    if missing:
        parser.error(f"seed vertices not in the graph: {' '.join(map(str, missing))}")

    graph_size = len(adjacency) if args.graph_size is None else args.graph_size
    if not 0 <= graph_size <= len(adjacency):
        parser.error(f"graph size must be between 0 and {len(adjacency)}")

    print(format_adjacency_list(adjacency))
    result = locally_optimal_triangle_dense_subgraph(
        adjacency, graph_size, set(args.seeds), args.theta
    )
    print("Maximal Subgraph")
    print(" ".join(map(str, sorted(result))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())