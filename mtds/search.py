"""Local search for a triangle-dense subgraph."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from mtds.density import triangle_density
from mtds.subgraph import get_subgraph_adjacency


def _density(adjacency: Sequence[Sequence[int]], graph_size: int, nodes: set[int]) -> float:
    sub_adjacency = get_subgraph_adjacency(adjacency, nodes)
    return triangle_density(graph_size, sub_adjacency, len(nodes))


def locally_optimal_triangle_dense_subgraph(
    adjacency: Sequence[Sequence[int]],
    graph_size: int,
    seed: Iterable[int],
    theta: float,
) -> set[int]:
    """Grow and trim ``seed`` until no move keeps triangle density >= ``theta``.

    Each round first tries adding every neighbour of the current set, then
    tries removing every member that still has a neighbour outside the set;
    a move is kept whenever the resulting density is at least ``theta``.
    The search stops when a round leaves the set unchanged.
    """
    current = set(seed)
    size = len(adjacency)
    outside = sorted(v for v in current if not 0 <= v < size)
    if outside:
        raise ValueError(f"seed vertices not in the graph: {outside}")

    while True:
        candidate = set(current)

        additions = sorted(
            {v for u in current for v in adjacency[u] if v not in current}
        )
        for v in additions:
            trial = candidate | {v}
            if _density(adjacency, graph_size, trial) >= theta:
                candidate = trial

        removals = sorted(
            u for u in candidate if any(v not in candidate for v in adjacency[u])
        )
        for v in removals:
            trial = candidate - {v}
            if _density(adjacency, graph_size, trial) >= theta:
                candidate = trial

        if candidate == current:
            return current
        current = candidate