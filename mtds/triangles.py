"""Triangle enumeration with the forward algorithm."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

_log = logging.getLogger(__name__)


def degree_order(n: int, adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return the first ``n`` vertices sorted by descending degree."""
    return sorted(range(n), key=lambda vertex: len(adjacency[vertex]), reverse=True)


def iter_triangles(
    n: int, adjacency: Sequence[Sequence[int]]
) -> Iterator[tuple[int, int, int]]:
    """Yield each triangle of the graph once, as a triple of vertex ids."""
    order = degree_order(n, adjacency)
    rank = [0] * n
    for position, vertex in enumerate(order):
        rank[vertex] = position

    forward: list[list[int]] = [[] for _ in range(n)]
    for u, neighbours in enumerate(adjacency[:n]):
        for v in neighbours:
            if rank[u] < rank[v]:
                forward[rank[u]].append(rank[v])

    seen: list[set[int]] = [set() for _ in range(n)]
    for s, targets in enumerate(forward):
        for t in targets:
            for v in sorted(seen[s] & seen[t]):
                yield order[v], order[s], order[t]
            seen[t].add(s)


def forward_triangle_listing(n: int, adjacency: Sequence[Sequence[int]]) -> int:
    """Count the triangles among the first ``n`` vertices."""
    count = sum(1 for _ in iter_triangles(n, adjacency))
    _log.debug("Triangle Count = %d", count)
    return count