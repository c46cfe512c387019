"""Induced subgraph adjacency lists."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

_log = logging.getLogger(__name__)


def get_subgraph_adjacency(
    adjacency: Sequence[Sequence[int]], subgraph_nodes: Iterable[int]
) -> list[list[int]]:
    """Return the adjacency of the subgraph induced by ``subgraph_nodes``.

    The result has as many entries as ``adjacency`` so vertex ids keep their
    meaning; vertices outside the subgraph get empty lists.
    """
    members = set(subgraph_nodes)
    size = len(adjacency)
    sub_adjacency: list[list[int]] = [[] for _ in range(size)]
    for u in sorted(members):
        if not 0 <= u < size:
            raise IndexError(f"vertex {u} is not in the graph")
        sub_adjacency[u] = [v for v in adjacency[u] if v in members]

    if _log.isEnabledFor(logging.DEBUG):
        for vertex, neighbours in enumerate(sub_adjacency):
            if neighbours:
                _log.debug("%d: %s", vertex, " ".join(map(str, neighbours)))
    return sub_adjacency