"""Reading undirected edge lists into adjacency lists."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence

_log = logging.getLogger(__name__)


def _parse_edge(line: str) -> tuple[int, int] | None:
    fields = line.split()
    if len(fields) < 2:
        return None
    try:
        return int(fields[0]), int(fields[1])
    except ValueError:
        return None


def parse_adjacency_list(lines: Iterable[str]) -> list[list[int]]:
    """Build an undirected adjacency list from lines of ``u v`` pairs.

    Malformed lines are skipped with a warning; extra fields on a line are
    ignored. The list has one entry per vertex id up to the largest seen.
    """
    edges: list[tuple[int, int]] = []
    max_node = 0
    for line in lines:
        edge = _parse_edge(line)
        if edge is None:
            _log.warning("Skipping malformed line: %s", line.rstrip("\n"))
            continue
        u, v = edge
        if u < 0 or v < 0:
            raise ValueError(f"negative vertex id in line: {line.rstrip()!r}")
        max_node = max(max_node, u, v)
        edges.append(edge)

    adjacency: list[list[int]] = [[] for _ in range(max_node + 1)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def build_adjacency_list(filename: str | os.PathLike[str]) -> list[list[int]]:
    """Read an edge-list file into an undirected adjacency list.

    Raises ``OSError`` if the file cannot be opened.
    """
    with open(filename, encoding="utf-8") as handle:
        return parse_adjacency_list(handle)


def format_adjacency_list(adjacency: Sequence[Sequence[int]]) -> str:
    """Render an adjacency list as ``vertex: neighbours`` lines."""
    return "\n".join(
        f"{vertex}: {' '.join(map(str, neighbours))}".rstrip()
        for vertex, neighbours in enumerate(adjacency)
    )