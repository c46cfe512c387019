"""Triangle density of a (sub)graph."""

from __future__ import annotations

import math
from collections.abc import Sequence

from mtds.triangles import forward_triangle_listing


def triangle_density(n: int, adjacency: Sequence[Sequence[int]], size: int) -> float:
    """Return the triangle count divided by the number of vertex triples.

    ``n`` is how many vertices of ``adjacency`` to scan and ``size`` the number
    of vertices in the subgraph. With fewer than three vertices there are no
    triples, and the result is ``nan`` (or ``inf`` if triangles were found).
    """
    count = forward_triangle_listing(n, adjacency)
    possible = size * (size - 1) * (size - 2) / 6.0
    if possible == 0:
        return math.inf if count else math.nan
    return count / possible