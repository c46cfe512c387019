"""Locally optimal triangle-dense subgraph search over undirected edge lists."""

__version__ = "0.1.0"