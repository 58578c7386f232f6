"""Graph module providing the adjacency-list graph and its algorithms.

This module contains:
- Graph[T]: A generic, mutable, undirected weighted graph
- breadth_first / depth_first: Traversals in discovery order
- shortest_path: Single-pair shortest path (Dijkstra)
- all_pairs_shortest_paths: Distance matrix (Floyd-Warshall)
"""

from ._adjacency_graph import Graph
from ._algorithms import (
    Adjacency,
    Color,
    ParallelEdgePolicy,
    all_pairs_shortest_paths,
    breadth_first,
    depth_first,
    shortest_path,
)
from ._distance import INFINITY, is_finite, saturating_add

__all__ = [
    "INFINITY",
    "Adjacency",
    "Color",
    "Graph",
    "ParallelEdgePolicy",
    "all_pairs_shortest_paths",
    "breadth_first",
    "depth_first",
    "is_finite",
    "saturating_add",
    "shortest_path",
]
