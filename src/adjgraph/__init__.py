"""In-memory undirected weighted graphs with classic traversal and shortest-path algorithms."""

__all__ = [
    "INFINITY",
    "Edge",
    "Graph",
    "GraphError",
    "InvalidPolicyError",
    "InvalidWeightError",
    "ParallelEdgePolicy",
    "Vertex",
    "VertexNotFoundError",
    "all_pairs_shortest_paths",
    "breadth_first",
    "depth_first",
    "is_finite",
    "saturating_add",
    "shortest_path",
]

from ._errors import GraphError, InvalidPolicyError, InvalidWeightError, VertexNotFoundError
from ._graph import (
    INFINITY,
    Graph,
    ParallelEdgePolicy,
    all_pairs_shortest_paths,
    breadth_first,
    depth_first,
    is_finite,
    saturating_add,
    shortest_path,
)
from ._model import Edge, Vertex
