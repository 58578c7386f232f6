"""Undirected weighted graph backed by adjacency lists."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Generic, TypeVar

from adjgraph._errors import InvalidPolicyError, InvalidWeightError, VertexNotFoundError
from adjgraph._model import Edge, Vertex

from ._algorithms import (
    ParallelEdgePolicy,
    all_pairs_shortest_paths,
    breadth_first,
    depth_first,
    shortest_path,
)
from ._distance import INFINITY, MIN_WEIGHT

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def _check_weight(weight: object) -> int:
    # bool is an int subclass but never a meaningful weight
    if not isinstance(weight, int) or isinstance(weight, bool):
        raise InvalidWeightError(weight, "expected an integer")
    if not MIN_WEIGHT <= weight < INFINITY:
        raise InvalidWeightError(weight, "outside the signed 64-bit range")
    return weight


def _policy(value: object) -> ParallelEdgePolicy:
    try:
        return ParallelEdgePolicy(value)
    except ValueError as e:
        raise InvalidPolicyError(value, [policy.value for policy in ParallelEdgePolicy]) from e


class Graph(Generic[T]):
    """An undirected, weighted graph over hashable values.

    Each vertex owns an ordered list of outgoing ``Edge`` records. An
    undirected edge between ``a`` and ``b`` is stored twice: ``a -> b`` in the
    list of ``a`` and ``b -> a`` in the list of ``b``. Both records are always
    created and removed together.

    Vertices iterate in insertion order. That order is also the row and column
    order of ``floyd_warshall``.

    The graph is not thread-safe; concurrent use needs external locking.

    Example:
        >>> g = Graph()
        >>> for v in "ABCD":
        ...     g.add_vertex(v)
        >>> g.add_edge("A", "B", 1)
        >>> g.add_edge("B", "C", 2)
        >>> g.add_edge("A", "C", 4)
        >>> g.add_edge("C", "D", 1)
        >>> g.bfs("A")
        ['A', 'B', 'C', 'D']
        >>> g.dijkstra("A", "D")
        ['A', 'B', 'C', 'D']

    """

    __slots__ = ("_adjacency",)

    def __init__(self) -> None:
        self._adjacency: dict[Vertex[T], list[Edge[T]]] = {}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T, int]],
        vertices: Iterable[T] = (),
    ) -> Graph[T]:
        """Build a graph from ``(source, destination, weight)`` triples.

        Vertices from ``vertices`` are added first, in order, followed by any
        edge endpoint not yet present, in order of first appearance.

        Example:
            >>> g = Graph.from_edges([("a", "b", 3)], vertices=["z"])
            >>> g.vertices()
            ('z', 'a', 'b')

        """
        graph: Graph[T] = cls()
        for value in vertices:
            graph.add_vertex(value)
        for source, destination, weight in edges:
            graph.add_vertex(source)
            graph.add_vertex(destination)
            graph.add_edge(source, destination, weight)
        return graph

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, value: T) -> None:
        """Add a vertex for ``value``. Adding an existing value does nothing."""
        vertex = Vertex(value)
        if vertex in self._adjacency:
            return
        self._adjacency[vertex] = []
        logger.debug(f"Added vertex {value!r}")

    def add_edge(self, source: T, destination: T, weight: int) -> None:
        """Connect two existing vertices with an undirected weighted edge.

        Repeated calls create parallel edges; nothing is deduplicated.

        Args:
            source: Value of the first endpoint.
            destination: Value of the second endpoint.
            weight: Integer weight shared by both directions.

        Raises:
            VertexNotFoundError: If either endpoint is not in the graph.
            InvalidWeightError: If ``weight`` is not a 64-bit integer.

        """
        weight = _check_weight(weight)
        self._link(self._vertex(source), self._vertex(destination), weight)

    def remove_vertex(self, value: T) -> None:
        """Remove a vertex and every edge touching it.

        Removing an absent value does nothing.
        """
        vertex = Vertex(value)
        edges = self._adjacency.pop(vertex, None)
        if edges is None:
            return
        for neighbor in {edge.destination for edge in edges}:
            if neighbor == vertex:
                continue
            self._drop(neighbor, vertex)
        logger.debug(f"Removed vertex {value!r} and {len(edges)} edge record(s)")

    def remove_edge(self, source: T, destination: T) -> None:
        """Remove every edge between two vertices.

        Does nothing if either vertex is absent or they are not connected.
        """
        src = Vertex(source)
        dst = Vertex(destination)
        if src not in self._adjacency or dst not in self._adjacency:
            return
        self._unlink(src, dst)

    def clear(self) -> None:
        """Remove all vertices and edges."""
        self._adjacency.clear()

    def _link(self, source: Vertex[T], destination: Vertex[T], weight: int) -> None:
        edge = Edge(source, destination, weight)
        self._adjacency[source].append(edge)
        self._adjacency[destination].append(edge.mirrored())
        logger.debug(f"Added edge {edge}")

    def _unlink(self, source: Vertex[T], destination: Vertex[T]) -> None:
        removed = self._drop(source, destination)
        if source != destination:
            removed += self._drop(destination, source)
        logger.debug(f"Removed {removed} edge record(s) between {source.value!r} and {destination.value!r}")

    def _drop(self, vertex: Vertex[T], destination: Vertex[T]) -> int:
        """Remove edges from ``vertex`` pointing at ``destination``; return how many."""
        edges = self._adjacency[vertex]
        kept = [edge for edge in edges if edge.destination != destination]
        removed = len(edges) - len(kept)
        edges[:] = kept
        return removed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _vertex(self, value: T) -> Vertex[T]:
        vertex = Vertex(value)
        if vertex not in self._adjacency:
            raise VertexNotFoundError(value)
        return vertex

    def vertices(self) -> tuple[T, ...]:
        """Vertex values in insertion order."""
        return tuple(vertex.value for vertex in self._adjacency)

    def edges(self, value: T) -> tuple[Edge[T], ...]:
        """Edge records stored at ``value``, in insertion order.

        Raises:
            VertexNotFoundError: If ``value`` is not in the graph.

        """
        return tuple(self._adjacency[self._vertex(value)])

    def neighbors(self, value: T) -> list[T]:
        """Destination values of the edges stored at ``value``, in order."""
        return [edge.destination.value for edge in self.edges(value)]

    def has_vertex(self, value: T) -> bool:
        return Vertex(value) in self._adjacency

    def has_edge(self, source: T, destination: T) -> bool:
        edges = self._adjacency.get(Vertex(source))
        if edges is None:
            return False
        dst = Vertex(destination)
        return any(edge.destination == dst for edge in edges)

    def edge_count(self) -> int:
        """Number of undirected edges (each stored as two records)."""
        return sum(len(edges) for edges in self._adjacency.values()) // 2

    def adjacency(self) -> dict[T, tuple[Edge[T], ...]]:
        """Snapshot of the adjacency lists keyed by vertex value."""
        return {vertex.value: tuple(edges) for vertex, edges in self._adjacency.items()}

    def adjacency_view(self) -> Mapping[Vertex[T], Sequence[Edge[T]]]:
        """Read-only snapshot of the adjacency lists keyed by ``Vertex``.

        This is the input expected by the functions in ``adjgraph._graph``.
        Later changes to the graph are not reflected in the snapshot.
        """
        return MappingProxyType({vertex: tuple(edges) for vertex, edges in self._adjacency.items()})

    def path_weight(self, path: Sequence[T]) -> int:
        """Total weight of a path given as a sequence of values.

        The lightest edge is used where parallel edges exist.

        Raises:
            VertexNotFoundError: If a value in ``path`` is not in the graph.
            ValueError: If two consecutive values are not adjacent.

        """
        if len(path) == 1:
            self._vertex(path[0])
        total = 0
        for source, destination in zip(path, path[1:], strict=False):
            dst = self._vertex(destination)
            weights = [edge.weight for edge in self._adjacency[self._vertex(source)] if edge.destination == dst]
            if not weights:
                msg = f"No edge between {source!r} and {destination!r}"
                raise ValueError(msg)
            total += min(weights)
        return total

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def bfs(self, start: T) -> list[T]:
        """Values reachable from ``start`` in breadth-first discovery order.

        Raises:
            VertexNotFoundError: If ``start`` is not in the graph.

        """
        return breadth_first(self._adjacency, Vertex(start))

    def dfs(self, start: T) -> list[T]:
        """Values reachable from ``start`` in depth-first (pre-order) discovery order.

        Raises:
            VertexNotFoundError: If ``start`` is not in the graph.

        """
        return depth_first(self._adjacency, Vertex(start))

    def dijkstra(self, start: T, end: T) -> list[T]:
        """Lightest path from ``start`` to ``end``.

        Edge weights are assumed non-negative.

        Returns:
            Values from ``start`` to ``end`` inclusive, ``[start]`` when
            ``start == end``, or an empty list when ``end`` is unreachable.

        Raises:
            VertexNotFoundError: If ``start`` or ``end`` is not in the graph.

        """
        path, _ = shortest_path(self._adjacency, Vertex(start), Vertex(end))
        return path

    def shortest_distance(self, start: T, end: T) -> int:
        """Weight of the lightest path, or ``INFINITY`` if there is none."""
        _, distance = shortest_path(self._adjacency, Vertex(start), Vertex(end))
        return distance

    def floyd_warshall(self, parallel_edges: ParallelEdgePolicy = ParallelEdgePolicy.MIN) -> list[list[int]]:
        """All-pairs distance matrix.

        Row and column ``i`` correspond to ``self.vertices()[i]`` at the time of
        the call. Unreachable pairs hold ``INFINITY``.

        Args:
            parallel_edges: ``MIN`` seeds each pair with its lightest edge;
                ``LAST`` uses the most recently added one.

        Raises:
            InvalidPolicyError: If ``parallel_edges`` is not a known policy.

        """
        return all_pairs_shortest_paths(self._adjacency, _policy(parallel_edges))

    def distance_table(self, parallel_edges: ParallelEdgePolicy = ParallelEdgePolicy.MIN) -> dict[T, dict[T, int]]:
        """All-pairs distances keyed by vertex value."""
        values = self.vertices()
        matrix = self.floyd_warshall(parallel_edges)
        return {a: dict(zip(values, row, strict=True)) for a, row in zip(values, matrix, strict=True)}

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._adjacency)

    def __contains__(self, value: object) -> bool:
        """Check if a value is a vertex of the graph."""
        return Vertex(value) in self._adjacency

    def __iter__(self) -> Iterator[T]:
        return iter(self.vertices())

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={self.edge_count()})"
