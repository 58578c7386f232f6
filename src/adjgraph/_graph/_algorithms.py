"""Graph algorithms over an adjacency mapping.

Every function takes ``adjacency``, a mapping from each vertex to the
sequence of edge records stored at it, and never mutates it.
"""

import heapq
import itertools
import logging
from collections import deque
from collections.abc import Iterator, Mapping, Sequence
from enum import Enum, StrEnum, unique
from typing import TypeAlias, TypeVar

from adjgraph._errors import VertexNotFoundError
from adjgraph._model import Edge, Vertex

from ._distance import INFINITY, is_finite, saturating_add

logger = logging.getLogger(__name__)

T = TypeVar("T")

Adjacency: TypeAlias = Mapping[Vertex[T], Sequence[Edge[T]]]


class Color(Enum):
    """Traversal state of a vertex."""

    WHITE = 0
    """Not yet discovered."""

    GRAY = 1
    """Discovered but not fully expanded (the frontier)."""

    BLACK = 2
    """Fully expanded."""


@unique
class ParallelEdgePolicy(StrEnum):
    """How parallel edges seed the all-pairs distance matrix."""

    MIN = "min"
    """Use the lightest of the parallel edges."""

    LAST = "last"
    """Use the most recently added edge."""


def _require(adjacency: Adjacency[T], vertex: Vertex[T]) -> None:
    if vertex not in adjacency:
        raise VertexNotFoundError(vertex.value)


def breadth_first(adjacency: Adjacency[T], start: Vertex[T]) -> list[T]:
    """Traverse the graph breadth-first from ``start``.

    Args:
        adjacency: Mapping from vertex to its outgoing edge records.
        start: Vertex to start from.

    Returns:
        Values of the vertices reachable from ``start`` in discovery order.

    Raises:
        VertexNotFoundError: If ``start`` is not in the graph.

    Example:
        >>> from adjgraph import Graph
        >>> g = Graph()
        >>> for v in "abc":
        ...     g.add_vertex(v)
        >>> g.add_edge("a", "b", 1)
        >>> g.add_edge("a", "c", 1)
        >>> breadth_first(g.adjacency_view(), Vertex("a"))
        ['a', 'b', 'c']

    """
    _require(adjacency, start)

    colors: dict[Vertex[T], Color] = dict.fromkeys(adjacency, Color.WHITE)
    colors[start] = Color.GRAY
    queue = deque([start])
    order: list[T] = []

    while queue:
        vertex = queue.popleft()
        order.append(vertex.value)
        for edge in adjacency[vertex]:
            neighbor = edge.destination
            if colors[neighbor] is Color.WHITE:
                colors[neighbor] = Color.GRAY
                queue.append(neighbor)
        colors[vertex] = Color.BLACK

    logger.debug(f"BFS from {start.value!r} reached {len(order)} vertices")
    return order


def depth_first(adjacency: Adjacency[T], start: Vertex[T]) -> list[T]:
    """Traverse the graph depth-first from ``start``.

    Produces the pre-order of the classic recursive traversal, using an
    explicit stack of edge iterators instead of recursion.

    Args:
        adjacency: Mapping from vertex to its outgoing edge records.
        start: Vertex to start from.

    Returns:
        Values of the vertices reachable from ``start`` in discovery order.

    Raises:
        VertexNotFoundError: If ``start`` is not in the graph.

    """
    _require(adjacency, start)

    colors: dict[Vertex[T], Color] = dict.fromkeys(adjacency, Color.WHITE)
    colors[start] = Color.GRAY
    order: list[T] = [start.value]
    stack: list[tuple[Vertex[T], Iterator[Edge[T]]]] = [(start, iter(adjacency[start]))]

    while stack:
        vertex, edges = stack[-1]
        for edge in edges:
            neighbor = edge.destination
            if colors[neighbor] is Color.WHITE:
                colors[neighbor] = Color.GRAY
                order.append(neighbor.value)
                stack.append((neighbor, iter(adjacency[neighbor])))
                break
        else:
            colors[vertex] = Color.BLACK
            stack.pop()

    logger.debug(f"DFS from {start.value!r} reached {len(order)} vertices")
    return order


def shortest_path(adjacency: Adjacency[T], start: Vertex[T], end: Vertex[T]) -> tuple[list[T], int]:
    """Find the lightest path between two vertices (Dijkstra).

    Edge weights must be non-negative; this is not checked. Distances are
    summed with ``saturating_add`` so they never overflow past ``INFINITY``.

    Args:
        adjacency: Mapping from vertex to its outgoing edge records.
        start: Vertex the path starts at.
        end: Vertex the path ends at.

    Returns:
        A ``(path, distance)`` pair. ``path`` lists values from ``start`` to
        ``end`` inclusive. When ``end`` is unreachable, ``path`` is empty and
        ``distance`` is ``INFINITY``. When ``start == end``, ``path`` is
        ``[start]`` and ``distance`` is 0.

    Raises:
        VertexNotFoundError: If ``start`` or ``end`` is not in the graph.

    """
    _require(adjacency, start)
    _require(adjacency, end)

    distances: dict[Vertex[T], int] = dict.fromkeys(adjacency, INFINITY)
    previous: dict[Vertex[T], Vertex[T] | None] = dict.fromkeys(adjacency)
    distances[start] = 0

    # Entries are (distance, sequence, vertex); the sequence breaks ties in
    # insertion order and keeps vertices themselves out of comparisons.
    counter = itertools.count()
    queue = [(distances[vertex], next(counter), vertex) for vertex in adjacency]
    heapq.heapify(queue)
    settled: set[Vertex[T]] = set()

    while queue:
        distance, _, vertex = heapq.heappop(queue)
        if vertex in settled or distance != distances[vertex]:
            continue
        settled.add(vertex)

        if vertex == end or not is_finite(distance):
            break

        for edge in adjacency[vertex]:
            neighbor = edge.destination
            if neighbor in settled:
                continue
            candidate = saturating_add(distance, edge.weight)
            if candidate < distances[neighbor]:
                distances[neighbor] = candidate
                previous[neighbor] = vertex
                heapq.heappush(queue, (candidate, next(counter), neighbor))

    if not is_finite(distances[end]):
        logger.debug(f"No path from {start.value!r} to {end.value!r}")
        return [], INFINITY

    path: list[T] = []
    current: Vertex[T] | None = end
    while current is not None:
        path.append(current.value)
        current = previous[current]
    path.reverse()

    logger.debug(f"Shortest path from {start.value!r} to {end.value!r} has distance {distances[end]}")
    return path, distances[end]


def all_pairs_shortest_paths(
    adjacency: Adjacency[T],
    parallel_edges: ParallelEdgePolicy = ParallelEdgePolicy.MIN,
) -> list[list[int]]:
    """Compute the distance between every pair of vertices (Floyd-Warshall).

    Rows and columns follow the iteration order of ``adjacency``, fixed once
    at the start of the call. Unreachable pairs hold ``INFINITY`` and the
    diagonal is always 0 (self-loops are ignored).

    Args:
        adjacency: Mapping from vertex to its outgoing edge records.
        parallel_edges: How to seed a cell when several edges join the pair.

    Returns:
        Square matrix of distances indexed by vertex position.

    """
    index = {vertex: i for i, vertex in enumerate(adjacency)}
    size = len(index)
    matrix = [[0 if i == j else INFINITY for j in range(size)] for i in range(size)]

    for vertex, edges in adjacency.items():
        i = index[vertex]
        for edge in edges:
            j = index[edge.destination]
            if i == j:
                continue
            if parallel_edges is ParallelEdgePolicy.LAST:
                matrix[i][j] = edge.weight
            else:
                matrix[i][j] = min(matrix[i][j], edge.weight)

    for k in range(size):
        row_k = matrix[k]
        for i in range(size):
            row_i = matrix[i]
            through = row_i[k]
            if not is_finite(through):
                continue
            for j in range(size):
                if not is_finite(row_k[j]):
                    continue
                candidate = saturating_add(through, row_k[j])
                if candidate < row_i[j]:
                    row_i[j] = candidate

    logger.debug(f"Computed {size}x{size} distance matrix (parallel edges: {parallel_edges})")
    return matrix
