"""Vertex and edge records stored in a graph's adjacency lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Vertex(Generic[T]):
    """A graph node identified by its value.

    Equality and hashing are derived from ``value`` alone, so a freshly
    constructed ``Vertex(value)`` finds the stored vertex in a mapping.
    """

    value: T

    def __repr__(self) -> str:
        return f"Vertex({self.value!r})"


@dataclass(frozen=True, slots=True)
class Edge(Generic[T]):
    """A weighted connection stored in the adjacency list of ``source``.

    Undirected connections are represented by two records, one per endpoint,
    with the endpoints swapped. See ``Edge.mirrored``.

    Attributes:
        source: Vertex whose adjacency list holds this record.
        destination: Vertex the record points to.
        weight: Integer edge weight.

    """

    source: Vertex[T]
    destination: Vertex[T]
    weight: int

    def mirrored(self) -> Edge[T]:
        """Return the record stored at the other endpoint."""
        return Edge(self.destination, self.source, self.weight)

    def __str__(self) -> str:
        return f"{self.source.value!s} -[{self.weight}]- {self.destination.value!s}"
