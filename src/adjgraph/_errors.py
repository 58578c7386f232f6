"""Exceptions raised by graph operations."""


class GraphError(Exception):
    """Base class for errors raised by adjgraph."""


class VertexNotFoundError(GraphError, LookupError):
    """Raised when an operation requires a vertex that is not in the graph."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Vertex {value!r} is not in the graph")


class InvalidWeightError(GraphError, ValueError):
    """Raised when an edge weight is not a representable integer."""

    def __init__(self, weight: object, reason: str) -> None:
        self.weight = weight
        super().__init__(f"Invalid edge weight {weight!r}: {reason}")


class InvalidPolicyError(GraphError, ValueError):
    """Raised when a parallel edge policy name is not recognised."""

    def __init__(self, policy: object, choices: list[str]) -> None:
        self.policy = policy
        super().__init__(f"Unknown parallel edge policy {policy!r}, expected one of {', '.join(choices)}")
