import pytest

from adjgraph import Graph


@pytest.fixture
def abcd() -> Graph[str]:
    """Vertices A-D with edges A-B(1), B-C(2), A-C(4), C-D(1), plus isolated E."""
    graph: Graph[str] = Graph()
    for value in "ABCDE":
        graph.add_vertex(value)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("A", "C", 4)
    graph.add_edge("C", "D", 1)
    return graph
