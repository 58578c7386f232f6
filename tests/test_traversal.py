"""Tests for breadth-first and depth-first traversal."""

import pytest

from adjgraph import Graph, Vertex, VertexNotFoundError, breadth_first, depth_first


@pytest.fixture
def two_components() -> Graph[int]:
    """Triangle 1-2-3 with a tail 3-4, and a separate edge 5-6."""
    return Graph.from_edges([(1, 2, 1), (2, 3, 1), (3, 1, 1), (3, 4, 1), (5, 6, 1)])


@pytest.fixture
def tree() -> Graph[str]:
    #        root
    #       /    \
    #      a      b
    #     / \      \
    #    a1  a2     b1
    return Graph.from_edges(
        [
            ("root", "a", 1),
            ("root", "b", 1),
            ("a", "a1", 1),
            ("a", "a2", 1),
            ("b", "b1", 1),
        ],
    )


class TestBreadthFirst:
    def test_scenario(self, abcd: Graph[str]) -> None:
        assert abcd.bfs("A") == ["A", "B", "C", "D"]

    def test_isolated_vertex(self, abcd: Graph[str]) -> None:
        assert abcd.bfs("E") == ["E"]

    def test_level_order(self, tree: Graph[str]) -> None:
        assert tree.bfs("root") == ["root", "a", "b", "a1", "a2", "b1"]

    def test_reachable_exactly_once(self, two_components: Graph[int]) -> None:
        order = two_components.bfs(1)
        assert sorted(order) == [1, 2, 3, 4]
        assert len(order) == len(set(order))

    def test_other_component(self, two_components: Graph[int]) -> None:
        assert two_components.bfs(6) == [6, 5]

    def test_parallel_edges_and_self_loops(self) -> None:
        graph = Graph.from_edges([("a", "a", 1), ("a", "b", 1), ("a", "b", 2)])
        assert graph.bfs("a") == ["a", "b"]

    def test_missing_start_raises(self, abcd: Graph[str]) -> None:
        with pytest.raises(VertexNotFoundError):
            abcd.bfs("Z")

    def test_function_on_adjacency_view(self, abcd: Graph[str]) -> None:
        assert breadth_first(abcd.adjacency_view(), Vertex("D")) == ["D", "C", "B", "A"]


class TestDepthFirst:
    def test_scenario(self, abcd: Graph[str]) -> None:
        assert abcd.dfs("A") == ["A", "B", "C", "D"]

    def test_isolated_vertex(self, abcd: Graph[str]) -> None:
        assert abcd.dfs("E") == ["E"]

    def test_preorder(self, tree: Graph[str]) -> None:
        assert tree.dfs("root") == ["root", "a", "a1", "a2", "b", "b1"]

    def test_backtracks_after_exhausting_branch(self) -> None:
        # d is reached only after backtracking from the dead end c
        graph = Graph.from_edges([("a", "b", 1), ("b", "c", 1), ("a", "d", 1)])
        assert graph.dfs("a") == ["a", "b", "c", "d"]

    def test_terminates_on_cycle(self, two_components: Graph[int]) -> None:
        assert two_components.dfs(1) == [1, 2, 3, 4]

    def test_unreachable_absent(self, two_components: Graph[int]) -> None:
        order = two_components.dfs(4)
        assert 5 not in order
        assert 6 not in order
        assert sorted(order) == [1, 2, 3, 4]

    def test_missing_start_raises(self, abcd: Graph[str]) -> None:
        with pytest.raises(VertexNotFoundError):
            abcd.dfs("Z")

    def test_deep_graph_does_not_recurse(self) -> None:
        size = 20_000
        graph = Graph.from_edges([(i, i + 1, 1) for i in range(size - 1)])
        assert graph.dfs(0) == list(range(size))

    def test_function_on_adjacency_view(self, abcd: Graph[str]) -> None:
        assert depth_first(abcd.adjacency_view(), Vertex("D")) == ["D", "C", "B", "A"]


class TestTraversalsAgree:
    @pytest.mark.parametrize("start", [1, 2, 3, 4, 5, 6])
    def test_same_reachable_set(self, two_components: Graph[int], start: int) -> None:
        assert set(two_components.bfs(start)) == set(two_components.dfs(start))
