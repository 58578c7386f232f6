"""Tests for the adjgraph command line interface."""

import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from adjgraph._cli.main import app

runner = CliRunner()

GRAPH_SCRIPT = """
from adjgraph import Graph

graph = Graph()
for v in "ABCDE":
    graph.add_vertex(v)
graph.add_edge("A", "B", 1)
graph.add_edge("B", "C", 2)
graph.add_edge("A", "C", 4)
graph.add_edge("C", "D", 1)
graph.add_edge("A", "B", 7)
"""

INT_GRAPH_SCRIPT = """
from adjgraph import Graph

numbers = Graph.from_edges([(1, 2, 5), (2, 3, 5)])
"""

MIXED_GRAPH_SCRIPT = """
from adjgraph import Graph

graph = Graph.from_edges([(1, "x", 1), ("1", "x", 2)])
"""


@pytest.fixture(autouse=True)
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run each command from an empty directory with a restorable sys.path."""
    monkeypatch.setattr(sys, "path", list(sys.path))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def script(tmp_path: Path) -> Path:
    path = tmp_path / "cli_graph.py"
    path.write_text(GRAPH_SCRIPT)
    return path


class TestInfo:
    def test_summary(self, script: Path) -> None:
        result = runner.invoke(app, ["info", str(script)])

        assert result.exit_code == 0, result.output
        assert "Vertices: 5" in result.output
        assert "Edges:    5" in result.output

    def test_missing_graph_variable(self, script: Path) -> None:
        result = runner.invoke(app, ["info", f"{script.name}:nope"])

        assert result.exit_code == 1
        assert "has no variable 'nope'" in result.output


class TestTraversals:
    def test_bfs(self, script: Path) -> None:
        result = runner.invoke(app, ["bfs", str(script), "--start", "A"])

        assert result.exit_code == 0, result.output
        assert "BFS from A" in result.output
        positions = [result.output.index(f" {value} ") for value in "ABCD"]
        assert positions == sorted(positions)
        assert " E " not in result.output

    def test_dfs(self, script: Path) -> None:
        result = runner.invoke(app, ["dfs", str(script), "-s", "E"])

        assert result.exit_code == 0, result.output
        assert "DFS from E" in result.output

    def test_unknown_start(self, script: Path) -> None:
        result = runner.invoke(app, ["bfs", str(script), "--start", "Z"])

        assert result.exit_code == 1
        assert "Vertex 'Z' is not in the graph" in result.output

    def test_non_string_vertices(self, tmp_path: Path) -> None:
        path = tmp_path / "cli_int_graph.py"
        path.write_text(INT_GRAPH_SCRIPT)

        result = runner.invoke(app, ["bfs", str(path), "--start", "3"])

        assert result.exit_code == 0, result.output

    def test_ambiguous_vertex_name(self, tmp_path: Path) -> None:
        path = tmp_path / "cli_mixed_graph.py"
        path.write_text(MIXED_GRAPH_SCRIPT)

        result = runner.invoke(app, ["path", path.name, "--start", "1", "--end", "x"])

        assert result.exit_code == 1
        assert "ambiguous" in result.output
        assert "1, '1'" in result.output


class TestPath:
    def test_shortest_path(self, script: Path) -> None:
        result = runner.invoke(app, ["path", str(script), "--start", "A", "--end", "D"])

        assert result.exit_code == 0, result.output
        assert "A → B → C → D" in result.output
        assert "Total weight: 4" in result.output

    def test_no_path_exits_non_zero(self, script: Path) -> None:
        result = runner.invoke(app, ["path", str(script), "-s", "A", "-e", "E"])

        assert result.exit_code == 1
        assert "No path from 'A' to 'E'" in result.output


class TestMatrix:
    def test_matrix(self, script: Path) -> None:
        result = runner.invoke(app, ["matrix", str(script)])

        assert result.exit_code == 0, result.output
        assert "∞" in result.output

    def test_parallel_edges_option(self, script: Path) -> None:
        result = runner.invoke(app, ["matrix", str(script), "--parallel-edges", "last"])

        assert result.exit_code == 0, result.output

    def test_invalid_parallel_edges_option(self, script: Path) -> None:
        result = runner.invoke(app, ["matrix", str(script), "--parallel-edges", "max"])

        assert result.exit_code != 0


class TestConfiguredGraph:
    def test_uses_configured_script(self, tmp_path: Path) -> None:
        (tmp_path / "cli_config_graph.py").write_text(GRAPH_SCRIPT)
        (tmp_path / "pyproject.toml").write_text(
            """
[tool.adjgraph]
graph = "cli_config_graph.py:graph"
parallel-edges = "last"
""",
        )

        result = runner.invoke(app, ["path", "--start", "B", "--end", "D"])

        assert result.exit_code == 0, result.output
        assert "B → C → D" in result.output

    def test_no_graph_configured(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n")

        result = runner.invoke(app, ["info"])

        assert result.exit_code == 1
        assert "No graph given" in result.output

    def test_invalid_configuration(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.adjgraph]\ngraph = "no_colon"\n')

        result = runner.invoke(app, ["info"])

        assert result.exit_code == 1
        assert "Invalid graph target" in result.output

    def test_module_path_argument(self, tmp_path: Path) -> None:
        (tmp_path / "cli_module_graph.py").write_text(GRAPH_SCRIPT)
        sys.path.insert(0, str(tmp_path))

        result = runner.invoke(app, ["info", "cli_module_graph:graph"])

        assert result.exit_code == 0, result.output
        assert "Vertices: 5" in result.output
