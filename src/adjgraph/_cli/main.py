import logging
from collections.abc import Hashable
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adjgraph._errors import GraphError
from adjgraph._graph import Graph, ParallelEdgePolicy

from .config import AdjGraphConfig, ConfigError, load_config
from .loader import LoadError, load_graph
from .render import render_matrix, render_order, render_path, render_summary

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphTargetArgument = Annotated[
    str | None,
    typer.Argument(
        help="Graph to load: path/to/script.py[:variable] or module.path:variable. Defaults to the graph configured in pyproject.toml",
    ),
]


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Inspect graphs and run graph algorithms on them."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    return typer.Exit(code=1)


def _config() -> AdjGraphConfig:
    try:
        return load_config()
    except ConfigError as e:
        raise _fail(str(e)) from e


def _load_graph(target: str | None) -> Graph:
    base_dir = None
    if target is None:
        config = _config()
        if config.graph is None:
            raise _fail("No graph given and none configured in pyproject.toml")
        target, base_dir = config.graph, config.root

    err_console.print(f"[cyan]Loading graph:[/cyan] {escape(target)}")
    try:
        graph = load_graph(target, base_dir)
    except LoadError as e:
        raise _fail(str(e)) from e

    err_console.print(f"[cyan]Graph:[/cyan] [bold]{len(graph)}[/bold] vertices, [bold]{graph.edge_count()}[/bold] edges")
    err_console.print()
    return graph


def _resolve_vertex(graph: Graph, name: str) -> Hashable:
    """Find the single vertex value whose string form is ``name``."""
    matches = [value for value in graph if str(value) == name]
    if not matches:
        raise _fail(f"Vertex '{name}' is not in the graph")
    if len(matches) > 1:
        candidates = ", ".join(repr(value) for value in matches)
        raise _fail(f"Vertex name '{name}' is ambiguous: it matches {candidates}")
    return matches[0]


@app.command()
def info(target: GraphTargetArgument = None) -> None:
    """Show vertex and edge counts and the adjacency lists."""
    graph = _load_graph(target)
    render_summary(graph, out_console)


@app.command()
def bfs(
    target: GraphTargetArgument = None,
    *,
    start: Annotated[str, typer.Option("-s", "--start", help="Vertex to start from")],
) -> None:
    """Traverse the graph breadth-first."""
    graph = _load_graph(target)
    order = graph.bfs(_resolve_vertex(graph, start))
    render_order(f"BFS from {escape(start)}", order, out_console)


@app.command()
def dfs(
    target: GraphTargetArgument = None,
    *,
    start: Annotated[str, typer.Option("-s", "--start", help="Vertex to start from")],
) -> None:
    """Traverse the graph depth-first."""
    graph = _load_graph(target)
    order = graph.dfs(_resolve_vertex(graph, start))
    render_order(f"DFS from {escape(start)}", order, out_console)


@app.command(name="path")
def shortest_path(
    target: GraphTargetArgument = None,
    *,
    start: Annotated[str, typer.Option("-s", "--start", help="Vertex the path starts at")],
    end: Annotated[str, typer.Option("-e", "--end", help="Vertex the path ends at")],
) -> None:
    """Find the shortest path between two vertices (exit non-zero if there is none)."""
    graph = _load_graph(target)
    source = _resolve_vertex(graph, start)
    destination = _resolve_vertex(graph, end)

    try:
        route = graph.dijkstra(source, destination)
    except GraphError as e:
        raise _fail(str(e)) from e

    if not route:
        err_console.print(f"[red]✗ No path from '{escape(start)}' to '{escape(end)}'[/red]")
        raise typer.Exit(code=1)

    render_path(route, graph.path_weight(route), out_console)


@app.command()
def matrix(
    target: GraphTargetArgument = None,
    *,
    parallel_edges: Annotated[
        ParallelEdgePolicy | None,
        typer.Option(
            "--parallel-edges",
            help="How parallel edges seed the matrix. Defaults to the pyproject.toml setting, then min",
        ),
    ] = None,
) -> None:
    """Show the all-pairs shortest distance matrix."""
    graph = _load_graph(target)

    if parallel_edges is None:
        parallel_edges = _config().parallel_edges
    logger.debug(f"Using parallel edge policy: {parallel_edges}")

    vertices = graph.vertices()
    distances = graph.floyd_warshall(parallel_edges)
    render_matrix(vertices, distances, out_console)


def main() -> None:
    app()
