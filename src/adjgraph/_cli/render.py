"""Rich rendering utilities for graph commands."""

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from adjgraph._graph import Graph, is_finite

if TYPE_CHECKING:
    from collections.abc import Hashable, Sequence

    from rich.console import Console

INFINITY_SYMBOL = "∞"


def format_distance(distance: int) -> str:
    """Format a distance, showing the unreachable sentinel as ``∞``."""
    return str(distance) if is_finite(distance) else INFINITY_SYMBOL


def render_summary(graph: Graph, console: "Console") -> None:
    """Render vertex and edge counts followed by the adjacency lists.

    Args:
        graph: Graph to describe.
        console: Rich Console to output to.

    """
    console.print(f"[cyan]Vertices:[/cyan] {len(graph)}")
    console.print(f"[cyan]Edges:[/cyan]    {graph.edge_count()}")
    console.print()

    if not len(graph):
        console.print("[dim]The graph has no vertices[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Vertex", style="bold")
    table.add_column("Degree", justify="right")
    table.add_column("Neighbors (weight)")

    for value, edges in graph.adjacency().items():
        neighbors = ", ".join(f"{escape(str(edge.destination.value))} ({edge.weight})" for edge in edges)
        table.add_row(escape(str(value)), str(len(edges)), neighbors or "[dim]-[/dim]")

    console.print(table)


def render_order(title: str, order: "Sequence[Hashable]", console: "Console") -> None:
    """Render a traversal order as a numbered table.

    Args:
        title: Table title (e.g., 'BFS from A').
        order: Visited values in order.
        console: Rich Console to output to.

    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Vertex")

    for position, value in enumerate(order, start=1):
        table.add_row(str(position), escape(str(value)))

    console.print(table)


def render_path(path: "Sequence[Hashable]", distance: int, console: "Console") -> None:
    """Render a shortest path and its total weight."""
    console.print(" → ".join(escape(str(value)) for value in path))
    console.print(f"[cyan]Total weight:[/cyan] {format_distance(distance)}")


def render_matrix(
    vertices: "Sequence[Hashable]",
    matrix: "Sequence[Sequence[int]]",
    console: "Console",
) -> None:
    """Render an all-pairs distance matrix as a Rich table.

    Args:
        vertices: Row/column labels, in matrix index order.
        matrix: Square distance matrix.
        console: Rich Console to output to.

    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("", style="bold")
    for value in vertices:
        table.add_column(escape(str(value)), justify="right")

    for value, row in zip(vertices, matrix, strict=True):
        cells = [
            format_distance(distance) if is_finite(distance) else f"[dim]{INFINITY_SYMBOL}[/dim]"
            for distance in row
        ]
        table.add_row(escape(str(value)), *cells)

    console.print(table)
