"""Settings read from the ``[tool.adjgraph]`` table of the nearest pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from adjgraph._graph import ParallelEdgePolicy


class ConfigError(Exception):
    """Raised when the ``[tool.adjgraph]`` table cannot be used."""


@dataclass(slots=True, frozen=True)
class AdjGraphConfig:
    """CLI defaults.

    ``graph`` is a target string in the form accepted by ``load_graph``.
    ``root`` is the directory holding pyproject.toml; relative script
    targets are resolved from it.
    """

    graph: str | None = None
    parallel_edges: ParallelEdgePolicy = ParallelEdgePolicy.MIN
    root: Path | None = None


def _invalid(key: str, expected: str, value: object) -> ConfigError:
    return ConfigError(f"Invalid tool.adjgraph.{key} in pyproject.toml: expected {expected}, got {value!r}")


def load_config(start_dir: Path | None = None) -> AdjGraphConfig:
    """Read ``[tool.adjgraph]`` from the first pyproject.toml at or above ``start_dir``.

    Args:
        start_dir: Directory to search from. Defaults to the working directory.

    Returns:
        The parsed settings, or the defaults when there is no pyproject.toml
        or it has no ``[tool.adjgraph]`` table.

    Raises:
        ConfigError: If the file is not valid TOML or a setting has the wrong
            type or value.

    Example:
        A pyproject.toml containing::

            [tool.adjgraph]
            graph = "examples/cities.py:graph"
            parallel-edges = "last"

        gives ``AdjGraphConfig(graph="examples/cities.py:graph",
        parallel_edges=ParallelEdgePolicy.LAST, root=...)``.

    """
    start = (start_dir or Path.cwd()).resolve()
    pyproject = next((d / "pyproject.toml" for d in (start, *start.parents) if (d / "pyproject.toml").is_file()), None)
    if pyproject is None:
        return AdjGraphConfig()

    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {pyproject}: {e}"
        raise ConfigError(msg) from e

    section = data.get("tool", {}).get("adjgraph", {})

    graph = section.get("graph")
    if graph is not None and not isinstance(graph, str):
        raise _invalid("graph", "a string such as 'graphs.py:roads'", graph)

    policy = section.get("parallel-edges", ParallelEdgePolicy.MIN)
    try:
        parallel_edges = ParallelEdgePolicy(policy)
    except ValueError as e:
        raise _invalid("parallel-edges", " or ".join(repr(p.value) for p in ParallelEdgePolicy), policy) from e

    return AdjGraphConfig(graph=graph, parallel_edges=parallel_edges, root=pyproject.parent)
