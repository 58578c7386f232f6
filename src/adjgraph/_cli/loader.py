"""Import a ``Graph`` object named by a target string."""

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType

from adjgraph._graph import Graph

logger = logging.getLogger(__name__)

DEFAULT_VARIABLE = "graph"


class LoadError(Exception):
    """Raised when a target does not name an importable ``Graph``."""


def split_target(target: str) -> tuple[str, str | None]:
    """Split ``target`` into its location and optional variable name.

    The variable follows the last colon. A target ending in ``.py`` is a
    bare script path, so drive letters on Windows paths are left intact.

    Example:
        >>> split_target("examples/cities.py:roads")
        ('examples/cities.py', 'roads')
        >>> split_target("examples/cities.py")
        ('examples/cities.py', None)
        >>> split_target("examples.cities:graph")
        ('examples.cities', 'graph')

    """
    if target.endswith(".py"):
        return target, None
    location, sep, variable = target.rpartition(":")
    if not sep or not location or not variable:
        return target, None
    return location, variable


def _import_script(path: Path) -> ModuleType:
    if not path.is_file():
        msg = f"Script {path} does not exist"
        raise LoadError(msg)

    module_name = f"_adjgraph_script_{path.stem}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        msg = f"Cannot import {path} as a Python module"
        raise LoadError(msg)

    module = importlib.util.module_from_spec(spec)
    # dataclasses defined in the script look up their module in sys.modules
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        del sys.modules[module_name]
        raise
    return module


def _import_module(name: str) -> ModuleType:
    try:
        return importlib.import_module(name)
    except ImportError as e:
        msg = f"Cannot import module '{name}': {e}"
        raise LoadError(msg) from e


def load_graph(target: str, base_dir: Path | None = None) -> Graph:
    """Import the ``Graph`` that ``target`` names.

    Two forms are accepted:

    - ``path/to/script.py[:variable]`` executes the script and reads
      ``variable`` (``graph`` when omitted). Relative paths are resolved from
      ``base_dir``, or the working directory.
    - ``package.module:variable`` imports the module from ``sys.path``.

    Args:
        target: Script or module target.
        base_dir: Directory relative script paths are resolved from.

    Returns:
        The ``Graph`` bound to the variable.

    Raises:
        LoadError: If the script or module cannot be imported, the variable
            is missing, or it is not a ``Graph``.

    """
    location, variable = split_target(target)

    if location.endswith(".py"):
        path = Path(location)
        if not path.is_absolute():
            path = (base_dir or Path.cwd()) / path
        logger.debug(f"Executing graph script {path}")
        module = _import_script(path)
        variable = variable or DEFAULT_VARIABLE
    elif variable is None:
        msg = f"Invalid graph target '{target}'. Expected 'path/to/script.py[:variable]' or 'module.path:variable'"
        raise LoadError(msg)
    else:
        logger.debug(f"Importing graph module {location}")
        module = _import_module(location)

    if not hasattr(module, variable):
        msg = f"'{location}' has no variable '{variable}'"
        raise LoadError(msg)

    graph = getattr(module, variable)
    if not isinstance(graph, Graph):
        msg = f"'{location}:{variable}' is a {type(graph).__name__}, not a Graph"
        raise LoadError(msg)

    logger.debug(f"Loaded {graph!r} from {location}:{variable}")
    return graph
