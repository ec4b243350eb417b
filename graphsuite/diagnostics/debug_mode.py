"""Debug mode for graphsuite.

While debug mode is on, every structural mutation of a Graph is followed by
:func:`check_graph`, which runs the full adjacency consistency check. The
initial state comes from the GRAPHSUITE_DEBUG environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from .core import assert_graph_consistent

if TYPE_CHECKING:
    from ..graphs.core import Graph

_DEBUG_ENV_VAR = "GRAPHSUITE_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


_debug_enabled: bool = _env_flag(_DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """Return whether graph mutations are currently checked."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable graphsuite debug mode.

    Parameters
    ----------
    enabled:
        Whether every graph mutation should be followed by a consistency
        check.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def check_graph(graph: "Graph") -> None:
    """
    Run the consistency check on graph if debug mode is enabled.

    Called by Graph after each structural change; a no-op otherwise.

    Raises
    ------
    GraphInvariantError
        If debug mode is on and the adjacency structure is inconsistent.
    """
    if _debug_enabled:
        assert_graph_consistent(graph)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch debug mode, restoring the previous state on exit.

    Useful for building large graphs in a test without paying for a
    consistency check on every edge.

    Example
    -------
    >>> with debug_context(False):
    ...     for v in range(10_000):
    ...         graph.add_edge(v, v + 1)
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
