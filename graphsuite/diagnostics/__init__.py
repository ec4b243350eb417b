"""Diagnostics and debugging utilities for graphsuite."""

from .core import assert_graph_consistent, graph_summary
from .debug_mode import (
    check_graph,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_graph_consistent",
    "graph_summary",
    "check_graph",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
