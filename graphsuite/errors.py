"""Error hierarchy for graphsuite.

Feasibility failures (cycles, negative cycles, infeasible colorings) abort
the running algorithm. An unreachable target is not an error: path searches
return an empty list for it.
"""

from __future__ import annotations

from typing import Any, Hashable, List, Optional


class GraphError(Exception):
    """Base exception for graphsuite failures."""


class CycleDetectedError(GraphError, ValueError):
    """The graph contains a cycle where an acyclic graph is required."""

    def __init__(self, message: str, cycle: Optional[List[Hashable]] = None) -> None:
        super().__init__(message)
        self.cycle = list(cycle) if cycle else []


class NegativeCycleError(GraphError, ValueError):
    """A negative-weight cycle is reachable from the search source."""

    def __init__(self, message: str, edge: Optional[tuple] = None) -> None:
        super().__init__(message)
        self.edge = edge


class NegativeWeightError(GraphError, ValueError):
    """A non-negative-weight algorithm was run on a negative edge."""


class ColoringInfeasibleError(GraphError, ValueError):
    """Greedy coloring needs more colors than allowed."""

    def __init__(self, message: str, vertex: Any = None, max_colors: int = 0) -> None:
        super().__init__(message)
        self.vertex = vertex
        self.max_colors = max_colors


class GraphInvariantError(GraphError, AssertionError):
    """The adjacency structure violates a store invariant."""
