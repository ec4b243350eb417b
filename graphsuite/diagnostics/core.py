"""Consistency checks and summaries for graph stores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Hashable, Set, Tuple

from ..errors import GraphInvariantError

if TYPE_CHECKING:
    from ..graphs.core import Graph


def assert_graph_consistent(graph: "Graph") -> None:
    """
    Assert that a graph's adjacency structure satisfies the store invariants.

    Checks that every neighbor is itself a vertex, that no (source,
    destination) pair is stored twice, and, for undirected graphs, that
    every entry is mirrored with the same weight (self-loops once).

    Parameters
    ----------
    graph:
        Graph to check.

    Raises
    ------
    GraphInvariantError
        On the first violated invariant.
    """
    vertices = set(graph.vertices())
    weights: Dict[Tuple[Hashable, Hashable], Any] = {}

    for u in graph.vertices():
        seen: Set[Hashable] = set()
        for v, weight in graph.neighbors_with_weights(u):
            if v not in vertices:
                raise GraphInvariantError(
                    f"Edge ({u!r}, {v!r}) points at a vertex that is not in the graph."
                )
            if v in seen:
                raise GraphInvariantError(f"Duplicate edge ({u!r}, {v!r}).")
            seen.add(v)
            weights[(u, v)] = weight

    if graph.directed:
        return

    for (u, v), weight in weights.items():
        if (v, u) not in weights:
            raise GraphInvariantError(
                f"Undirected edge ({u!r}, {v!r}) has no mirrored entry."
            )
        if weights[(v, u)] != weight:
            raise GraphInvariantError(
                f"Undirected edge ({u!r}, {v!r}) has mismatched weights "
                f"{weight!r} and {weights[(v, u)]!r}."
            )


def graph_summary(graph: "Graph") -> Dict[str, Any]:
    """
    Return a small dictionary describing the shape of a graph.

    Parameters
    ----------
    graph:
        Graph to describe.

    Returns
    -------
    dict
        Keys: ``directed``, ``vertices``, ``edges``, ``self_loops``,
        ``isolated``.
    """
    incoming: Set[Hashable] = set()
    self_loops = 0
    for u, v, _ in graph.edges():
        incoming.add(v)
        if u == v:
            self_loops += 1

    isolated = sum(
        1 for v in graph.vertices() if not graph.neighbors(v) and v not in incoming
    )

    return {
        "directed": graph.directed,
        "vertices": graph.vertex_count,
        "edges": graph.edge_count,
        "self_loops": self_loops,
        "isolated": isolated,
    }
