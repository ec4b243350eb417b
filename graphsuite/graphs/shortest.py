"""
Weighted shortest path algorithms: Dijkstra, A* and Bellman-Ford.

Dijkstra and A* share one best-first search over a binary heap keyed by
(priority, vertex), so ties are broken by vertex ordering. A vertex whose
tentative distance improves is pushed again and the outdated heap entry is
skipped when popped.

Bellman-Ford accepts negative weights and raises NegativeCycleError when a
negative cycle is reachable from the source.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
    - Hart, Nilsson, Raphael. "A Formal Basis for the Heuristic
      Determination of Minimum Cost Paths" (1968).
"""

import heapq
from typing import Callable, Dict, Hashable, List, Optional, Tuple

from ..errors import NegativeCycleError, NegativeWeightError
from ..logging import get_logger
from .core import Graph, Weight
from .utils import reconstruct_path

logger = get_logger(__name__)

Heuristic = Callable[[Hashable, Hashable], Weight]

INF = float("inf")


def zero_heuristic(vertex: Hashable, goal: Hashable) -> Weight:
    """Heuristic that estimates 0 everywhere; turns A* into Dijkstra."""
    return 0


def _negative_weight_error(
    algorithm: str, u: Hashable, v: Hashable, weight: Weight
) -> NegativeWeightError:
    return NegativeWeightError(
        f"{algorithm} requires non-negative weights. "
        f"Found negative weight {weight} on edge ({u!r}, {v!r}); "
        f"use bellman_ford instead."
    )


def _best_first_search(
    graph: Graph,
    start: Hashable,
    goal: Optional[Hashable],
    heuristic: Heuristic,
    algorithm: str,
) -> Tuple[Dict[Hashable, Weight], Dict[Hashable, Optional[Hashable]]]:
    """
    Best-first search ordered by g(v) + heuristic(v, goal).

    Stops once goal is popped from the frontier (never, if goal is None).
    Only edges leaving an expanded vertex are checked for negative weights,
    so a negative edge the search never reaches is not an error.

    Returns:
        Tuple of (g_score, parent) for every vertex reached.

    Raises:
        NegativeWeightError: If an expanded vertex has a negative outgoing
            edge.
    """
    g_score: Dict[Hashable, Weight] = {start: 0}
    f_score: Dict[Hashable, Weight] = {start: heuristic(start, goal)}
    parent: Dict[Hashable, Optional[Hashable]] = {start: None}
    frontier: List[Tuple[Weight, Hashable]] = [(f_score[start], start)]
    expanded = 0

    while frontier:
        f, u = heapq.heappop(frontier)
        if f > f_score[u]:
            continue
        if u == goal:
            break

        expanded += 1
        for v, weight in graph.neighbors_with_weights(u):
            if weight < 0:
                raise _negative_weight_error(algorithm, u, v, weight)
            tentative = g_score[u] + weight
            if tentative < g_score.get(v, INF):
                g_score[v] = tentative
                f_score[v] = tentative + heuristic(v, goal)
                parent[v] = u
                heapq.heappush(frontier, (f_score[v], v))

    logger.debug(
        "best-first search from %r expanded %d vertices, %d entries left",
        start,
        expanded,
        len(frontier),
    )
    return g_score, parent


def dijkstra_distances(graph: Graph, source: Hashable) -> Dict[Hashable, Weight]:
    """
    Dijkstra's algorithm for single-source shortest distances.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source vertex.

    Returns:
        Dictionary mapping every reachable vertex -> shortest distance.
        Empty if source is absent.

    Raises:
        NegativeWeightError: If the search reaches an edge with negative
            weight.

    Complexity: O(E log V) using binary heap priority queue.
    """
    if not graph.has_vertex(source):
        return {}
    dist, _ = _best_first_search(graph, source, None, zero_heuristic, "Dijkstra")
    return dist


def dijkstra(graph: Graph, start: Hashable, end: Hashable) -> List[Hashable]:
    """
    Dijkstra's algorithm for the shortest weighted path between two vertices.

    Args:
        graph: Graph with non-negative edge weights.
        start: Source vertex.
        end: Target vertex.

    Returns:
        Vertices from start to end inclusive; [start] when start == end;
        empty list if end is unreachable or either vertex is absent.

    Raises:
        NegativeWeightError: If the search reaches an edge with negative
            weight.

    Complexity: O(E log V) using binary heap priority queue.

    Example:
        >>> G = Graph()
        >>> G.add_edge(0, 1, 1)
        >>> G.add_edge(1, 2, 1)
        >>> G.add_edge(0, 2, 10)
        >>> dijkstra(G, 0, 2)
        [0, 1, 2]
    """
    if not graph.has_vertex(start) or not graph.has_vertex(end):
        return []
    _, parent = _best_first_search(graph, start, end, zero_heuristic, "Dijkstra")
    return reconstruct_path(parent, end)


def astar(
    graph: Graph,
    start: Hashable,
    end: Hashable,
    heuristic: Optional[Heuristic] = None,
) -> List[Hashable]:
    """
    A* search for the shortest weighted path between two vertices.

    The frontier is ordered by f = g + heuristic(vertex, end), ties broken by
    vertex ordering. The result is optimal when the heuristic is admissible
    (never overestimates the remaining distance); that is the caller's
    responsibility and is not checked.

    Args:
        graph: Graph with non-negative edge weights.
        start: Source vertex.
        end: Target vertex.
        heuristic: Callable (vertex, goal) -> estimated remaining cost.
            Defaults to zero_heuristic, which makes A* equal to Dijkstra.

    Returns:
        Vertices from start to end inclusive, or empty list if unreachable.

    Raises:
        NegativeWeightError: If the search reaches an edge with negative
            weight.
    """
    if heuristic is None:
        heuristic = zero_heuristic

    if not graph.has_vertex(start) or not graph.has_vertex(end):
        return []
    _, parent = _best_first_search(graph, start, end, heuristic, "A*")
    return reconstruct_path(parent, end)


def bellman_ford(graph: Graph, start: Hashable, end: Hashable) -> List[Hashable]:
    """
    Bellman-Ford algorithm for the shortest path between two vertices.

    Relaxes every adjacency entry |V| - 1 times (stopping early once a pass
    changes nothing), then makes one verification pass. An undirected edge
    counts in both directions, so any negative undirected edge reachable
    from start forms a negative cycle.

    Args:
        graph: Graph (may have negative weights).
        start: Source vertex.
        end: Target vertex.

    Returns:
        Vertices from start to end inclusive, or empty list if unreachable.

    Raises:
        NegativeCycleError: If a negative cycle is reachable from start.

    Complexity: O(VE) where V is vertices and E is edges.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B', 4)
        >>> G.add_edge('A', 'C', 1)
        >>> G.add_edge('C', 'B', -2)
        >>> bellman_ford(G, 'A', 'B')
        ['A', 'C', 'B']
    """
    if not graph.has_vertex(start) or not graph.has_vertex(end):
        return []

    dist: Dict[Hashable, Weight] = {start: 0}
    parent: Dict[Hashable, Optional[Hashable]] = {start: None}

    entries = [
        (u, v, weight)
        for u in graph.vertices()
        for v, weight in graph.neighbors_with_weights(u)
    ]

    passes = 0
    for _ in range(graph.vertex_count - 1):
        passes += 1
        updated = False
        for u, v, weight in entries:
            if u in dist and dist[u] + weight < dist.get(v, INF):
                dist[v] = dist[u] + weight
                parent[v] = u
                updated = True
        if not updated:
            break

    logger.debug("bellman_ford from %r converged after %d passes", start, passes)

    for u, v, weight in entries:
        if u in dist and dist[u] + weight < dist.get(v, INF):
            logger.debug("negative cycle detected through edge (%r, %r)", u, v)
            raise NegativeCycleError(
                f"Graph contains a negative-weight cycle reachable from {start!r} "
                f"(edge ({u!r}, {v!r}) still relaxes).",
                edge=(u, v, weight),
            )

    return reconstruct_path(parent, end)
