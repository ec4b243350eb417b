"""
Greedy vertex coloring.

Adjacency for coloring is the union of outgoing and incoming edges, so a
directed graph is colored as its underlying undirected graph.
"""

from typing import Dict, Hashable, Set

from ..errors import ColoringInfeasibleError
from ..logging import get_logger
from .core import Graph

logger = get_logger(__name__)


def _undirected_neighbors(graph: Graph) -> Dict[Hashable, Set[Hashable]]:
    neighbors: Dict[Hashable, Set[Hashable]] = {v: set() for v in graph.vertices()}
    for u, v, _ in graph.edges():
        neighbors[u].add(v)
        neighbors[v].add(u)
    return neighbors


def graph_coloring(graph: Graph, max_colors: int) -> Dict[Hashable, int]:
    """
    Assign each vertex the smallest color not used by its neighbors.

    Vertices are processed in insertion order with no backtracking, so the
    result is a valid coloring but not necessarily a minimum one, and
    whether it fits in max_colors depends on that order.

    Args:
        graph: Graph to color.
        max_colors: Number of available colors, numbered 0..max_colors-1.

    Returns:
        Dictionary mapping vertex -> color index.

    Raises:
        ColoringInfeasibleError: If some vertex would need color index
            max_colors or higher.

    Example:
        >>> G = Graph(directed=False)
        >>> G.add_edge('A', 'B')
        >>> G.add_edge('B', 'C')
        >>> graph_coloring(G, 2)
        {'A': 0, 'B': 1, 'C': 0}
    """
    adjacent = _undirected_neighbors(graph)
    colors: Dict[Hashable, int] = {}

    for vertex in graph.vertices():
        used = {colors[n] for n in adjacent[vertex] if n in colors}

        color = 0
        while color in used:
            color += 1

        if color >= max_colors:
            logger.debug(
                "coloring failed at %r: needs color %d, %d allowed", vertex, color, max_colors
            )
            raise ColoringInfeasibleError(
                f"Impossible coloring: vertex {vertex!r} needs more than "
                f"{max_colors} colors.",
                vertex=vertex,
                max_colors=max_colors,
            )

        colors[vertex] = color

    return colors
