"""
Graph traversal algorithms: BFS and DFS.

Neighbors are visited in adjacency (insertion) order, so the iterative and
recursive depth-first searches produce identical visitation orders.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Dict, Hashable, List, Optional, Set, Tuple

from ..logging import get_logger
from .core import Graph

logger = get_logger(__name__)


def bfs_tree(
    graph: Graph, source: Hashable
) -> Tuple[List[Hashable], Dict[Hashable, int], Dict[Hashable, Optional[Hashable]]]:
    """
    Breadth-first search from a source vertex.

    Returns vertices in BFS visitation order, hop distances from source, and
    parent map for path reconstruction. Only reachable vertices appear in
    the distance and parent maps.

    Args:
        graph: Graph to traverse.
        source: Vertex to start BFS from.

    Returns:
        Tuple of:
        - order: List of vertices in BFS visitation order
        - distance: Dictionary mapping vertex -> number of edges from source
        - parent: Dictionary mapping vertex -> parent vertex (None for source)

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        >>> G.add_edge('A', 'C')
        >>> order, dist, parent = bfs_tree(G, 'A')
        >>> order
        ['A', 'B', 'C']
        >>> dist['C']
        1
    """
    if not graph.has_vertex(source):
        return [], {}, {}

    order: List[Hashable] = []
    distance: Dict[Hashable, int] = {source: 0}
    parent: Dict[Hashable, Optional[Hashable]] = {source: None}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        order.append(u)

        for v in graph.neighbors(u):
            if v not in distance:
                distance[v] = distance[u] + 1
                parent[v] = u
                queue.append(v)

    return order, distance, parent


def bfs(graph: Graph, source: Hashable) -> List[Hashable]:
    """
    Breadth-first visitation order from a source vertex.

    Each reachable vertex is visited exactly once; unreachable vertices are
    excluded. An absent source yields an empty list.

    Args:
        graph: Graph to traverse.
        source: Vertex to start BFS from.

    Returns:
        List of vertices in BFS visitation order.
    """
    order, _, _ = bfs_tree(graph, source)
    return order


def bfs_distances(graph: Graph, source: Hashable) -> Dict[Hashable, int]:
    """Hop counts from source to every reachable vertex."""
    _, distance, _ = bfs_tree(graph, source)
    return distance


def dfs_iterative(graph: Graph, source: Hashable) -> List[Hashable]:
    """
    Depth-first search (iterative implementation using stack).

    Neighbors are pushed in reverse adjacency order and a vertex is marked
    visited when popped, which reproduces the recursive pre-order exactly.

    Args:
        graph: Graph to traverse.
        source: Vertex to start DFS from.

    Returns:
        List of vertices in pre-order (when first discovered).

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = Graph()
        >>> G.add_edge('A', 'B')
        >>> G.add_edge('B', 'D')
        >>> G.add_edge('A', 'C')
        >>> dfs_iterative(G, 'A')
        ['A', 'B', 'D', 'C']
    """
    if not graph.has_vertex(source):
        return []

    preorder: List[Hashable] = []
    visited: Set[Hashable] = set()
    stack: List[Hashable] = [source]

    while stack:
        u = stack.pop()
        if u in visited:
            continue

        visited.add(u)
        preorder.append(u)

        for v in reversed(graph.neighbors(u)):
            if v not in visited:
                stack.append(v)

    return preorder


def dfs_recursive(graph: Graph, source: Hashable) -> List[Hashable]:
    """
    Depth-first search (recursive implementation).

    Same ordering as dfs_iterative. Recursion depth equals the length of the
    deepest DFS branch, so very deep graphs raise RecursionError; use
    dfs_iterative for those.

    Args:
        graph: Graph to traverse.
        source: Vertex to start DFS from.

    Returns:
        List of vertices in pre-order.

    Complexity: O(V + E) where V is vertices and E is edges.
    """
    if not graph.has_vertex(source):
        return []

    preorder: List[Hashable] = []
    visited: Set[Hashable] = set()

    def dfs_visit(u: Hashable) -> None:
        visited.add(u)
        preorder.append(u)

        for v in graph.neighbors(u):
            if v not in visited:
                dfs_visit(v)

    dfs_visit(source)
    logger.debug("dfs_recursive from %r visited %d vertices", source, len(preorder))
    return preorder
