"""
Structural analysis: cycles, topological order, connectivity.

Depth-first searches here keep an explicit stack of (vertex, neighbor
iterator) frames, so arbitrarily deep graphs do not hit the recursion
limit.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.3 (DFS edge classification) and 22.4 (topological sort).
"""

from collections import deque
from typing import Dict, Hashable, Iterator, List, Set, Tuple

from ..errors import CycleDetectedError
from ..logging import get_logger
from .core import Graph
from .paths import shortest_path_bfs
from .traversal import bfs

logger = get_logger(__name__)

_EXHAUSTED = object()
_ROOT = object()

_ON_STACK = 1
_DONE = 2

Frame = Tuple[Hashable, Iterator[Hashable]]


def _walk_back(parent: Dict[Hashable, object], tail: Hashable, head: Hashable) -> List[Hashable]:
    """Vertices head .. tail along the DFS tree, for a closing edge tail -> head."""
    cycle = [tail]
    current = tail
    while current != head:
        current = parent[current]
        cycle.append(current)
    cycle.reverse()
    return cycle


def _find_directed_cycle(graph: Graph) -> List[Hashable]:
    state: Dict[Hashable, int] = {}
    parent: Dict[Hashable, object] = {}

    for root in graph.vertices():
        if root in state:
            continue

        state[root] = _ON_STACK
        parent[root] = _ROOT
        stack: List[Frame] = [(root, iter(graph.neighbors(root)))]

        while stack:
            u, neighbors = stack[-1]
            v = next(neighbors, _EXHAUSTED)
            if v is _EXHAUSTED:
                state[u] = _DONE
                stack.pop()
                continue

            if v not in state:
                state[v] = _ON_STACK
                parent[v] = u
                stack.append((v, iter(graph.neighbors(v))))
            elif state[v] == _ON_STACK:
                return _walk_back(parent, u, v)

    return []


def _find_undirected_cycle(graph: Graph) -> List[Hashable]:
    parent: Dict[Hashable, object] = {}

    for root in graph.vertices():
        if root in parent:
            continue

        parent[root] = _ROOT
        stack: List[Frame] = [(root, iter(graph.neighbors(root)))]

        while stack:
            u, neighbors = stack[-1]
            v = next(neighbors, _EXHAUSTED)
            if v is _EXHAUSTED:
                stack.pop()
                continue

            if v not in parent:
                parent[v] = u
                stack.append((v, iter(graph.neighbors(v))))
            elif v != parent[u]:
                # The mirrored entry back to the tree parent is not a cycle
                return _walk_back(parent, u, v)

    return []


def find_cycle(graph: Graph) -> List[Hashable]:
    """
    Find one cycle in the graph.

    Directed graphs use the recursion-stack technique: meeting a vertex that
    is still on the DFS stack closes a cycle. Undirected graphs track the DFS
    parent instead, so the mirrored entry of a single edge is not reported.

    Args:
        graph: Graph to inspect.

    Returns:
        Vertices of the cycle in edge order, such that every consecutive pair
        and the pair (cycle[-1], cycle[0]) are edges. A self-loop yields a
        one-element list. Empty if the graph is acyclic.

    Complexity: O(V + E).

    Example:
        >>> G = Graph()
        >>> G.add_edge(0, 1)
        >>> G.add_edge(1, 2)
        >>> G.add_edge(2, 0)
        >>> find_cycle(G)
        [0, 1, 2]
    """
    if graph.directed:
        return _find_directed_cycle(graph)
    return _find_undirected_cycle(graph)


def has_cycle(graph: Graph) -> bool:
    """Return whether the graph contains at least one cycle."""
    return bool(find_cycle(graph))


def _undirected_topological_sort(graph: Graph) -> List[Hashable]:
    cycle = _find_undirected_cycle(graph)
    if cycle:
        logger.debug("topological_sort found cycle %r", cycle)
        raise CycleDetectedError(
            f"Graph contains a cycle {cycle!r}; no topological order exists.",
            cycle=cycle,
        )
    if graph.edge_count:
        raise ValueError("Topological order is undefined for undirected graphs with edges.")
    return graph.vertices()


def topological_sort(graph: Graph) -> List[Hashable]:
    """
    Topological order of the vertices via depth-first post-order.

    Each vertex is appended when its DFS frame finishes; the reversed list
    places u before v for every edge u -> v. Roots are taken in vertex
    insertion order.

    An undirected graph sorts only when it has no edges. Otherwise it raises
    CycleDetectedError if find_cycle reports a cycle, and a plain ValueError
    if it does not.

    Args:
        graph: Graph to sort.

    Returns:
        List of all vertices in topological order.

    Raises:
        CycleDetectedError: If the graph contains a cycle. The exception's
            ``cycle`` attribute holds the offending cycle.
        ValueError: If the graph is undirected, acyclic and has an edge.

    Complexity: O(V + E).
    """
    if not graph.directed:
        return _undirected_topological_sort(graph)

    state: Dict[Hashable, int] = {}
    parent: Dict[Hashable, object] = {}
    postorder: List[Hashable] = []

    for root in graph.vertices():
        if root in state:
            continue

        state[root] = _ON_STACK
        parent[root] = _ROOT
        stack: List[Frame] = [(root, iter(graph.neighbors(root)))]

        while stack:
            u, neighbors = stack[-1]
            v = next(neighbors, _EXHAUSTED)
            if v is _EXHAUSTED:
                state[u] = _DONE
                postorder.append(u)
                stack.pop()
                continue

            if v not in state:
                state[v] = _ON_STACK
                parent[v] = u
                stack.append((v, iter(graph.neighbors(v))))
            elif state[v] == _ON_STACK:
                cycle = _walk_back(parent, u, v)
                logger.debug("topological_sort found cycle %r", cycle)
                raise CycleDetectedError(
                    f"Graph contains a cycle {cycle!r}; no topological order exists.",
                    cycle=cycle,
                )

    postorder.reverse()
    return postorder


def connected_components(graph: Graph) -> List[List[Hashable]]:
    """
    Partition the vertices by repeated BFS from each unvisited vertex.

    Seeds are taken in vertex insertion order and each component lists its
    vertices in BFS order. For directed graphs BFS follows outgoing edges
    only and never re-enters an earlier component, so the result is a
    partition but not the strongly (or weakly) connected components.

    Args:
        graph: Graph to partition.

    Returns:
        List of components, each a list of vertices.
    """
    visited: Set[Hashable] = set()
    components: List[List[Hashable]] = []

    for root in graph.vertices():
        if root in visited:
            continue

        component: List[Hashable] = []
        visited.add(root)
        queue = deque([root])
        while queue:
            u = queue.popleft()
            component.append(u)
            for v in graph.neighbors(u):
                if v not in visited:
                    visited.add(v)
                    queue.append(v)

        components.append(component)

    logger.debug("connected_components: %d components", len(components))
    return components


def count_connected_components(graph: Graph) -> int:
    return len(connected_components(graph))


def is_graph_connected(graph: Graph) -> bool:
    """
    Return whether a single BFS from the first vertex reaches every vertex.

    The empty graph is connected. For directed graphs this only checks
    reachability from the first inserted vertex, not strong connectivity.
    """
    vertices = graph.vertices()
    if not vertices:
        return True
    return len(bfs(graph, vertices[0])) == graph.vertex_count


def is_reachable(graph: Graph, start: Hashable, end: Hashable) -> bool:
    """Return whether a path from start to end exists."""
    return bool(shortest_path_bfs(graph, start, end))
