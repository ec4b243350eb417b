"""
Unweighted path queries: shortest path by hop count and simple-path
enumeration.

All searches use explicit stacks or queues, so path length is not bounded
by the interpreter recursion limit.
"""

from collections import deque
from typing import Dict, Hashable, Iterator, List, Optional, Set

from ..logging import get_logger
from .core import Graph
from .utils import reconstruct_path

logger = get_logger(__name__)

_EXHAUSTED = object()


def shortest_path_bfs(graph: Graph, start: Hashable, end: Hashable) -> List[Hashable]:
    """
    Shortest path by number of edges, ignoring weights.

    Args:
        graph: Graph to search.
        start: Source vertex.
        end: Target vertex.

    Returns:
        Vertices from start to end inclusive; [start] when start == end;
        an empty list when end is unreachable or either vertex is absent.

    Complexity: O(V + E); stops as soon as end is dequeued.

    Example:
        >>> G = Graph()
        >>> G.add_edge(0, 1)
        >>> G.add_edge(1, 2)
        >>> G.add_edge(0, 2)
        >>> shortest_path_bfs(G, 0, 2)
        [0, 2]
    """
    if not graph.has_vertex(start) or not graph.has_vertex(end):
        return []

    parent: Dict[Hashable, Optional[Hashable]] = {start: None}
    queue = deque([start])

    while queue:
        u = queue.popleft()
        if u == end:
            break
        for v in graph.neighbors(u):
            if v not in parent:
                parent[v] = u
                queue.append(v)

    return reconstruct_path(parent, end)


def _iter_simple_paths(graph: Graph, start: Hashable, end: Hashable) -> Iterator[List[Hashable]]:
    """Yield every simple path from start to end in DFS order."""
    if not graph.has_vertex(start) or not graph.has_vertex(end):
        return
    if start == end:
        yield [start]
        return

    path: List[Hashable] = [start]
    on_path: Set[Hashable] = {start}
    stack = [iter(graph.neighbors(start))]

    while stack:
        v = next(stack[-1], _EXHAUSTED)
        if v is _EXHAUSTED:
            stack.pop()
            on_path.discard(path.pop())
            continue
        if v in on_path:
            continue
        if v == end:
            yield path + [v]
            continue

        path.append(v)
        on_path.add(v)
        stack.append(iter(graph.neighbors(v)))


def find_all_paths(graph: Graph, start: Hashable, end: Hashable) -> List[List[Hashable]]:
    """
    All simple paths from start to end.

    A path never revisits a vertex. Paths are listed in depth-first order
    following adjacency order. The number of paths can grow exponentially
    with the size of the graph.

    Args:
        graph: Graph to search.
        start: Source vertex.
        end: Target vertex.

    Returns:
        List of paths, each a list of vertices from start to end inclusive.
    """
    paths = list(_iter_simple_paths(graph, start, end))
    logger.debug("find_all_paths(%r, %r): %d paths", start, end, len(paths))
    return paths


def count_paths(graph: Graph, start: Hashable, end: Hashable) -> int:
    """Number of simple paths from start to end."""
    return sum(1 for _ in _iter_simple_paths(graph, start, end))
