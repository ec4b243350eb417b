"""
Minimum spanning tree algorithms: Kruskal and Prim.

Kruskal uses union-find data structure. Prim uses priority queue.

Both treat every stored edge as undirected. Kruskal returns a spanning
forest when the graph is disconnected; Prim spans only the component of its
start vertex.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal), 23.2 (Prim).
"""

import heapq
from typing import Dict, Hashable, Iterable, List, Optional, Set, Tuple

from ..logging import get_logger
from .core import Edge, Graph, Weight

logger = get_logger(__name__)


class UnionFind:
    """
    Union-Find (Disjoint Set) data structure with path compression and union by rank.

    Used by Kruskal's algorithm for efficient cycle detection.
    """

    def __init__(self, nodes: Iterable[Hashable]):
        """
        Initialize union-find with every node in its own set.

        Args:
            nodes: Iterable of nodes.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank: Dict[Hashable, int] = {}

        for node in nodes:
            self.parent[node] = node
            self.rank[node] = 0

    def find(self, x: Hashable) -> Hashable:
        """
        Find root of x with path compression.

        Args:
            x: Node to find root for.

        Returns:
            Root node.
        """
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Union sets containing x and y using union by rank.

        Args:
            x: First node.
            y: Second node.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        return self.find(x) == self.find(y)


def kruskal_mst(graph: Graph) -> List[Edge]:
    """
    Kruskal's algorithm for minimum spanning tree.

    Edges are sorted by weight (stable, so equal weights keep edge order) and
    accepted whenever their endpoints lie in different sets.

    Args:
        graph: Graph whose edges are taken as undirected.

    Returns:
        List of (u, v, weight) edges in acceptance order. A connected graph
        yields |V| - 1 edges; a disconnected one yields a spanning forest.

    Complexity: O(E log E) = O(E log V) for sorting and union-find operations.

    Example:
        >>> G = Graph(directed=False)
        >>> G.add_edge('A', 'B', 1)
        >>> G.add_edge('B', 'C', 2)
        >>> G.add_edge('A', 'C', 3)
        >>> kruskal_mst(G)
        [('A', 'B', 1), ('B', 'C', 2)]
    """
    edge_list = sorted(graph.edges(), key=lambda edge: edge[2])

    uf = UnionFind(graph.vertices())
    mst_edges: List[Edge] = []

    for u, v, weight in edge_list:
        if uf.union(u, v):
            mst_edges.append((u, v, weight))
            logger.debug("kruskal accepted (%r, %r, %r)", u, v, weight)

    return mst_edges


def prim_mst(graph: Graph, start: Optional[Hashable] = None) -> List[Edge]:
    """
    Prim's algorithm for minimum spanning tree.

    Grows a tree from start, always taking the cheapest frontier edge
    (weight, from, to) that reaches a vertex outside the tree; ties are
    broken by vertex ordering.

    Args:
        graph: Graph whose outgoing adjacency defines the frontier.
        start: Starting vertex (defaults to the first inserted vertex).

    Returns:
        List of (from, to, weight) edges in the order they joined the tree.
        Empty for an empty graph.

    Raises:
        ValueError: If start is given but not in the graph.

    Complexity: O(E log V) using binary heap.

    Example:
        >>> G = Graph(directed=False)
        >>> G.add_edge('A', 'B', 1)
        >>> G.add_edge('B', 'C', 2)
        >>> prim_mst(G, 'A')
        [('A', 'B', 1), ('B', 'C', 2)]
    """
    vertices = graph.vertices()
    if not vertices:
        return []

    if start is None:
        start = vertices[0]
    elif not graph.has_vertex(start):
        raise ValueError(f"Start vertex {start!r} not in graph")

    in_mst: Set[Hashable] = {start}
    mst_edges: List[Edge] = []
    frontier: List[Tuple[Weight, Hashable, Hashable]] = [
        (weight, start, v) for v, weight in graph.neighbors_with_weights(start)
    ]
    heapq.heapify(frontier)

    while frontier and len(in_mst) < len(vertices):
        weight, u, v = heapq.heappop(frontier)
        if v in in_mst:
            continue

        in_mst.add(v)
        mst_edges.append((u, v, weight))

        for neighbor, edge_weight in graph.neighbors_with_weights(v):
            if neighbor not in in_mst:
                heapq.heappush(frontier, (edge_weight, v, neighbor))

    logger.debug("prim from %r spanned %d of %d vertices", start, len(in_mst), len(vertices))
    return mst_edges
