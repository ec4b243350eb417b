"""
Utility functions for graph algorithms.

Provides helpers for path reconstruction, path weights, vertex indexing and
dense adjacency matrices.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .core import Graph, Weight


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]], target: Hashable
) -> List[Hashable]:
    """
    Reconstruct path from source to target using parent map.

    The parent map should come from a search (e.g., BFS, Dijkstra) where
    parent[vertex] is the previous vertex on the path and the source maps
    to None. Vertices missing from the map are unreachable.

    Args:
        parent: Dictionary mapping vertex -> parent vertex (or None).
        target: Target vertex to reconstruct path to.

    Returns:
        List of vertices from source to target (inclusive), or an empty
        list if target is unreachable.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'D')
        []
    """
    if target not in parent:
        return []

    path = []
    current: Optional[Hashable] = target
    visited = set()
    while current is not None:
        if current in visited:
            # Parent maps from a finished search never loop
            raise ValueError(f"Parent map contains a loop through {current!r}")
        visited.add(current)
        path.append(current)
        current = parent[current]

    path.reverse()
    return path


def path_weight(graph: Graph, path: Sequence[Hashable]) -> Weight:
    """
    Total weight of the edges along a path.

    Args:
        graph: Graph the path lives in.
        path: Sequence of vertices; consecutive pairs must be edges.

    Returns:
        Sum of edge weights (0 for paths with fewer than two vertices).

    Raises:
        KeyError: If a consecutive pair is not an edge of the graph.
    """
    total: Weight = 0
    for u, v in zip(path, path[1:]):
        for n, weight in graph.neighbors_with_weights(u):
            if n == v:
                total += weight
                break
        else:
            raise KeyError(f"Edge ({u!r}, {v!r}) not in graph")
    return total


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create a mapping from vertices to indices 0..n-1.

    Order of first appearance is kept; duplicates are dropped.

    Args:
        nodes: Iterable of hashable vertices.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'c', 'b'])
        >>> node_to_idx
        {'c': 0, 'a': 1, 'b': 2}
    """
    ordered = list(dict.fromkeys(nodes))
    node_to_index = {node: idx for idx, node in enumerate(ordered)}
    return node_to_index, ordered


def adjacency_matrix(graph: Graph, nodes: Optional[List[Hashable]] = None) -> np.ndarray:
    """
    Dense weighted adjacency matrix.

    W[i, j] is the weight of the edge nodes[i] -> nodes[j] and 0 where there
    is no edge. Undirected graphs produce a symmetric matrix.

    Args:
        graph: Graph instance.
        nodes: Optional vertex ordering (defaults to insertion order). Edges
            touching vertices outside this list are ignored.

    Returns:
        (n, n) numpy array in node index order.

    Example:
        >>> G = Graph(directed=False)
        >>> G.add_edge('A', 'B', 3)
        >>> adjacency_matrix(G)
        array([[0., 3.],
               [3., 0.]])
    """
    if nodes is None:
        nodes = graph.vertices()

    node_to_idx, idx_to_node = node_index_map(nodes)
    n = len(idx_to_node)
    W = np.zeros((n, n))

    for u in idx_to_node:
        i = node_to_idx[u]
        for v, weight in graph.neighbors_with_weights(u):
            if v in node_to_idx:
                W[i, node_to_idx[v]] = weight

    return W
