"""
Graph store and algorithm suite for graphsuite.

This package provides:
- The Graph store (weighted, directed or undirected adjacency lists)
- Traversal algorithms (BFS, iterative and recursive DFS)
- Path queries (unweighted shortest path, simple-path enumeration)
- Shortest path algorithms (Dijkstra, A*, Bellman-Ford)
- Structural analysis (cycles, topological sort, connectivity)
- Minimum spanning trees (Kruskal, Prim)
- Greedy vertex coloring

Neighbors keep insertion order and priority frontiers break ties by vertex
ordering, so every algorithm is deterministic for a given graph.
"""

from .analysis import (
    connected_components,
    count_connected_components,
    find_cycle,
    has_cycle,
    is_graph_connected,
    is_reachable,
    topological_sort,
)
from .coloring import graph_coloring
from .core import Graph
from .mst import UnionFind, kruskal_mst, prim_mst
from .paths import count_paths, find_all_paths, shortest_path_bfs
from .shortest import astar, bellman_ford, dijkstra, dijkstra_distances, zero_heuristic
from .traversal import bfs, bfs_distances, bfs_tree, dfs_iterative, dfs_recursive
from .utils import adjacency_matrix, node_index_map, path_weight, reconstruct_path

__all__ = [
    "Graph",
    "bfs",
    "bfs_tree",
    "bfs_distances",
    "dfs_iterative",
    "dfs_recursive",
    "shortest_path_bfs",
    "find_all_paths",
    "count_paths",
    "dijkstra",
    "dijkstra_distances",
    "astar",
    "zero_heuristic",
    "bellman_ford",
    "has_cycle",
    "find_cycle",
    "topological_sort",
    "connected_components",
    "count_connected_components",
    "is_graph_connected",
    "is_reachable",
    "UnionFind",
    "kruskal_mst",
    "prim_mst",
    "graph_coloring",
    "reconstruct_path",
    "path_weight",
    "node_index_map",
    "adjacency_matrix",
]

# Example usage:
# from graphsuite.graphs import Graph, dijkstra, path_weight
#
# G = Graph(directed=False)
# G.add_edge(0, 1, 2)
# G.add_edge(1, 2, 3)
# G.add_edge(2, 3, 4)
# path = dijkstra(G, 0, 3)   # [0, 1, 2, 3]
# path_weight(G, path)       # 9
