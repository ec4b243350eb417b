"""graphsuite - an in-memory weighted graph store with a bundled algorithm suite."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_graph_consistent,
    check_graph,
    debug_context,
    graph_summary,
    is_debug_enabled,
    set_debug_enabled,
)

# Errors
from .errors import (
    ColoringInfeasibleError,
    CycleDetectedError,
    GraphError,
    GraphInvariantError,
    NegativeCycleError,
    NegativeWeightError,
)

# Graph store and algorithms
from .graphs import (
    Graph,
    UnionFind,
    adjacency_matrix,
    astar,
    bellman_ford,
    bfs,
    bfs_distances,
    bfs_tree,
    connected_components,
    count_connected_components,
    count_paths,
    dfs_iterative,
    dfs_recursive,
    dijkstra,
    dijkstra_distances,
    find_all_paths,
    find_cycle,
    graph_coloring,
    has_cycle,
    is_graph_connected,
    is_reachable,
    kruskal_mst,
    node_index_map,
    path_weight,
    prim_mst,
    reconstruct_path,
    shortest_path_bfs,
    topological_sort,
    zero_heuristic,
)

# Serialization
from .io import (
    dump_json_graph,
    graph_to_dot,
    graph_to_json,
    json_to_graph,
    load_json_graph,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph store
    "Graph",
    # Traversal
    "bfs",
    "bfs_tree",
    "bfs_distances",
    "dfs_iterative",
    "dfs_recursive",
    # Paths
    "shortest_path_bfs",
    "find_all_paths",
    "count_paths",
    "dijkstra",
    "dijkstra_distances",
    "astar",
    "zero_heuristic",
    "bellman_ford",
    # Analysis
    "has_cycle",
    "find_cycle",
    "topological_sort",
    "connected_components",
    "count_connected_components",
    "is_graph_connected",
    "is_reachable",
    # Spanning trees and coloring
    "UnionFind",
    "kruskal_mst",
    "prim_mst",
    "graph_coloring",
    # Utilities
    "reconstruct_path",
    "path_weight",
    "node_index_map",
    "adjacency_matrix",
    # Errors
    "GraphError",
    "CycleDetectedError",
    "NegativeCycleError",
    "NegativeWeightError",
    "ColoringInfeasibleError",
    "GraphInvariantError",
    # Diagnostics
    "assert_graph_consistent",
    "check_graph",
    "graph_summary",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Serialization
    "graph_to_dot",
    "graph_to_json",
    "json_to_graph",
    "dump_json_graph",
    "load_json_graph",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
