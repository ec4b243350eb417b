"""
Core graph data structure.

Provides the Graph class: a weighted, directed or undirected adjacency-list
store. Neighbor lists keep insertion order, so every traversal built on top
of the store is deterministic for a given sequence of mutations.
"""

from typing import Callable, Dict, Hashable, List, Optional, Tuple, Union

from ..diagnostics import check_graph
from ..logging import get_logger

logger = get_logger(__name__)

Weight = Union[int, float]
Edge = Tuple[Hashable, Hashable, Weight]
ChangeCallback = Callable[[], None]


class Graph:
    """
    Weighted graph with adjacency-list representation.

    Vertices are any hashable, totally ordered values; they are created
    explicitly with add_vertex or implicitly by add_edge and only ever
    destroyed by remove_vertex. Each vertex maps to an ordered list of
    (neighbor, weight) pairs. In an undirected graph every edge is stored
    at both endpoints, except self-loops which are stored once.

    Observers registered with subscribe() are called synchronously, with no
    arguments, after every mutation that changes the structure.

    Attributes:
        directed: If True, graph is directed; otherwise undirected. Fixed
            at construction.

    Complexity:
        - add_vertex: O(1)
        - add_edge: O(deg(u)) for the duplicate check
        - remove_vertex: O(V + E)
        - neighbors: O(deg(v))
        - edges: O(V + E)
    """

    def __init__(self, directed: bool = True):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self._directed = directed
        self._adj: Dict[Hashable, List[Tuple[Hashable, Weight]]] = {}
        self._vertex_count: Optional[int] = None
        self._observers: List[ChangeCallback] = []

    @property
    def directed(self) -> bool:
        return self._directed

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, callback: ChangeCallback) -> None:
        """
        Register a callback invoked after each structural mutation.

        Registering the same callback twice has no effect.

        Args:
            callback: Zero-argument callable. Observers re-query the graph
                for whatever state they need.
        """
        if callback not in self._observers:
            self._observers.append(callback)

    def unsubscribe(self, callback: ChangeCallback) -> None:
        """Remove a previously registered callback (no-op if unknown)."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _changed(self, action: str) -> None:
        self._vertex_count = None
        logger.debug("graph mutated: %s", action)

        check_graph(self)

        for callback in list(self._observers):
            callback()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: Hashable) -> None:
        """
        Add a vertex to the graph. Adding an existing vertex does nothing.

        Args:
            vertex: Hashable, orderable vertex identifier.
        """
        if vertex in self._adj:
            return
        self._adj[vertex] = []
        self._changed(f"add_vertex({vertex!r})")

    def remove_vertex(self, vertex: Hashable) -> None:
        """
        Remove a vertex and every edge that touches it.

        Removing an absent vertex does nothing.

        Args:
            vertex: Vertex to remove.
        """
        if vertex not in self._adj:
            return

        del self._adj[vertex]
        for u, neighbors in self._adj.items():
            self._adj[u] = [(v, w) for v, w in neighbors if v != vertex]

        self._changed(f"remove_vertex({vertex!r})")

    def add_edge(self, u: Hashable, v: Hashable, weight: Weight = 1) -> None:
        """
        Add an edge from u to v, creating missing endpoints.

        For undirected graphs the edge is mirrored at v (self-loops are
        stored once). Re-adding an existing edge is a no-op: the stored
        weight is kept.

        Args:
            u: Source vertex.
            v: Destination vertex.
            weight: Edge weight (default 1).
        """
        changed = False
        for vertex in (u, v):
            if vertex not in self._adj:
                self._adj[vertex] = []
                changed = True

        if not self.has_edge(u, v):
            self._adj[u].append((v, weight))
            if not self._directed and u != v and not self.has_edge(v, u):
                self._adj[v].append((u, weight))
            changed = True

        if changed:
            self._changed(f"add_edge({u!r}, {v!r}, {weight!r})")

    def remove_edge(self, u: Hashable, v: Hashable) -> None:
        """
        Remove the edge from u to v (both mirrored entries if undirected).

        Removing an absent edge does nothing.

        Args:
            u: Source vertex.
            v: Destination vertex.
        """
        if not self.has_edge(u, v):
            return

        self._adj[u] = [(n, w) for n, w in self._adj[u] if n != v]
        if not self._directed and v in self._adj:
            self._adj[v] = [(n, w) for n, w in self._adj[v] if n != u]

        self._changed(f"remove_edge({u!r}, {v!r})")

    def reverse_graph(self) -> None:
        """
        Invert the direction of every edge in place.

        All vertices are kept, including those that end up with no outgoing
        edges. For undirected graphs the result is the same edge set.
        """
        reversed_adj: Dict[Hashable, List[Tuple[Hashable, Weight]]] = {
            vertex: [] for vertex in self._adj
        }
        for u, neighbors in self._adj.items():
            for v, weight in neighbors:
                reversed_adj[v].append((u, weight))

        self._adj = reversed_adj
        self._changed("reverse_graph()")

    def clone(self) -> "Graph":
        """
        Return an independent copy with the same directedness and edges.

        Observers are not copied.

        Returns:
            New Graph instance.
        """
        other = Graph(directed=self._directed)
        other._adj = {u: list(neighbors) for u, neighbors in self._adj.items()}
        return other

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._adj

    def has_edge(self, u: Hashable, v: Hashable) -> bool:
        """
        Return whether an edge from u to v exists.

        Args:
            u: Source vertex.
            v: Destination vertex.

        Returns:
            True if v is in u's adjacency list.
        """
        return any(n == v for n, _ in self._adj.get(u, ()))

    def neighbors(self, vertex: Hashable) -> List[Hashable]:
        """
        Return neighbors of a vertex in insertion order.

        An absent vertex yields an empty list, the same as a vertex with no
        outgoing edges; use has_vertex() to tell the two apart.

        Args:
            vertex: Vertex to get neighbors for.

        Returns:
            New list of neighbor vertices.
        """
        return [n for n, _ in self._adj.get(vertex, ())]

    def neighbors_with_weights(self, vertex: Hashable) -> List[Tuple[Hashable, Weight]]:
        """
        Return (neighbor, weight) pairs of a vertex in insertion order.

        Args:
            vertex: Vertex to get neighbors for.

        Returns:
            New list of (neighbor, weight) tuples, empty for absent vertices.
        """
        return list(self._adj.get(vertex, ()))

    @property
    def vertex_count(self) -> int:
        """Number of vertices. Cached until the next mutation."""
        if self._vertex_count is None:
            self._vertex_count = len(self._adj)
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        """
        Number of edges.

        Directed graphs count adjacency entries; undirected graphs count
        each mirrored pair once.
        """
        raw = sum(len(neighbors) for neighbors in self._adj.values())
        if self._directed:
            return raw
        self_loops = sum(
            1 for u, neighbors in self._adj.items() for v, _ in neighbors if v == u
        )
        return (raw + self_loops) // 2

    def vertices(self) -> List[Hashable]:
        """Return all vertices in insertion order."""
        return list(self._adj)

    def edges(self) -> List[Edge]:
        """
        Return all edges as (source, destination, weight) triples.

        For undirected graphs each edge appears once, oriented the way it
        is first met when walking vertices in insertion order.

        Returns:
            List of (u, v, weight) tuples.
        """
        edges_list: List[Edge] = []
        seen = set()

        for u, neighbors in self._adj.items():
            for v, weight in neighbors:
                if not self._directed:
                    if (v, u) in seen:
                        continue
                    seen.add((u, v))
                edges_list.append((u, v, weight))

        return edges_list

    def adjacency(self) -> Dict[Hashable, List[Hashable]]:
        """
        Return the unweighted adjacency view: vertex -> list of neighbors.

        The lists are fresh copies; mutating them does not affect the graph.
        """
        return {u: [v for v, _ in neighbors] for u, neighbors in self._adj.items()}

    def __contains__(self, vertex: Hashable) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        return (
            f"Graph(directed={self._directed}, vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )
