"""Tests for shortest path algorithms."""

import pytest

from graphsuite.errors import NegativeCycleError, NegativeWeightError
from graphsuite.graphs import (
    Graph,
    astar,
    bellman_ford,
    dijkstra,
    dijkstra_distances,
    path_weight,
    zero_heuristic,
)


def make_path_graph():
    G = Graph(directed=False)
    G.add_edge(0, 1, 2)
    G.add_edge(1, 2, 3)
    G.add_edge(2, 3, 4)
    return G


def make_detour_graph():
    G = Graph()
    G.add_edge(0, 1, 1)
    G.add_edge(1, 2, 1)
    G.add_edge(0, 2, 10)
    return G


class TestDijkstra:
    """Tests for Dijkstra's algorithm."""

    def test_dijkstra_path_graph(self):
        """Test Dijkstra along an undirected path graph."""
        G = make_path_graph()
        path = dijkstra(G, 0, 3)
        assert path == [0, 1, 2, 3]
        assert path_weight(G, path) == 9

    def test_dijkstra_prefers_cheaper_detour(self):
        """Test that two cheap edges beat one expensive edge."""
        G = make_detour_graph()
        path = dijkstra(G, 0, 2)
        assert path == [0, 1, 2]
        assert path_weight(G, path) == 2

    def test_dijkstra_unreachable(self):
        """Test Dijkstra with unreachable target."""
        G = Graph()
        for v in range(4):
            G.add_vertex(v)
        assert dijkstra(G, 0, 1) == []

    def test_dijkstra_start_equals_end(self):
        """Test Dijkstra on a zero-length path."""
        G = make_path_graph()
        assert dijkstra(G, 2, 2) == [2]

    def test_dijkstra_absent_vertices(self):
        """Test Dijkstra with absent endpoints."""
        G = make_path_graph()
        assert dijkstra(G, 0, 42) == []
        assert dijkstra(G, 42, 0) == []

    def test_dijkstra_tie_break_by_vertex_order(self):
        """Test that equal-distance frontier entries pop in vertex order."""
        G = Graph()
        G.add_edge("s", "b", 1)
        G.add_edge("s", "a", 1)
        G.add_edge("b", "t", 1)
        G.add_edge("a", "t", 1)
        # 'a' is settled before 'b' and claims 't' first
        assert dijkstra(G, "s", "t") == ["s", "a", "t"]

    def test_dijkstra_distances(self):
        """Test single-source distances."""
        G = make_path_graph()
        G.add_vertex(9)
        assert dijkstra_distances(G, 0) == {0: 0, 1: 2, 2: 5, 3: 9}
        assert dijkstra_distances(G, 42) == {}

    def test_dijkstra_negative_weights_error(self):
        """Test that Dijkstra raises error for negative weights."""
        G = Graph()
        G.add_edge("A", "B", -1)
        with pytest.raises(NegativeWeightError, match="non-negative"):
            dijkstra(G, "A", "B")
        with pytest.raises(ValueError):
            dijkstra_distances(G, "A")

    def test_dijkstra_ignores_unreachable_negative_edge(self):
        """Test that a negative edge the search never reaches is not an error."""
        G = Graph()
        G.add_edge(0, 1, 1)
        G.add_edge(5, 6, -1)
        assert dijkstra(G, 0, 1) == [0, 1]
        assert dijkstra_distances(G, 0) == {0: 0, 1: 1}
        assert astar(G, 0, 1) == [0, 1]
        with pytest.raises(NegativeWeightError):
            dijkstra(G, 5, 6)


class TestAStar:
    """Tests for A* search."""

    def test_astar_zero_heuristic_matches_dijkstra(self):
        """Test A* with the zero heuristic takes the cheap detour."""
        G = make_detour_graph()
        path = astar(G, 0, 2, zero_heuristic)
        assert path == [0, 1, 2]
        assert path == dijkstra(G, 0, 2)
        assert path_weight(G, path) == 2

    def test_astar_default_heuristic(self):
        """Test that the heuristic defaults to zero."""
        G = make_detour_graph()
        assert astar(G, 0, 2) == [0, 1, 2]

    def test_astar_grid_manhattan(self):
        """Test A* with an admissible Manhattan heuristic on a grid."""
        G = Graph(directed=False)
        size = 5
        walls = {(1, 1), (1, 2), (1, 3), (3, 1), (3, 2), (3, 3)}
        for x in range(size):
            for y in range(size):
                if (x, y) in walls:
                    continue
                G.add_vertex((x, y))
                for nx, ny in ((x + 1, y), (x, y + 1)):
                    if nx < size and ny < size and (nx, ny) not in walls:
                        G.add_edge((x, y), (nx, ny))

        def manhattan(v, goal):
            return abs(v[0] - goal[0]) + abs(v[1] - goal[1])

        path = astar(G, (0, 0), (4, 4), manhattan)
        assert path[0] == (0, 0)
        assert path[-1] == (4, 4)
        assert path_weight(G, path) == 8
        assert path_weight(G, path) == path_weight(G, dijkstra(G, (0, 0), (4, 4)))

    def test_astar_heuristic_receives_goal(self):
        """Test that the heuristic is called with (vertex, goal)."""
        G = make_detour_graph()
        goals = set()

        def spy(v, goal):
            goals.add(goal)
            return 0

        astar(G, 0, 2, spy)
        assert goals == {2}

    def test_astar_unreachable(self):
        """Test A* with unreachable target."""
        G = Graph()
        G.add_vertex(0)
        G.add_vertex(1)
        assert astar(G, 0, 1, lambda a, b: 0) == []


class TestBellmanFord:
    """Tests for Bellman-Ford algorithm."""

    def test_bellman_ford_simple(self):
        """Test Bellman-Ford on simple graph."""
        G = Graph()
        G.add_edge(0, 1, 1)
        G.add_edge(1, 2, 1)
        assert bellman_ford(G, 0, 2) == [0, 1, 2]

    def test_bellman_ford_negative_weights(self):
        """Test Bellman-Ford with negative weights (no cycle)."""
        G = Graph()
        G.add_edge("A", "B", 4)
        G.add_edge("A", "C", 1)
        G.add_edge("C", "B", -2)
        path = bellman_ford(G, "A", "B")
        assert path == ["A", "C", "B"]
        assert path_weight(G, path) == -1

    def test_bellman_ford_negative_cycle(self):
        """Test Bellman-Ford detects negative cycle."""
        G = Graph()
        G.add_edge(0, 1, 1)
        G.add_edge(1, 2, -2)
        G.add_edge(2, 0, -2)
        with pytest.raises(NegativeCycleError) as excinfo:
            bellman_ford(G, 0, 2)
        assert excinfo.value.edge is not None

    def test_bellman_ford_unreachable_negative_cycle(self):
        """Test Bellman-Ford ignores a negative cycle not reachable from source."""
        G = Graph()
        G.add_edge("A", "B", 1)
        G.add_edge("C", "D", 1)
        G.add_edge("D", "C", -3)
        assert bellman_ford(G, "A", "B") == ["A", "B"]
        assert bellman_ford(G, "A", "C") == []

    def test_bellman_ford_undirected_negative_edge_is_cycle(self):
        """Test that a negative undirected edge relaxes both ways forever."""
        G = Graph(directed=False)
        G.add_edge(0, 1, -1)
        with pytest.raises(NegativeCycleError):
            bellman_ford(G, 0, 1)

    def test_bellman_ford_matches_dijkstra(self, random_graph):
        """Test Bellman-Ford and Dijkstra agree on non-negative weights."""
        G = random_graph(n=10, p=0.25, directed=True)
        for end in G.vertices():
            bf = bellman_ford(G, 0, end)
            dj = dijkstra(G, 0, end)
            assert bool(bf) == bool(dj)
            if bf:
                assert path_weight(G, bf) == path_weight(G, dj)

    def test_bellman_ford_single_vertex(self):
        """Test Bellman-Ford on single vertex graph."""
        G = Graph()
        G.add_vertex("A")
        assert bellman_ford(G, "A", "A") == ["A"]
