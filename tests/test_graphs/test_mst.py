"""Tests for minimum spanning tree algorithms."""

import pytest

from graphsuite.graphs import Graph, UnionFind, is_graph_connected, kruskal_mst, prim_mst


def make_square():
    G = Graph(directed=False)
    G.add_edge(0, 1, 1)
    G.add_edge(1, 2, 2)
    G.add_edge(2, 3, 3)
    G.add_edge(0, 3, 4)
    return G


def total_weight(edges):
    return sum(w for _, _, w in edges)


def spanned_vertices(edges):
    return {v for u, w_v, _ in edges for v in (u, w_v)}


class TestUnionFind:
    """Tests for the disjoint-set structure."""

    def test_union_and_find(self):
        """Test that unions merge sets and report redundancy."""
        uf = UnionFind(range(5))
        assert uf.union(0, 1)
        assert uf.union(2, 3)
        assert not uf.union(1, 0)
        assert uf.connected(0, 1)
        assert not uf.connected(1, 2)
        assert uf.union(1, 3)
        assert uf.connected(0, 2)
        assert not uf.connected(0, 4)

    def test_union_by_rank_keeps_trees_shallow(self):
        """Test that the taller tree's root becomes the new root."""
        uf = UnionFind("abcd")
        uf.union("a", "b")
        root = uf.find("a")
        uf.union("c", root)
        assert uf.find("c") == root
        assert uf.rank[root] == 1


class TestKruskal:
    """Tests for Kruskal's algorithm."""

    def test_kruskal_square(self):
        """Test Kruskal drops the heaviest edge of a square."""
        mst = kruskal_mst(make_square())
        assert mst == [(0, 1, 1), (1, 2, 2), (2, 3, 3)]
        assert spanned_vertices(mst) == {0, 1, 2, 3}

    def test_kruskal_triangle(self):
        """Test Kruskal on a weighted triangle."""
        G = Graph(directed=False)
        G.add_edge("A", "B", 1)
        G.add_edge("B", "C", 2)
        G.add_edge("A", "C", 3)
        mst = kruskal_mst(G)
        assert len(mst) == 2
        assert total_weight(mst) == 3

    def test_kruskal_disconnected_forest(self):
        """Test Kruskal on disconnected graph (returns forest)."""
        G = Graph(directed=False)
        G.add_edge("A", "B", 1)
        G.add_edge("C", "D", 2)
        mst = kruskal_mst(G)
        assert len(mst) == 2
        assert total_weight(mst) == 3

    def test_kruskal_equal_weights_keep_edge_order(self):
        """Test that equal-weight edges are considered in edge order."""
        G = Graph(directed=False)
        G.add_edge(0, 1, 1)
        G.add_edge(1, 2, 1)
        G.add_edge(0, 2, 1)
        assert G.edges() == [(0, 1, 1), (0, 2, 1), (1, 2, 1)]
        assert kruskal_mst(G) == [(0, 1, 1), (0, 2, 1)]

    def test_kruskal_ignores_self_loops(self):
        """Test that self-loops never join the tree."""
        G = Graph(directed=False)
        G.add_edge(0, 0, -5)
        G.add_edge(0, 1, 2)
        assert kruskal_mst(G) == [(0, 1, 2)]

    def test_kruskal_empty(self):
        """Test Kruskal on an empty graph."""
        assert kruskal_mst(Graph()) == []


class TestPrim:
    """Tests for Prim's algorithm."""

    def test_prim_square(self):
        """Test Prim builds a spanning tree of the square."""
        mst = prim_mst(make_square())
        assert mst == [(0, 1, 1), (1, 2, 2), (2, 3, 3)]
        assert len(mst) == 3

    def test_prim_explicit_start(self):
        """Test that the start vertex roots the tree."""
        mst = prim_mst(make_square(), start=3)
        assert mst == [(3, 2, 3), (2, 1, 2), (1, 0, 1)]
        assert total_weight(mst) == 6

    def test_prim_defaults_to_first_vertex(self):
        """Test that the default start is the first inserted vertex."""
        G = Graph(directed=False)
        G.add_edge("z", "a", 5)
        G.add_edge("a", "m", 1)
        mst = prim_mst(G)
        assert mst[0][0] == "z"

    def test_prim_empty_graph(self):
        """Test Prim on an empty graph."""
        assert prim_mst(Graph()) == []

    def test_prim_invalid_start(self):
        """Test Prim with a start vertex that is not in the graph."""
        with pytest.raises(ValueError):
            prim_mst(make_square(), start=99)

    def test_prim_spans_start_component_only(self):
        """Test Prim on a disconnected graph."""
        G = Graph(directed=False)
        G.add_edge("A", "B", 1)
        G.add_edge("C", "D", 2)
        assert prim_mst(G) == [("A", "B", 1)]


class TestKruskalVsPrim:
    """Cross-checks between the two MST algorithms."""

    def test_same_total_weight(self, random_graph):
        """Test Kruskal and Prim agree on total weight and edge count."""
        for _ in range(5):
            G = random_graph(n=15, p=0.3, directed=False)
            assert is_graph_connected(G)

            kruskal = kruskal_mst(G)
            prim = prim_mst(G)

            assert len(kruskal) == G.vertex_count - 1
            assert len(prim) == G.vertex_count - 1
            assert total_weight(kruskal) == total_weight(prim)
            assert spanned_vertices(kruskal) == set(G.vertices())
            assert spanned_vertices(prim) == set(G.vertices())
