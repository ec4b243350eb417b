"""Tests for debug mode functionality."""

import pytest

from graphsuite.diagnostics import (
    check_graph,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from graphsuite.diagnostics.debug_mode import _env_flag
from graphsuite.errors import GraphInvariantError
from graphsuite.graphs import Graph


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        # Back to previous (False in this block)
        assert not is_debug_enabled()

        set_debug_enabled(True)
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        # Back to True
        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)

        with debug_context(True):
            assert is_debug_enabled()

            with debug_context(False):
                assert not is_debug_enabled()

            assert is_debug_enabled()

        assert not is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_restores_on_error() -> None:
    """Test that the previous mode is restored when the block raises."""
    original = is_debug_enabled()

    with pytest.raises(RuntimeError):
        with debug_context(not original):
            raise RuntimeError("boom")

    assert is_debug_enabled() == original


def test_mutation_checks_consistency_in_debug_mode() -> None:
    """Test that a mutation on a corrupted graph raises in debug mode."""
    G = Graph(directed=False)
    G.add_edge(0, 1)
    G._adj[1] = []

    with debug_context(True):
        with pytest.raises(GraphInvariantError):
            G.add_vertex(2)


def test_mutation_skips_check_outside_debug_mode() -> None:
    """Test that the consistency check only runs in debug mode."""
    G = Graph(directed=False)
    G.add_edge(0, 1)
    G._adj[1] = []

    with debug_context(False):
        G.add_vertex(2)
    assert G.has_vertex(2)


def test_check_graph_follows_debug_mode() -> None:
    """Test that check_graph only raises while debug mode is on."""
    G = Graph()
    G.add_edge(0, 1)
    G._adj[0].append((7, 1))

    with debug_context(False):
        check_graph(G)

    with debug_context(True):
        with pytest.raises(GraphInvariantError, match="not in the graph"):
            check_graph(G)


def test_env_flag_parsing(monkeypatch) -> None:
    """Test the values GRAPHSUITE_DEBUG accepts as enabled."""
    for value in ("1", "true", "YES", " on "):
        monkeypatch.setenv("GRAPHSUITE_DEBUG", value)
        assert _env_flag("GRAPHSUITE_DEBUG")
    for value in ("0", "false", "off", ""):
        monkeypatch.setenv("GRAPHSUITE_DEBUG", value)
        assert not _env_flag("GRAPHSUITE_DEBUG")
    monkeypatch.delenv("GRAPHSUITE_DEBUG")
    assert not _env_flag("GRAPHSUITE_DEBUG")
