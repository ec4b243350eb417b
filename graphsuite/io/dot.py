"""Graphviz DOT export for graphs."""

from __future__ import annotations

from typing import Hashable, List, Set

from ..graphs.core import Graph


def _dot_id(vertex: Hashable) -> str:
    if isinstance(vertex, (int, float)) and not isinstance(vertex, bool):
        return str(vertex)
    if isinstance(vertex, str) and vertex.isidentifier():
        return vertex
    text = str(vertex).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def graph_to_dot(graph: Graph, name: str = "G") -> str:
    """
    Render a graph in Graphviz DOT syntax.

    Directed graphs become ``digraph`` with ``->`` edges, undirected graphs
    become ``graph`` with ``--`` edges. Every edge carries its weight as a
    ``weight`` attribute; vertices without any edge are listed on their own.

    Parameters
    ----------
    graph : Graph
        Graph to render.
    name : str
        Graph name written after the keyword.

    Returns
    -------
    str
        DOT source, newline terminated.

    Example
    -------
    >>> G = Graph()
    >>> G.add_edge(0, 1, 2)
    >>> print(graph_to_dot(G))
    digraph G {
        0 -> 1 [weight=2];
    }
    """
    keyword, arrow = ("digraph", "->") if graph.directed else ("graph", "--")

    lines: List[str] = [f"{keyword} {_dot_id(name)} {{"]
    touched: Set[Hashable] = set()

    for u, v, weight in graph.edges():
        touched.update((u, v))
        lines.append(f"    {_dot_id(u)} {arrow} {_dot_id(v)} [weight={weight}];")

    for vertex in graph.vertices():
        if vertex not in touched:
            lines.append(f"    {_dot_id(vertex)};")

    lines.append("}")
    return "\n".join(lines) + "\n"


__all__ = ["graph_to_dot"]
