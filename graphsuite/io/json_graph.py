"""JSON import and export for graphs.

Converts Graph objects to/from the interchange format described in
schema.py. Only the read accessors vertices() and edges() are used on
export, and only add_vertex/add_edge on import.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..graphs.core import Graph
from ..logging import get_logger
from .schema import JSON_GRAPH_VERSION, validate_json_graph

logger = get_logger(__name__)


def graph_to_json(graph: Graph, metadata: Optional[dict] = None) -> dict:
    """
    Convert a Graph to the JSON graph format.

    Parameters
    ----------
    graph : Graph
        Graph to convert. Vertices must be JSON scalars.
    metadata : dict, optional
        Optional metadata dictionary. Must be JSON-serializable.

    Returns
    -------
    dict
        JSON object following the schema defined in schema.py.
    """
    result: Dict[str, Any] = {
        "version": JSON_GRAPH_VERSION,
        "directed": graph.directed,
        "vertices": graph.vertices(),
        "edges": [
            {"source": u, "target": v, "weight": weight} for u, v, weight in graph.edges()
        ],
    }

    if metadata:
        result["metadata"] = metadata

    return result


def json_to_graph(obj: dict) -> Graph:
    """
    Convert a JSON graph object to a Graph.

    Parameters
    ----------
    obj : dict
        JSON object following the schema defined in schema.py.

    Returns
    -------
    Graph
        Reconstructed graph with the same vertices, edges and directedness.

    Raises
    ------
    ValueError
        If the JSON object is invalid.
    """
    validate_json_graph(obj)

    graph = Graph(directed=obj["directed"])
    for vertex in obj["vertices"]:
        graph.add_vertex(vertex)
    for edge in obj["edges"]:
        graph.add_edge(edge["source"], edge["target"], edge.get("weight", 1))

    logger.debug("loaded %r from JSON", graph)
    return graph


def dump_json_graph(graph: Graph, path: str, metadata: Optional[dict] = None) -> None:
    """
    Write a Graph to a JSON file.

    Parameters
    ----------
    graph : Graph
        Graph to write.
    path : str
        Path to output JSON file.
    metadata : dict, optional
        Optional metadata stored alongside the graph.
    """
    obj = graph_to_json(graph, metadata)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, ensure_ascii=False)


def load_json_graph(path: str) -> Graph:
    """
    Load a Graph from a JSON file.

    Parameters
    ----------
    path : str
        Path to input JSON file.

    Returns
    -------
    Graph
        Loaded graph.

    Raises
    ------
    ValueError
        If the file is not valid JSON or does not match the schema.
    FileNotFoundError
        If the file does not exist.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"JSON graph file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in file {path}: {e}")

    return json_to_graph(obj)


__all__ = [
    "graph_to_json",
    "json_to_graph",
    "dump_json_graph",
    "load_json_graph",
]
