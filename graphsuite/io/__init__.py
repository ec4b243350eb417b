"""I/O modules for DOT export and JSON import/export of graphs."""

from .dot import graph_to_dot
from .json_graph import dump_json_graph, graph_to_json, json_to_graph, load_json_graph
from .schema import JSON_GRAPH_VERSION, json_graph_schema, validate_json_graph

__all__ = [
    "graph_to_dot",
    "graph_to_json",
    "json_to_graph",
    "dump_json_graph",
    "load_json_graph",
    "JSON_GRAPH_VERSION",
    "json_graph_schema",
    "validate_json_graph",
]
