"""JSON schema definition and validation for graphs.

Schema Structure:
    {
        "version": "graphsuite-json-1.0",
        "directed": <bool>,
        "vertices": [<scalar>, ...],
        "edges": [
            {
                "source": <scalar>,
                "target": <scalar>,
                "weight": <number>,     # optional, default 1
            },
            ...
        ],
        "metadata": {...}               # optional
    }

Vertices must be JSON scalars (string, integer, float or boolean). An
undirected edge is listed once.
"""

from __future__ import annotations

JSON_GRAPH_VERSION = "graphsuite-json-1.0"

_SCALAR_TYPES = (str, int, float, bool)


def json_graph_schema() -> dict:
    """
    Return the structural schema (as a Python dict) for the JSON graph format.

    Returns
    -------
    dict
        Schema description with field definitions and constraints.
    """
    return {
        "version": {
            "type": "string",
            "description": f"Schema version identifier, e.g., '{JSON_GRAPH_VERSION}'",
            "required": True,
        },
        "directed": {
            "type": "bool",
            "description": "Whether edges are directed",
            "required": True,
        },
        "vertices": {
            "type": "list",
            "description": "Every vertex, in insertion order",
            "required": True,
            "items": {"type": "scalar"},
        },
        "edges": {
            "type": "list",
            "description": "Edge list; undirected edges appear once",
            "required": True,
            "items": {
                "source": {"type": "scalar", "required": True},
                "target": {"type": "scalar", "required": True},
                "weight": {"type": "number", "required": False, "default": 1},
            },
        },
        "metadata": {
            "type": "dict",
            "description": "Optional metadata (producer, notes, etc.)",
            "required": False,
        },
    }


def validate_json_graph(obj: dict) -> None:
    """
    Validate a JSON graph object against the schema.

    Checks required fields, types, and that every edge endpoint is listed
    in ``vertices``.

    Parameters
    ----------
    obj : dict
        JSON object to validate.

    Raises
    ------
    ValueError
        If the object does not conform to the schema.
    """
    if not isinstance(obj, dict):
        raise ValueError("JSON graph must be a dictionary object.")

    for field in ("version", "directed", "vertices", "edges"):
        if field not in obj:
            raise ValueError(f"JSON graph missing required field '{field}'.")

    if not isinstance(obj["version"], str):
        raise ValueError("Field 'version' must be a string.")
    if obj["version"] != JSON_GRAPH_VERSION:
        raise ValueError(
            f"Unsupported JSON graph version {obj['version']!r}; "
            f"expected {JSON_GRAPH_VERSION!r}."
        )
    if not isinstance(obj["directed"], bool):
        raise ValueError("Field 'directed' must be a boolean.")
    if not isinstance(obj["vertices"], list):
        raise ValueError("Field 'vertices' must be a list.")
    if not isinstance(obj["edges"], list):
        raise ValueError("Field 'edges' must be a list.")

    for i, vertex in enumerate(obj["vertices"]):
        if not isinstance(vertex, _SCALAR_TYPES):
            raise ValueError(
                f"vertices[{i}] must be a string, number or boolean, "
                f"got {type(vertex).__name__}."
            )
    vertices = set(obj["vertices"])

    for i, edge in enumerate(obj["edges"]):
        if not isinstance(edge, dict):
            raise ValueError(f"Edge at index {i} must be a dictionary object.")
        for field in ("source", "target"):
            if field not in edge:
                raise ValueError(f"Edge at index {i} missing required field '{field}'.")
            if edge[field] not in vertices:
                raise ValueError(
                    f"Edge at index {i}: {field} {edge[field]!r} is not a listed vertex."
                )
        if "weight" in edge and (
            isinstance(edge["weight"], bool) or not isinstance(edge["weight"], (int, float))
        ):
            raise ValueError(f"Edge at index {i}: field 'weight' must be a number.")

    if "metadata" in obj and not isinstance(obj["metadata"], dict):
        raise ValueError("Field 'metadata' must be a dictionary object.")
