"""YAML/JSON loading and parsing for graph files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import GraphLoadError, InvalidGraphError
from .models import GraphData

REQUIRED_COLLECTIONS = ("nodes", "edges")


def _safe_load(stream: Any, path: str | None = None) -> dict:
    """Decode YAML or JSON text into a root mapping.

    JSON is read through the YAML parser, which accepts it as a subset.
    An empty document decodes to an empty mapping.

    Raises:
        GraphLoadError: If the text is not YAML/JSON or the root is not a
            mapping.
    """
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise GraphLoadError(f"Invalid YAML/JSON: {e}", path) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise GraphLoadError(
            f"Expected a mapping at root, got {type(data).__name__}", path
        )

    return data


def load_data(path: str | Path) -> dict:
    """Load a graph file and return the raw mapping.

    Raises:
        GraphLoadError: If the file is missing, unreadable or not a
            YAML/JSON mapping.
    """
    path = Path(path)

    if not path.is_file():
        reason = "Not a file" if path.exists() else "File not found"
        raise GraphLoadError(f"{reason}: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            return _safe_load(f, str(path))
    except OSError as e:
        raise GraphLoadError(f"Cannot read file: {e}", str(path)) from e


def load_graph_file(path: str | Path) -> GraphData:
    """Load and parse a graph file.

    Raises:
        GraphLoadError: If the file cannot be read or parsed.
        InvalidGraphError: If the data is not a valid graph.
    """
    return parse_graph(load_data(path))


def parse_graph_from_string(text: str) -> GraphData:
    """Parse a YAML or JSON string into GraphData.

    Raises:
        GraphLoadError: If the text cannot be parsed.
        InvalidGraphError: If the data is not a valid graph.
    """
    return parse_graph(_safe_load(text))


def _check_collections(data: dict) -> None:
    """Reject payloads without a nodes or edges collection.

    A collection given as null counts as missing.
    """
    missing = [key for key in REQUIRED_COLLECTIONS if data.get(key) is None]
    if missing:
        raise InvalidGraphError(
            f"Graph payload is missing {', '.join(missing)}",
            [
                {"loc": key, "msg": "Field required", "type": "missing"}
                for key in missing
            ],
        )


def parse_graph(data: Any) -> GraphData:
    """Validate a raw mapping into GraphData.

    Args:
        data: The raw payload, usually a decoded request body or file.

    Returns:
        The validated GraphData; a GraphData is returned unchanged.

    Raises:
        InvalidGraphError: If the nodes or edges collection is missing or
            any field fails validation.
    """
    if isinstance(data, GraphData):
        return data

    if not isinstance(data, dict):
        raise InvalidGraphError(
            f"Expected a graph mapping, got {type(data).__name__}"
        )

    _check_collections(data)

    try:
        return GraphData.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise InvalidGraphError(
            f"Graph validation failed with {len(errors)} error(s)", errors
        ) from e
