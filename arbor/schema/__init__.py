"""Schema layer for parsing and validating graph payloads."""

from .errors import GraphError, GraphLoadError, InvalidGraphError
from .models import Edge, GraphData, Node
from .loader import load_data, load_graph_file, parse_graph, parse_graph_from_string

__all__ = [
    "GraphError",
    "GraphLoadError",
    "InvalidGraphError",
    "Edge",
    "GraphData",
    "Node",
    "load_data",
    "load_graph_file",
    "parse_graph",
    "parse_graph_from_string",
]
