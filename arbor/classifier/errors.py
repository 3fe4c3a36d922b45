"""Classification exceptions."""

from ..schema.errors import GraphError


class GraphTooLargeError(GraphError):
    """Raised when a graph exceeds the configured node limit."""

    def __init__(self, node_count: int, limit: int):
        self.node_count = node_count
        self.limit = limit
        super().__init__(
            f"Graph has {node_count} nodes, above the limit of {limit}"
        )
