"""Graph input exceptions."""


class GraphError(Exception):
    """Base exception for graph input errors."""

    pass


class GraphLoadError(GraphError):
    """Raised when a graph file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class InvalidGraphError(GraphError):
    """Raised when a graph payload is malformed."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
