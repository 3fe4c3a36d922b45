"""Pydantic models for graph payloads."""

from pydantic import BaseModel, ConfigDict, Field


class Node(BaseModel):
    """A node on the canvas. Position and label are presentation only."""

    id: str
    x: float = 0.0
    y: float = 0.0
    label: str = ""


class Edge(BaseModel):
    """A directed edge between two nodes."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    source: str = Field(alias="from")
    target: str = Field(alias="to")

    @property
    def is_loop(self) -> bool:
        """Check if the edge starts and ends on the same node."""
        return self.source == self.target


class GraphData(BaseModel):
    """A graph as produced by the editor or a graph file."""

    model_config = ConfigDict(populate_by_name=True)

    nodes: list[Node]
    edges: list[Edge]
    next_node_id: int = Field(default=0, alias="nextNodeId")

    @property
    def node_ids(self) -> set[str]:
        """Get the set of node identifiers."""
        return {node.id for node in self.nodes}
