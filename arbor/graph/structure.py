"""Adjacency structure built from a GraphData payload."""

from collections import Counter

import networkx as nx

from ..schema.models import GraphData


class GraphStructure:
    """Adjacency and degree bookkeeping for a graph.

    Wraps two networkx graphs: an undirected ``Graph`` used for every
    structural metric, and a ``DiGraph`` holding the edge directions for
    cycle detection. Parallel edges collapse into a single adjacency entry,
    while the degree counters count every edge record.
    """

    def __init__(self):
        """Initialize an empty structure."""
        self._undirected = nx.Graph()
        self._directed = nx.DiGraph()
        self.in_degree: Counter[str] = Counter()
        self.out_degree: Counter[str] = Counter()
        self.edge_count = 0

    @property
    def graph(self) -> nx.Graph:
        """Get the underlying undirected networkx graph."""
        return self._undirected

    @property
    def digraph(self) -> nx.DiGraph:
        """Get the underlying directed networkx graph."""
        return self._directed

    @property
    def node_count(self) -> int:
        return self._undirected.number_of_nodes()

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def add_node(self, node_id: str) -> None:
        """Add a node with zeroed degree counters."""
        self._undirected.add_node(node_id)
        self._directed.add_node(node_id)
        self.in_degree.setdefault(node_id, 0)
        self.out_degree.setdefault(node_id, 0)

    def add_edge(self, source: str, target: str) -> bool:
        """Add an edge between two known nodes.

        Args:
            source: The ``from`` node id.
            target: The ``to`` node id.

        Returns:
            True if the edge was absorbed, False if an endpoint is unknown.
        """
        if not (self.has_node(source) and self.has_node(target)):
            return False

        self._undirected.add_edge(source, target)
        self._directed.add_edge(source, target)
        self.out_degree[source] += 1
        self.in_degree[target] += 1
        self.edge_count += 1
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_node(self, node_id: str) -> bool:
        return self._undirected.has_node(node_id)

    def nodes(self) -> list[str]:
        """Get node ids in insertion order."""
        return list(self._undirected.nodes)

    def neighbors(self, node_id: str) -> set[str]:
        """Get the undirected neighbor set of a node.

        A node with a self-loop is its own neighbor.
        """
        if not self.has_node(node_id):
            return set()
        return set(self._undirected.adj[node_id])

    def adjacency(self) -> dict[str, set[str]]:
        """Get every node's undirected neighbor set, built once."""
        return {node_id: self.neighbors(node_id) for node_id in self.nodes()}

    def successors(self, node_id: str) -> list[str]:
        """Get the direct successors of a node following edge direction."""
        if not self._directed.has_node(node_id):
            return []
        return list(self._directed.successors(node_id))

    def out_degrees(self) -> list[int]:
        """Get the out-degree of every node, in node order."""
        return [self.out_degree[node_id] for node_id in self.nodes()]


def build_structure(graph: GraphData) -> GraphStructure:
    """Build a GraphStructure from a GraphData payload.

    Every node gets an entry, isolated nodes included. Edges whose
    endpoints are not in the node list are skipped.

    Args:
        graph: The validated graph payload.

    Returns:
        The adjacency structure.
    """
    structure = GraphStructure()

    for node in graph.nodes:
        structure.add_node(node.id)

    for edge in graph.edges:
        structure.add_edge(edge.source, edge.target)

    return structure
