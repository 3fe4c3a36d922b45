"""Structural feature extraction for graph classification."""

import logging
from collections import deque
from dataclasses import astuple, dataclass, fields
from itertools import combinations

from ..schema.models import GraphData
from .structure import GraphStructure, build_structure

logger = logging.getLogger(__name__)

# Upper bound on DFS frames explored by the longest-path search.
DEFAULT_MAX_PATH_EXPANSIONS = 200_000

# Wire names, in vector order.
FEATURE_NAMES = (
    "nodeCount",
    "edgeCount",
    "density",
    "avgDegree",
    "maxDegree",
    "minDegree",
    "degreeVariance",
    "hasLoops",
    "cycleCount",
    "longestPath",
    "components",
    "avgClusteringCoeff",
    "diameter",
    "radius",
    "isConnected",
)


@dataclass(frozen=True)
class GraphFeatures:
    """The 15 structural metrics of a graph.

    Field order is the encoding order used by the trained model.
    """

    node_count: int
    edge_count: int
    density: float
    avg_degree: float
    max_degree: int
    min_degree: int
    degree_variance: float
    has_loops: int
    cycle_count: int
    longest_path: int
    components: int
    avg_clustering_coeff: float
    diameter: int
    radius: int
    is_connected: int

    @classmethod
    def zeros(cls) -> "GraphFeatures":
        """Build the all-zero feature vector of the empty graph."""
        return cls(*(0 for _ in fields(cls)))

    def to_vector(self) -> list[float]:
        """Flatten into a fixed-order numeric vector."""
        return [float(value) for value in astuple(self)]

    def to_dict(self) -> dict[str, float]:
        """Map wire names to values."""
        return dict(zip(FEATURE_NAMES, astuple(self)))


def extract_features(
    graph: GraphData,
    max_path_expansions: int = DEFAULT_MAX_PATH_EXPANSIONS,
) -> GraphFeatures:
    """Compute the structural features of a graph.

    Args:
        graph: The validated graph payload.
        max_path_expansions: Cap on the longest-path search, see
            ``find_longest_path``.

    Returns:
        A fresh GraphFeatures record.
    """
    if not graph.nodes:
        return GraphFeatures.zeros()

    structure = build_structure(graph)
    node_count = structure.node_count
    edge_count = structure.edge_count

    degrees = structure.out_degrees()
    avg_degree = sum(degrees) / len(degrees)
    degree_variance = sum((d - avg_degree) ** 2 for d in degrees) / len(degrees)

    density = 0.0
    if node_count > 1:
        density = (2 * edge_count) / (node_count * (node_count - 1))

    has_loops = int(
        any(edge.is_loop and structure.has_node(edge.source) for edge in graph.edges)
    )

    components = count_components(structure)
    diameter, radius = calculate_distance_metrics(structure)

    features = GraphFeatures(
        node_count=node_count,
        edge_count=edge_count,
        density=density,
        avg_degree=avg_degree,
        max_degree=max(degrees),
        min_degree=min(degrees),
        degree_variance=degree_variance,
        has_loops=has_loops,
        cycle_count=count_cycles(structure),
        longest_path=find_longest_path(structure, max_path_expansions),
        components=components,
        avg_clustering_coeff=calculate_clustering_coefficient(structure),
        diameter=diameter,
        radius=radius,
        is_connected=1 if components == 1 else 0,
    )
    logger.debug("Extracted features: %s", features)
    return features


def count_cycles(structure: GraphStructure) -> int:
    """Count back edges found by a directed depth-first search.

    Follows edge direction. Every edge into a node that is still on the
    DFS stack closes a cycle; self-loops count once. The search restarts
    from each unvisited node so disconnected parts are covered.

    Args:
        structure: The graph structure.

    Returns:
        Number of back edges; 0 iff the directed graph is acyclic.
    """
    on_stack: set[str] = set()
    done: set[str] = set()
    cycle_count = 0

    for root in structure.nodes():
        if root in done:
            continue

        on_stack.add(root)
        stack = [(root, iter(structure.successors(root)))]

        while stack:
            node, children = stack[-1]
            for child in children:
                if child in on_stack:
                    cycle_count += 1
                elif child not in done:
                    on_stack.add(child)
                    stack.append((child, iter(structure.successors(child))))
                    break
            else:
                stack.pop()
                on_stack.discard(node)
                done.add(node)

    return cycle_count


def find_longest_path(
    structure: GraphStructure,
    max_expansions: int = DEFAULT_MAX_PATH_EXPANSIONS,
) -> int:
    """Find the length (in edges) of the longest simple undirected path.

    Exhaustive search from every node with an explicit stack. Each frame
    carries a bitmask of visited node indices so sibling branches never
    share state. The number of frames grows as O(N!) in the worst case,
    so the search stops after ``max_expansions`` frames and returns the
    best length seen so far.

    Args:
        structure: The graph structure.
        max_expansions: Maximum number of DFS frames to expand.

    Returns:
        The longest path length found.
    """
    nodes = structure.nodes()
    index = {node_id: i for i, node_id in enumerate(nodes)}
    adjacency = [
        [index[n] for n in structure.neighbors(node_id) if n != node_id]
        for node_id in nodes
    ]
    upper_bound = len(nodes) - 1

    longest = 0
    expansions = 0

    for start in range(len(nodes)):
        stack = [(start, 1 << start, 0)]
        while stack:
            node, visited, depth = stack.pop()
            expansions += 1
            longest = max(longest, depth)

            if longest == upper_bound:
                return longest

            if expansions >= max_expansions:
                logger.warning(
                    "Longest path search stopped after %d expansions; "
                    "returning %d as a lower bound",
                    expansions,
                    longest,
                )
                return longest

            for neighbor in adjacency[node]:
                if not (visited >> neighbor) & 1:
                    stack.append((neighbor, visited | (1 << neighbor), depth + 1))

    return longest


def count_components(structure: GraphStructure) -> int:
    """Count connected components using breadth-first sweeps."""
    visited: set[str] = set()
    components = 0

    for start in structure.nodes():
        if start in visited:
            continue

        components += 1
        visited.add(start)
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbor in structure.neighbors(node):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

    return components


def calculate_clustering_coefficient(structure: GraphStructure) -> float:
    """Average the local clustering coefficient over nodes with 2+ neighbors.

    Nodes with fewer than two neighbors are left out of the average.
    """
    adjacency = structure.adjacency()
    total = 0.0
    qualifying = 0

    for neighbors in adjacency.values():
        if len(neighbors) < 2:
            continue

        linked_pairs = sum(
            1 for a, b in combinations(neighbors, 2)
            if b in adjacency[a]
        )
        possible_pairs = len(neighbors) * (len(neighbors) - 1) / 2
        total += linked_pairs / possible_pairs
        qualifying += 1

    return total / qualifying if qualifying else 0.0


def eccentricity(adjacency: dict[str, set[str]], start: str) -> int:
    """Get the largest BFS distance from ``start`` to a reachable node."""
    distances = {start: 0}
    queue = deque([start])
    farthest = 0

    while queue:
        node = queue.popleft()
        for neighbor in adjacency[node]:
            if neighbor not in distances:
                distances[neighbor] = distances[node] + 1
                farthest = max(farthest, distances[neighbor])
                queue.append(neighbor)

    return farthest


def calculate_distance_metrics(structure: GraphStructure) -> tuple[int, int]:
    """Compute diameter and radius from per-node eccentricities.

    Unreachable nodes are not visited, so on a disconnected graph each
    eccentricity only covers the source node's own component.

    Returns:
        A ``(diameter, radius)`` tuple.
    """
    adjacency = structure.adjacency()
    eccentricities = [eccentricity(adjacency, node) for node in adjacency]
    if not eccentricities:
        return 0, 0
    return max(eccentricities), min(eccentricities)
