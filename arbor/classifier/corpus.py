"""Synthetic training corpus for the trained classifier.

The corpus is a fixed set of small hand-authored graphs, so every training
run sees exactly the same examples.
"""

from dataclasses import dataclass

from ..graph.features import GraphFeatures, extract_features
from ..schema.models import GraphData
from .types import GraphType


@dataclass(frozen=True)
class TrainingExample:
    """A feature vector paired with its ground-truth class."""

    features: GraphFeatures
    label: GraphType


def _graph(node_count: int, edges: list[tuple[int, int]]) -> GraphData:
    """Build a graph with nodes "1".."n" and the given directed edges."""
    return GraphData.model_validate({
        "nodes": [
            {"id": str(i), "label": str(i)} for i in range(1, node_count + 1)
        ],
        "edges": [
            {"id": f"e{i}", "from": str(source), "to": str(target)}
            for i, (source, target) in enumerate(edges, start=1)
        ],
        "nextNodeId": node_count + 1,
    })


def tree_examples() -> list[GraphData]:
    """Binary tree, path and star."""
    return [
        _graph(5, [(1, 2), (1, 3), (2, 4), (2, 5)]),
        _graph(4, [(1, 2), (2, 3), (3, 4)]),
        _graph(5, [(1, 2), (1, 3), (1, 4), (1, 5)]),
    ]


def cyclic_examples() -> list[GraphData]:
    """Simple cycle, cycle with a branch and two cycles joined by an edge."""
    return [
        _graph(4, [(1, 2), (2, 3), (3, 4), (4, 1)]),
        _graph(5, [(1, 2), (2, 3), (3, 4), (4, 1), (2, 5)]),
        _graph(8, [
            (1, 2), (2, 3), (3, 4), (4, 1),
            (5, 6), (6, 7), (7, 8), (8, 5),
            (2, 5),
        ]),
    ]


def dag_examples() -> list[GraphData]:
    """Fan-in diamond, diamond with a tail and a layered DAG."""
    return [
        _graph(4, [(1, 2), (1, 3), (2, 4), (3, 4)]),
        _graph(5, [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)]),
        _graph(6, [(1, 4), (2, 4), (2, 5), (3, 5), (4, 6), (5, 6)]),
    ]


def generate_training_examples() -> list[TrainingExample]:
    """Extract features from every corpus graph, Tree then Cyclic then DAG."""
    corpus = [
        (GraphType.TREE, tree_examples()),
        (GraphType.CYCLIC, cyclic_examples()),
        (GraphType.DAG, dag_examples()),
    ]
    return [
        TrainingExample(features=extract_features(graph), label=label)
        for label, graphs in corpus
        for graph in graphs
    ]
