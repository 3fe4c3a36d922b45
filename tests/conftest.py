"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from arbor.schema.loader import parse_graph
from arbor.schema.models import GraphData


def make_graph(node_ids, edges) -> GraphData:
    """Build a GraphData from node ids and (from, to) pairs."""
    return parse_graph({
        "nodes": [{"id": str(node_id)} for node_id in node_ids],
        "edges": [
            {"id": f"e{i}", "from": str(source), "to": str(target)}
            for i, (source, target) in enumerate(edges, start=1)
        ],
    })


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def empty_graph() -> GraphData:
    return make_graph([], [])


@pytest.fixture
def single_node_graph() -> GraphData:
    return make_graph([1], [])


@pytest.fixture
def path_graph() -> GraphData:
    """1 -> 2 -> 3 -> 4."""
    return make_graph([1, 2, 3, 4], [(1, 2), (2, 3), (3, 4)])


@pytest.fixture
def cycle_graph() -> GraphData:
    """1 -> 2 -> 3 -> 4 -> 1."""
    return make_graph([1, 2, 3, 4], [(1, 2), (2, 3), (3, 4), (4, 1)])


@pytest.fixture
def diamond_graph() -> GraphData:
    """1 -> {2, 3} -> 4."""
    return make_graph([1, 2, 3, 4], [(1, 2), (1, 3), (2, 4), (3, 4)])


@pytest.fixture
def star_graph() -> GraphData:
    """Hub 1 with four leaves."""
    return make_graph([1, 2, 3, 4, 5], [(1, 2), (1, 3), (1, 4), (1, 5)])


@pytest.fixture
def forest_graph() -> GraphData:
    """Two disconnected edges, which the rules leave undecided."""
    return make_graph([1, 2, 3, 4], [(1, 2), (3, 4)])


@pytest.fixture
def build():
    """Return a factory building graphs from node ids and edge pairs."""
    return make_graph
