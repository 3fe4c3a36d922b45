"""Tests for graph payload models."""

from arbor.schema.models import Edge, GraphData, Node


class TestNode:
    def test_presentation_defaults(self):
        node = Node(id="1")

        assert node.x == 0.0
        assert node.y == 0.0
        assert node.label == ""


class TestEdge:
    def test_wire_aliases(self):
        edge = Edge.model_validate({"id": "e1", "from": "a", "to": "b"})

        assert edge.source == "a"
        assert edge.target == "b"

    def test_populate_by_name(self):
        edge = Edge(id="e1", source="a", target="b")

        assert edge.source == "a"
        assert not edge.is_loop

    def test_is_loop(self):
        edge = Edge.model_validate({"id": "e1", "from": "a", "to": "a"})

        assert edge.is_loop


class TestGraphData:
    def test_next_node_id_alias(self):
        graph = GraphData.model_validate(
            {"nodes": [], "edges": [], "nextNodeId": 7}
        )

        assert graph.next_node_id == 7

    def test_node_ids(self):
        graph = GraphData(nodes=[Node(id="a"), Node(id="b")], edges=[])

        assert graph.node_ids == {"a", "b"}
