"""Tests for the rule-based classifier."""

import pytest

from arbor.classifier.rules import classify_by_rules
from arbor.classifier.types import GraphType, spread_probabilities
from arbor.graph.features import GraphFeatures, extract_features


class TestClassifyByRules:
    def test_empty_graph(self):
        decision = classify_by_rules(GraphFeatures.zeros())

        assert decision.graph_type == GraphType.TREE
        assert decision.confidence == 0.95
        assert "no edges" in decision.reasoning

    def test_edgeless_graph(self, build):
        decision = classify_by_rules(extract_features(build([1, 2, 3], [])))

        assert decision.graph_type == GraphType.TREE
        assert decision.confidence == 0.95

    def test_cycle(self, cycle_graph):
        decision = classify_by_rules(extract_features(cycle_graph))

        assert decision.graph_type == GraphType.CYCLIC
        assert decision.confidence == 0.95
        assert decision.reasoning == "1 cycle(s) detected"

    def test_self_loop_mentioned(self, build):
        decision = classify_by_rules(extract_features(build([1, 2], [(1, 2), (1, 1)])))

        assert decision.graph_type == GraphType.CYCLIC
        assert "self-loops" in decision.reasoning

    def test_cycles_beat_tree_rule(self, build):
        # n-1 edges and connected, but 1 <-> 2 is a cycle.
        decision = classify_by_rules(extract_features(build([1, 2], [(1, 2), (2, 1)])))

        assert decision.graph_type == GraphType.CYCLIC

    def test_path_is_tree(self, path_graph):
        decision = classify_by_rules(extract_features(path_graph))

        assert decision.graph_type == GraphType.TREE
        assert decision.confidence == 0.90
        assert "n-1 edges" in decision.reasoning

    def test_diamond_is_dag(self, diamond_graph):
        decision = classify_by_rules(extract_features(diamond_graph))

        assert decision.graph_type == GraphType.DAG
        assert decision.confidence == 0.85

    def test_forest_is_ambiguous(self, forest_graph):
        decision = classify_by_rules(extract_features(forest_graph))

        assert decision.graph_type == GraphType.TREE
        assert decision.confidence == 0.5
        assert "learned model" in decision.reasoning

    def test_disconnected_with_n_minus_one_edges(self, build):
        # Triangle DAG plus an isolated node: 3 edges for 4 nodes.
        graph = build([1, 2, 3, 4], [(1, 2), (2, 3), (1, 3)])

        assert classify_by_rules(extract_features(graph)).confidence == 0.5


class TestSpreadProbabilities:
    @pytest.mark.parametrize("winner", list(GraphType))
    @pytest.mark.parametrize("confidence", [0.5, 0.8, 0.85, 0.9, 0.95])
    def test_sums_to_one(self, winner, confidence):
        probabilities = spread_probabilities(winner, confidence)

        assert sum(probabilities.values()) == pytest.approx(1.0, abs=1e-6)
        assert probabilities[winner] == confidence

    def test_remainder_split_evenly(self):
        probabilities = spread_probabilities(GraphType.DAG, 0.8)

        assert probabilities[GraphType.TREE] == pytest.approx(0.1)
        assert probabilities[GraphType.CYCLIC] == pytest.approx(0.1)
