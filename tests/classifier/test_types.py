"""Tests for classification result types."""

from arbor.classifier.types import ClassificationResult, GraphType, ModelInfo
from arbor.graph.features import GraphFeatures


class TestGraphType:
    def test_label_encoding(self):
        assert GraphType.TREE.label == 0
        assert GraphType.CYCLIC.label == 1
        assert GraphType.DAG.label == 2

    def test_from_label(self):
        assert GraphType.from_label(1) == GraphType.CYCLIC

    def test_string_values(self):
        assert GraphType("DAG") is GraphType.DAG
        assert GraphType.TREE == "Tree"


class TestClassificationResult:
    def test_to_dict(self):
        result = ClassificationResult(
            graph_type=GraphType.TREE,
            confidence=0.95,
            probabilities={
                GraphType.TREE: 0.95,
                GraphType.CYCLIC: 0.025,
                GraphType.DAG: 0.025,
            },
            features=GraphFeatures.zeros(),
            reasoning="Single node or no edges detected",
        )

        data = result.to_dict()

        assert data["type"] == "Tree"
        assert data["probabilities"] == {"Tree": 0.95, "Cyclic": 0.025, "DAG": 0.025}
        assert data["features"]["nodeCount"] == 0
        assert data["source"] == "rules"


class TestModelInfo:
    def test_untrained_omits_accuracy(self):
        assert ModelInfo(is_trained=False).to_dict() == {"isTrained": False}

    def test_trained(self):
        info = ModelInfo(
            is_trained=True, accuracy=0.95, n_estimators=100, training_examples=9
        )

        assert info.to_dict() == {
            "isTrained": True,
            "accuracy": 0.95,
            "nEstimators": 100,
            "trainingExamples": 9,
        }
