"""Result types for graph classification."""

from dataclasses import dataclass
from enum import Enum

from ..graph.features import GraphFeatures


class GraphType(str, Enum):
    """Classes a graph can be assigned to."""

    TREE = "Tree"
    CYCLIC = "Cyclic"
    DAG = "DAG"

    @property
    def label(self) -> int:
        """Integer encoding used by the trained model."""
        return list(GraphType).index(self)

    @classmethod
    def from_label(cls, label: int) -> "GraphType":
        return list(cls)[label]


def spread_probabilities(
    winner: GraphType, confidence: float
) -> dict[GraphType, float]:
    """Give ``confidence`` to the winner and split the rest evenly."""
    remainder = (1 - confidence) / 2
    return {
        graph_type: confidence if graph_type == winner else remainder
        for graph_type in GraphType
    }


@dataclass(frozen=True)
class RuleDecision:
    """Outcome of the rule-based classifier."""

    graph_type: GraphType
    confidence: float
    reasoning: str


@dataclass(frozen=True)
class ClassificationResult:
    """The classification record returned to callers."""

    graph_type: GraphType
    confidence: float
    probabilities: dict[GraphType, float]
    features: GraphFeatures
    reasoning: str
    source: str = "rules"

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "type": self.graph_type.value,
            "confidence": self.confidence,
            "probabilities": {
                graph_type.value: probability
                for graph_type, probability in self.probabilities.items()
            },
            "features": self.features.to_dict(),
            "reasoning": self.reasoning,
            "source": self.source,
        }


@dataclass
class ModelInfo:
    """Introspection data for the trained model."""

    is_trained: bool
    accuracy: float | None = None
    n_estimators: int | None = None
    training_examples: int = 0

    def to_dict(self) -> dict:
        data: dict = {"isTrained": self.is_trained}
        if self.accuracy is not None:
            data["accuracy"] = self.accuracy
        if self.n_estimators is not None:
            data["nEstimators"] = self.n_estimators
        if self.training_examples:
            data["trainingExamples"] = self.training_examples
        return data
