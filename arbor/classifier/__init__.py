"""Graph classification: rules, synthetic corpus, trained model and engine."""

from .config import EngineConfig
from .corpus import TrainingExample, generate_training_examples
from .engine import GraphClassifier, classify_graph
from .errors import GraphTooLargeError
from .model import TrainedClassifier, encode_features, encode_labels
from .rules import classify_by_rules
from .types import (
    ClassificationResult,
    GraphType,
    ModelInfo,
    RuleDecision,
    spread_probabilities,
)

__all__ = [
    "EngineConfig",
    "TrainingExample",
    "generate_training_examples",
    "GraphClassifier",
    "classify_graph",
    "GraphTooLargeError",
    "TrainedClassifier",
    "encode_features",
    "encode_labels",
    "classify_by_rules",
    "ClassificationResult",
    "GraphType",
    "ModelInfo",
    "RuleDecision",
    "spread_probabilities",
]
