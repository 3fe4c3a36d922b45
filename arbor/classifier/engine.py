"""Classification engine combining rules and the trained model."""

import logging
import threading
from typing import Any

from ..graph.features import extract_features
from ..schema.loader import parse_graph
from ..schema.models import GraphData
from .config import EngineConfig
from .errors import GraphTooLargeError
from .model import TrainedClassifier
from .rules import classify_by_rules
from .types import ClassificationResult, ModelInfo, spread_probabilities

logger = logging.getLogger(__name__)


class GraphClassifier:
    """Classifies graphs as Tree, Cyclic or DAG.

    Rules resolve the obvious cases. Anything the rules are unsure about is
    passed to a random forest that trains itself on first use. The model is
    owned by this instance and guarded by a lock, so one engine can serve
    concurrent callers.
    """

    def __init__(self, config: EngineConfig | None = None):
        """Initialize the engine.

        Args:
            config: Engine settings; defaults to ``EngineConfig()``.
        """
        self.config = config or EngineConfig()
        self._lock = threading.Lock()
        self._model = self._new_model()

    def _new_model(self) -> TrainedClassifier:
        return TrainedClassifier(
            n_estimators=self.config.n_estimators,
            random_seed=self.config.random_seed,
            model_confidence=self.config.model_confidence,
            probability_mode=self.config.probability_mode,
        )

    # -------------------------------------------------------------------------
    # Model lifecycle
    # -------------------------------------------------------------------------

    def train_model(self) -> None:
        """Retrain unconditionally, replacing the cached model."""
        model = self._new_model()
        model.train()
        with self._lock:
            self._model = model

    def ensure_trained(self) -> None:
        """Train the model if it has not been trained yet."""
        with self._lock:
            self._ensure_trained_locked()

    def _ensure_trained_locked(self) -> None:
        if not self._model.is_trained:
            self._model.train()

    def get_model_info(self) -> ModelInfo:
        """Report whether the model is trained and its estimated accuracy."""
        with self._lock:
            if not self._model.is_trained:
                return ModelInfo(is_trained=False)
            return ModelInfo(
                is_trained=True,
                accuracy=self._model.accuracy,
                n_estimators=self._model.n_estimators,
                training_examples=self._model.training_size,
            )

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def classify(self, graph: GraphData | dict[str, Any]) -> ClassificationResult:
        """Classify a graph.

        Args:
            graph: A GraphData or a raw mapping with ``nodes`` and ``edges``.

        Returns:
            The classification record.

        Raises:
            InvalidGraphError: If the payload is missing nodes or edges.
            GraphTooLargeError: If ``max_nodes`` is set and exceeded.
        """
        graph = parse_graph(graph)

        limit = self.config.max_nodes
        node_count = len(graph.node_ids)
        if limit is not None and node_count > limit:
            raise GraphTooLargeError(node_count, limit)

        features = extract_features(graph, self.config.max_path_expansions)
        decision = classify_by_rules(features)
        logger.debug(
            "Rule decision: %s (%.2f) - %s",
            decision.graph_type.value,
            decision.confidence,
            decision.reasoning,
        )

        if decision.confidence > self.config.rule_confidence_threshold:
            return ClassificationResult(
                graph_type=decision.graph_type,
                confidence=decision.confidence,
                probabilities=spread_probabilities(
                    decision.graph_type, decision.confidence
                ),
                features=features,
                reasoning=decision.reasoning,
                source="rules",
            )

        with self._lock:
            self._ensure_trained_locked()
            predicted, probabilities = self._model.predict(features)

        confidence = probabilities[predicted]
        return ClassificationResult(
            graph_type=predicted,
            confidence=confidence,
            probabilities=probabilities,
            features=features,
            reasoning=f"ML model prediction with {confidence * 100:.1f}% confidence",
            source="model",
        )


def classify_graph(
    graph: GraphData | dict[str, Any],
    config: EngineConfig | None = None,
) -> ClassificationResult:
    """Convenience function to classify a graph with a fresh engine.

    Args:
        graph: A GraphData or a raw mapping with ``nodes`` and ``edges``.
        config: Optional engine settings.

    Returns:
        The classification record.
    """
    return GraphClassifier(config).classify(graph)
