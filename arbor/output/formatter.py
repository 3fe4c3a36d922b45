"""Output formatting for classification results."""

import json
from typing import Literal

from ..classifier.types import ClassificationResult, GraphType, ModelInfo
from ..graph.features import FEATURE_NAMES, GraphFeatures

BAR_WIDTH = 20


def format_classification_result(
    result: ClassificationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a classification result for output.

    Args:
        result: The classification result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps(result.to_dict(), indent=2)
    return _format_result_text(result)


def format_features(
    features: GraphFeatures,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a feature vector for output."""
    if format == "json":
        return json.dumps(features.to_dict(), indent=2)
    return "\n".join(_format_feature_lines(features))


def format_model_info(
    info: ModelInfo,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format model introspection data."""
    if format == "json":
        return json.dumps(info.to_dict(), indent=2)

    if not info.is_trained:
        return "Model: not trained"

    lines = ["Model: trained"]
    lines.append(f"  Trees: {info.n_estimators}")
    lines.append(f"  Training examples: {info.training_examples}")
    lines.append(f"  Estimated accuracy: {info.accuracy:.0%}")
    return "\n".join(lines)


def _format_result_text(result: ClassificationResult) -> str:
    """Format result as human-readable text."""
    lines: list[str] = []

    lines.append(
        f"Classification: {result.graph_type.value} "
        f"({result.confidence:.1%} confidence, via {result.source})"
    )
    lines.append(f"Reasoning: {result.reasoning}")
    lines.append("")

    lines.append("PROBABILITIES:")
    for graph_type in GraphType:
        probability = result.probabilities.get(graph_type, 0.0)
        lines.append(
            f"  {graph_type.value:<7} {_bar(probability)} {probability:6.1%}"
        )

    lines.append("")
    lines.append("FEATURES:")
    lines.extend(f"  {line}" for line in _format_feature_lines(result.features))

    return "\n".join(lines)


def _format_feature_lines(features: GraphFeatures) -> list[str]:
    width = max(len(name) for name in FEATURE_NAMES)
    lines = []
    for name, value in features.to_dict().items():
        if isinstance(value, float) and not value.is_integer():
            rendered = f"{value:.4f}"
        else:
            rendered = str(int(value))
        lines.append(f"{name:<{width}}  {rendered}")
    return lines


def _bar(probability: float) -> str:
    """Render a probability as a fixed-width bar."""
    filled = round(probability * BAR_WIDTH)
    return "█" * filled + "░" * (BAR_WIDTH - filled)
