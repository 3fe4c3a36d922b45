"""Engine configuration."""

from typing import Literal

from pydantic import BaseModel, Field

from ..graph.features import DEFAULT_MAX_PATH_EXPANSIONS


class EngineConfig(BaseModel):
    """Tunable settings for GraphClassifier."""

    # Rule decisions at or below this confidence go to the trained model.
    rule_confidence_threshold: float = Field(default=0.8, ge=0, le=1)
    # Base confidence for model predictions in "fixed" probability mode.
    model_confidence: float = Field(default=0.8, ge=0, le=1)
    probability_mode: Literal["fixed", "votes"] = "fixed"
    n_estimators: int = Field(default=100, ge=1)
    random_seed: int = 42
    max_path_expansions: int = Field(default=DEFAULT_MAX_PATH_EXPANSIONS, ge=1)
    max_nodes: int | None = Field(default=None, ge=1)
