"""Graph layer: adjacency structure and structural features."""

from .structure import GraphStructure, build_structure
from .features import FEATURE_NAMES, GraphFeatures, extract_features

__all__ = [
    "GraphStructure",
    "build_structure",
    "FEATURE_NAMES",
    "GraphFeatures",
    "extract_features",
]
