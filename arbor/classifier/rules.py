"""Rule-based classification for unambiguous graphs."""

from ..graph.features import GraphFeatures
from .types import GraphType, RuleDecision

# Confidence below which the engine consults the trained model.
AMBIGUOUS_CONFIDENCE = 0.5


def classify_by_rules(features: GraphFeatures) -> RuleDecision:
    """Classify a graph with ordered heuristics; the first match wins.

    1. At most one node, or no edges: Tree.
    2. Any cycle or self-loop: Cyclic.
    3. Connected with n-1 edges: Tree.
    4. More than n-1 edges and no cycles: DAG.
    5. Anything else is ambiguous and gets a low-confidence Tree guess.

    Args:
        features: The graph's structural features.

    Returns:
        The matching RuleDecision.
    """
    if features.node_count <= 1 or features.edge_count == 0:
        return RuleDecision(
            graph_type=GraphType.TREE,
            confidence=0.95,
            reasoning="Single node or no edges detected",
        )

    if features.cycle_count > 0 or features.has_loops:
        reasoning = f"{features.cycle_count} cycle(s) detected"
        if features.has_loops:
            reasoning += ", including self-loops"
        return RuleDecision(
            graph_type=GraphType.CYCLIC,
            confidence=0.95,
            reasoning=reasoning,
        )

    tree_edge_count = features.node_count - 1

    if features.edge_count == tree_edge_count and features.is_connected:
        return RuleDecision(
            graph_type=GraphType.TREE,
            confidence=0.90,
            reasoning="Connected graph with n-1 edges (tree property)",
        )

    if features.edge_count > tree_edge_count and features.cycle_count == 0:
        return RuleDecision(
            graph_type=GraphType.DAG,
            confidence=0.85,
            reasoning="Multiple paths between nodes without cycles",
        )

    return RuleDecision(
        graph_type=GraphType.TREE,
        confidence=AMBIGUOUS_CONFIDENCE,
        reasoning="Ambiguous case, deferring to learned model",
    )
