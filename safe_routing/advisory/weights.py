"""
Weight proposals and their normalization.
"""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SUM_TOLERANCE = 0.001


@dataclass(frozen=True)
class WeightProposal:
    """A (distance, safety) weight pair suggested by an advisor."""

    distance_weight: float
    safety_weight: float
    reason: str = ""
    normalized: bool = False


def normalize_weights(proposal: WeightProposal) -> WeightProposal:
    """
    Turn an advisor's raw proposal into weights the router can use.

    Pairs whose sum is off by more than 0.001 are rescaled to sum to 1.0;
    a zero-sum pair falls back to an even 0.5/0.5 split. The distance weight
    is then clamped to [0, 1] and the safety weight set to its complement.

    Args:
        proposal: Raw advisor output (both weights expected non-negative)

    Returns:
        Normalized proposal with the reason annotated when weights changed
    """
    distance_weight = proposal.distance_weight
    reason = proposal.reason
    total = proposal.distance_weight + proposal.safety_weight

    if total == 0:
        logger.warning("Advisor returned zero weights - using 0.5/0.5")
        distance_weight = 0.5
        reason = f"Advisor returned invalid zero weights; defaulted to 0.5/0.5. Original reason: {reason}"
    elif abs(total - 1.0) > SUM_TOLERANCE:
        logger.info(f"Normalizing advisor weights (sum was {total:.3f})")
        distance_weight = distance_weight / total
        reason = f"{reason} (weights normalized to sum to 1.0)"

    distance_weight = max(0.0, min(1.0, distance_weight))

    return WeightProposal(
        distance_weight=distance_weight,
        safety_weight=1.0 - distance_weight,
        reason=reason,
        normalized=True
    )
