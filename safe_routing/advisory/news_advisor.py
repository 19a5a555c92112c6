"""
Weight advisor driven by simulated public-safety news.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..config.routing_config import RoutingConfig
from .base_advisor import BaseWeightAdvisor
from .weights import WeightProposal

logger = logging.getLogger(__name__)

DEFAULT_HIGH_RISK_DISTRICTS = ('Lima Centro', 'La Victoria', 'Callao', 'San Juan de Lurigancho')


class SimulatedNewsAdvisor(BaseWeightAdvisor):
    """
    Raises the safety weight when recent (simulated) news flags a district.

    News analysis is a placeholder: a fixed list of districts is treated as
    having increased incident reports.
    """

    def __init__(self, config: Optional[RoutingConfig] = None,
                 high_risk_districts: Sequence[str] = DEFAULT_HIGH_RISK_DISTRICTS,
                 safety_step: float = 0.2,
                 max_safety_weight: float = 0.9):
        """
        Args:
            config: Routing configuration parameters
            high_risk_districts: Districts the simulated news reports as risky
            safety_step: How much to raise the safety weight when risk is reported
            max_safety_weight: Upper bound for the suggested safety weight
        """
        super().__init__(config)
        self.high_risk_districts = list(high_risk_districts)
        self.safety_step = safety_step
        self.max_safety_weight = max_safety_weight

    def analyze_news(self, districts: Sequence[str]) -> List[str]:
        """Return the districts with (simulated) increased incident reports."""
        return [district for district in districts if district in self.high_risk_districts]

    def propose_weights(self, distance_weight: float, safety_weight: float,
                        context: Optional[Dict[str, Any]] = None) -> WeightProposal:
        context = context or {}
        districts = context.get('districts') or self.config.district_names

        if not districts:
            return WeightProposal(
                distance_weight=distance_weight,
                safety_weight=safety_weight,
                reason="No districts provided for news analysis; weights unchanged."
            )

        flagged = self.analyze_news(districts)

        if flagged:
            new_safety = min(self.max_safety_weight, safety_weight + self.safety_step)
            new_safety = max(new_safety, safety_weight)
            logger.info(f"News flags {len(flagged)} districts - safety weight {safety_weight:.2f} -> {new_safety:.2f}")
            return WeightProposal(
                distance_weight=1.0 - new_safety,
                safety_weight=new_safety,
                reason=(f"Simulated news reports increased public-safety incidents in "
                        f"{', '.join(flagged)}; raising the safety weight.")
            )

        return WeightProposal(
            distance_weight=distance_weight,
            safety_weight=safety_weight,
            reason=(f"Simulated news reports no major incidents in "
                    f"{', '.join(districts)}; current weights look appropriate.")
        )
