"""
Base abstract class for weight advisors.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..config.routing_config import RoutingConfig
from .weights import WeightProposal


class BaseWeightAdvisor(ABC):
    """
    Abstract base class for collaborators that suggest new route weights.

    Advisors are heuristic and sit outside the path-finding contract: their
    proposals must be normalized by the caller before use.
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        """
        Initialize the advisor.

        Args:
            config: Routing configuration parameters
        """
        self.config = config or RoutingConfig()

    @abstractmethod
    def propose_weights(self, distance_weight: float, safety_weight: float,
                        context: Optional[Dict[str, Any]] = None) -> WeightProposal:
        """
        Suggest replacement weights.

        Args:
            distance_weight: Current distance weight
            safety_weight: Current safety weight
            context: Advisor-specific context (e.g. district names)

        Returns:
            Proposal with two non-negative weights and a reason
        """
        pass
