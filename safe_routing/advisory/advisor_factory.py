"""
Factory for creating weight advisors.
"""

from enum import Enum
from typing import Dict, Optional

from ..config.routing_config import RoutingConfig
from .base_advisor import BaseWeightAdvisor
from .news_advisor import SimulatedNewsAdvisor


class AdvisorMethod(Enum):
    """Available advisor methods."""
    SIMULATED_NEWS = "simulated_news"


def create_advisor(method: Optional[str] = None,
                   config: Optional[RoutingConfig] = None,
                   **kwargs) -> BaseWeightAdvisor:
    """
    Create a weight advisor from a method name.

    Args:
        method: Advisor method name (defaults to ``config.advisor_method``)
        config: Routing configuration
        **kwargs: Advisor-specific parameters

    Raises:
        ValueError: If method is not supported
    """
    config = config or RoutingConfig()
    method_name = method or config.advisor_method

    try:
        advisor_method = AdvisorMethod(method_name.lower())
    except ValueError:
        valid = [m.value for m in AdvisorMethod]
        raise ValueError(f"Invalid advisor method: {method_name}. Valid options: {valid}") from None

    if advisor_method == AdvisorMethod.SIMULATED_NEWS:
        return SimulatedNewsAdvisor(config=config, **kwargs)

    raise ValueError(f"Unsupported advisor method: {advisor_method}")


def get_available_advisors() -> Dict[str, str]:
    return {
        AdvisorMethod.SIMULATED_NEWS.value: "Raises the safety weight when simulated news flags a district"
    }
