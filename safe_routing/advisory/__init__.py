"""
Advisors that propose distance/safety weight adjustments.
"""

from .weights import WeightProposal, normalize_weights
from .base_advisor import BaseWeightAdvisor
from .news_advisor import SimulatedNewsAdvisor
from .advisor_factory import AdvisorMethod, create_advisor, get_available_advisors

__all__ = [
    'WeightProposal',
    'normalize_weights',
    'BaseWeightAdvisor',
    'SimulatedNewsAdvisor',
    'AdvisorMethod',
    'create_advisor',
    'get_available_advisors'
]
