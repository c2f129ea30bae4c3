"""Rule evaluators for the lender eligibility checks."""

from .business_evaluator import IndustryEvaluator, SolePropEvaluator
from .custom_evaluator import (
    NAMED_LENDER_RULES,
    CustomRestrictionEvaluator,
    NamedLenderRule,
)
from .geographic_evaluator import StateRestrictionEvaluator
from .position_evaluator import PositionEvaluator
from .requirements_evaluator import MinimumRequirementsEvaluator

__all__ = [
    "CustomRestrictionEvaluator",
    "IndustryEvaluator",
    "MinimumRequirementsEvaluator",
    "NAMED_LENDER_RULES",
    "NamedLenderRule",
    "PositionEvaluator",
    "SolePropEvaluator",
    "StateRestrictionEvaluator",
]
