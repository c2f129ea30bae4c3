"""Rule engine orchestrator applying the eligibility checks in order."""

from typing import Optional, Tuple

from lender_screen.core.enums import RuleType
from lender_screen.models.domain.lender import LenderRecord
from lender_screen.models.domain.merchant import MerchantCriteria
from lender_screen.services.rule_engine.base import (
    EvaluationContext,
    EvaluationResult,
    RuleEvaluator,
)
from lender_screen.services.rule_engine.evaluators import (
    CustomRestrictionEvaluator,
    IndustryEvaluator,
    MinimumRequirementsEvaluator,
    PositionEvaluator,
    SolePropEvaluator,
    StateRestrictionEvaluator,
)

DEFAULT_CHAIN: Tuple[RuleEvaluator, ...] = (
    PositionEvaluator(),
    CustomRestrictionEvaluator(),
    StateRestrictionEvaluator(),
    SolePropEvaluator(),
    IndustryEvaluator(),
    MinimumRequirementsEvaluator(),
)


class RuleEngine:
    """
    Rule engine orchestrator for a single lender.

    This class:
    - Holds the fixed, ordered chain of evaluators
    - Stops at the first evaluator that objects

    The chain is read-only; the engine keeps no state between calls.
    """

    def __init__(self, chain: Tuple[RuleEvaluator, ...] = DEFAULT_CHAIN):
        """Initialize the rule engine with its evaluator chain."""
        self._chain = tuple(chain)

    @property
    def rule_order(self) -> Tuple[RuleType, ...]:
        return tuple(evaluator.rule_type for evaluator in self._chain)

    def evaluate_lender(
        self,
        lender: LenderRecord,
        criteria: MerchantCriteria,
    ) -> Optional[EvaluationResult]:
        """
        Run the chain against one lender.

        Args:
            lender: Structurally valid lender record
            criteria: Merchant criteria

        Returns:
            The first failing EvaluationResult, or None if every check passed
        """
        context = EvaluationContext(lender=lender, criteria=criteria)
        for evaluator in self._chain:
            result = evaluator.run(context)
            if not result.passed:
                return result
        return None
