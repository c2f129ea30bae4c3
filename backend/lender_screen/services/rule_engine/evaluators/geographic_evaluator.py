"""State restriction rule evaluator."""

from typing import Optional

from lender_screen.core.enums import RuleType
from lender_screen.models.domain.lender import STATE_RESTRICTIONS
from lender_screen.services.rule_engine.base import EvaluationContext, RuleEvaluator
from lender_screen.services.state_normalizer import to_full_name


class StateRestrictionEvaluator(RuleEvaluator):
    """
    Evaluator for the free-text State_Restrictions column.

    The merchant state is matched as entered and as its full state name,
    both as case-sensitive substrings of the restriction text.
    """

    rule_type = RuleType.STATE_RESTRICTION

    def evaluate(self, context: EvaluationContext) -> Optional[str]:
        restrictions = context.lender.text(STATE_RESTRICTIONS)
        if not restrictions:
            return None

        merchant_state = context.criteria.state.strip()
        full_name = to_full_name(merchant_state)

        for token in (merchant_state, full_name):
            if token and token in restrictions:
                return f"State - {restrictions}"

        return None
