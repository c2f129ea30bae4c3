"""Funding position rule evaluator."""

from typing import Optional

from lender_screen.core.enums import RuleType
from lender_screen.models.domain.lender import POS_MAX, POS_MIN, format_number
from lender_screen.services.rule_engine.base import EvaluationContext, RuleEvaluator


class PositionEvaluator(RuleEvaluator):
    """
    Evaluator for the lender's accepted position range.

    Blocks when the requested position falls outside [pos_min, pos_max],
    both bounds inclusive.
    """

    rule_type = RuleType.POSITION

    def evaluate(self, context: EvaluationContext) -> Optional[str]:
        pos_min = self._extract_threshold(context.lender, POS_MIN)
        pos_max = self._extract_threshold(context.lender, POS_MAX)

        # Rows without bounds are dropped before the chain runs
        if pos_min is None or pos_max is None:
            return None

        requested = context.criteria.requested_position
        if requested < pos_min or requested > pos_max:
            return f"Position - Positions {format_number(pos_min)}-{format_number(pos_max)}"

        return None
