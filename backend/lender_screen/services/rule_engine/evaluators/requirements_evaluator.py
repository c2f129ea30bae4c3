"""Minimum time-in-business, revenue and credit rule evaluator."""

from typing import Optional

from lender_screen.core.enums import RuleType
from lender_screen.models.domain.lender import (
    MIN_FICO,
    MIN_MONTHLY_REVENUE,
    MIN_TIB_MONTHS,
    format_number,
)
from lender_screen.services.rule_engine.base import EvaluationContext, RuleEvaluator

FICO_TOLERANCE = 20


def format_amount(value: float) -> str:
    """Format a dollar amount with thousands separators ("10,000", "1,234.5")."""
    if value.is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


class MinimumRequirementsEvaluator(RuleEvaluator):
    """
    Evaluator for the lender's numeric minimums.

    Handles, in order:
    - Min_TIB_Months: months in business
    - Min_Monthly_Revenue: average monthly revenue
    - Min_FICO: owner credit score, with a 20 point tolerance

    A missing or non-numeric minimum is not a requirement.
    """

    rule_type = RuleType.MINIMUM_REQUIREMENTS

    def evaluate(self, context: EvaluationContext) -> Optional[str]:
        return (
            self._evaluate_tib(context)
            or self._evaluate_revenue(context)
            or self._evaluate_fico(context)
        )

    def _evaluate_tib(self, context: EvaluationContext) -> Optional[str]:
        min_tib = self._extract_threshold(context.lender, MIN_TIB_MONTHS)
        if min_tib is not None and context.criteria.tib < min_tib:
            return f"TIB - Min {format_number(min_tib)} months"
        return None

    def _evaluate_revenue(self, context: EvaluationContext) -> Optional[str]:
        min_revenue = self._extract_threshold(context.lender, MIN_MONTHLY_REVENUE)
        if min_revenue is not None and context.criteria.monthly_revenue < min_revenue:
            return f"Revenue - Min ${format_amount(min_revenue)}"
        return None

    def _evaluate_fico(self, context: EvaluationContext) -> Optional[str]:
        min_fico = self._extract_threshold(context.lender, MIN_FICO)
        if min_fico is not None and context.criteria.fico < min_fico - FICO_TOLERANCE:
            return f"FICO - Min {format_number(min_fico)} (with 20pt tolerance)"
        return None
