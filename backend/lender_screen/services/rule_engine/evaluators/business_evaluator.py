"""Business structure and industry rule evaluators."""

import re
from typing import Optional

from lender_screen.core.enums import RuleType
from lender_screen.models.domain.lender import (
    OTHER_KEY_REQUIREMENTS,
    PROHIBITED_INDUSTRIES,
)
from lender_screen.services.rule_engine.base import EvaluationContext, RuleEvaluator

SOLE_PROP_PHRASES = ("no sole prop", "corp only", "sole props")

CASE_BY_CASE = "case by case"

_INDUSTRY_SEPARATORS = re.compile(r"[\s/,]+")


class SolePropEvaluator(RuleEvaluator):
    """
    Evaluator for lenders that do not fund sole proprietorships.

    Only objects when the merchant is a sole prop; the requirement and
    prohibited-industry texts are searched for the known phrases.
    """

    rule_type = RuleType.SOLE_PROP

    def evaluate(self, context: EvaluationContext) -> Optional[str]:
        if not context.criteria.is_sole_prop:
            return None

        lender = context.lender
        all_text = (
            f"{lender.text(OTHER_KEY_REQUIREMENTS)} {lender.text(PROHIBITED_INDUSTRIES)}"
        ).lower()

        if any(phrase in all_text for phrase in SOLE_PROP_PHRASES):
            return "Sole Prop - Not accepted"

        return None


class IndustryEvaluator(RuleEvaluator):
    """
    Evaluator for the free-text Prohibited_Industries column.

    The merchant industry is split into keywords; any keyword longer than
    three characters found in the prohibited text blocks, unless the lender
    marks its list as case by case.
    """

    rule_type = RuleType.INDUSTRY

    def evaluate(self, context: EvaluationContext) -> Optional[str]:
        original = context.lender.text(PROHIBITED_INDUSTRIES)
        prohibited = original.lower()
        if not prohibited or CASE_BY_CASE in prohibited:
            return None

        for keyword in _INDUSTRY_SEPARATORS.split(context.industry):
            if len(keyword) > 3 and keyword in prohibited:
                return f"Industry - {original}"

        return None
