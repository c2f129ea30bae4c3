"""Lender-specific restrictions that are not expressed in the lender table."""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from lender_screen.core.enums import RuleType
from lender_screen.services.rule_engine.base import EvaluationContext, RuleEvaluator
from lender_screen.services.state_normalizer import to_code


@dataclass(frozen=True)
class NamedLenderRule:
    """
    Restriction applied to lenders whose name contains a fragment.

    Attributes:
        lender_fragment: Lowercase substring matched against the lender name
        applies: Predicate over the evaluation context
        reason: Blocking reason; "{state}" is replaced with the merchant state
    """

    lender_fragment: str
    applies: Callable[[EvaluationContext], bool]
    reason: str

    def matches(self, lender_name: str) -> bool:
        return self.lender_fragment in lender_name.lower()

    def format_reason(self, context: EvaluationContext) -> str:
        return self.reason.format(state=context.criteria.state.strip())


def _trucking_from_position(position: int) -> Callable[[EvaluationContext], bool]:
    return lambda ctx: ctx.is_trucking and ctx.criteria.requested_position >= position


def _trucking_in_states(*codes: str) -> Callable[[EvaluationContext], bool]:
    return lambda ctx: ctx.is_trucking and to_code(ctx.criteria.state) in codes


def _sole_prop_in_states(*codes: str) -> Callable[[EvaluationContext], bool]:
    return lambda ctx: ctx.criteria.is_sole_prop and to_code(ctx.criteria.state) in codes


def _industry_below_tib(keyword: str, months: int) -> Callable[[EvaluationContext], bool]:
    return lambda ctx: keyword in ctx.industry and ctx.criteria.tib < months


NAMED_LENDER_RULES: Tuple[NamedLenderRule, ...] = (
    NamedLenderRule(
        "lexio",
        _trucking_from_position(3),
        "Industry - Trucking 1st-2nd position only",
    ),
    NamedLenderRule(
        "fyncap",
        _trucking_in_states("il"),
        "Industry - Trucking not accepted in IL",
    ),
    NamedLenderRule(
        "blackbridge",
        _trucking_in_states("il"),
        "Industry - Trucking not accepted in IL",
    ),
    NamedLenderRule(
        "smarter merchant",
        _sole_prop_in_states("il", "ar", "ny"),
        "Industry - Sole props not accepted in {state}",
    ),
    NamedLenderRule(
        "idea financial",
        _industry_below_tib("construction", 84),  # 7 years
        "Industry - Construction requires 7+ years TIB",
    ),
)


class CustomRestrictionEvaluator(RuleEvaluator):
    """
    Evaluator for the fixed table of named-lender restrictions.

    Rules are tried in table order and the first one that matches the lender
    name and applies to the merchant blocks.
    """

    rule_type = RuleType.CUSTOM_RESTRICTION

    def __init__(self, rules: Tuple[NamedLenderRule, ...] = NAMED_LENDER_RULES):
        self._rules = rules

    def evaluate(self, context: EvaluationContext) -> Optional[str]:
        lender_name = context.lender.name
        for rule in self._rules:
            if rule.matches(lender_name) and rule.applies(context):
                return rule.format_reason(context)
        return None
