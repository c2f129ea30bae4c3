"""Rule engine foundation with evaluation context, results, and base evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from lender_screen.core.enums import RuleType
from lender_screen.models.domain.lender import LenderRecord
from lender_screen.models.domain.merchant import MerchantCriteria

TRUCKING_KEYWORDS = ("truck", "transport")


@dataclass(frozen=True)
class EvaluationContext:
    """
    Evaluation context passed to every rule evaluator.

    Attributes:
        lender: The lender row being checked
        criteria: The merchant request being screened
    """

    lender: LenderRecord
    criteria: MerchantCriteria

    @property
    def industry(self) -> str:
        """Merchant industry, lowercased for keyword matching."""
        return self.criteria.industry.lower()

    @property
    def is_trucking(self) -> bool:
        return any(keyword in self.industry for keyword in TRUCKING_KEYWORDS)


@dataclass(frozen=True)
class EvaluationResult:
    """
    Result of running one check against one lender.

    Attributes:
        rule_type: The check that produced this result
        passed: Whether the check raised no objection
        reason: Blocking reason when the check objected
    """

    rule_type: RuleType
    passed: bool
    reason: Optional[str] = None


class RuleEvaluator(ABC):
    """
    Abstract base class for eligibility checks using the Strategy pattern.

    Each concrete evaluator inspects one lender record against the merchant
    criteria and returns a blocking reason, or None when it has no objection.
    Evaluators hold no state and never modify the record.
    """

    rule_type: RuleType

    @abstractmethod
    def evaluate(self, context: EvaluationContext) -> Optional[str]:
        """
        Check one lender against the merchant criteria.

        Args:
            context: EvaluationContext with the lender and criteria

        Returns:
            Blocking reason string, or None for no objection
        """
        pass

    def run(self, context: EvaluationContext) -> EvaluationResult:
        """Evaluate and wrap the outcome in an EvaluationResult."""
        reason = self.evaluate(context)
        return EvaluationResult(
            rule_type=self.rule_type,
            passed=reason is None,
            reason=reason,
        )

    def _extract_threshold(self, lender: LenderRecord, column: str) -> Optional[float]:
        """
        Read a numeric requirement from the lender row.

        Missing or non-numeric cells mean the lender has no such requirement.
        """
        return lender.number(column)
