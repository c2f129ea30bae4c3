"""Classification of a lender table into qualified, non-qualified and dropped."""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from lender_screen.core.enums import Classification, DropReason
from lender_screen.models.domain.context import DEFAULT_CONTEXT, ScreeningContext
from lender_screen.models.domain.lender import POS_MAX, POS_MIN, TIER, LenderRecord
from lender_screen.models.domain.merchant import MerchantCriteria
from lender_screen.models.domain.result import (
    UNKNOWN_TIER,
    ClassificationResult,
    NonQualifiedLender,
    QualifiedLender,
)
from lender_screen.services.rule_engine.base import EvaluationResult
from lender_screen.services.rule_engine.engine import RuleEngine

logger = logging.getLogger(__name__)

_ALL_DIGITS = re.compile(r"\d+", re.ASCII)

SUMMARY_ROW_MARKERS = ("total", "summary")


@dataclass(frozen=True)
class LenderOutcome:
    """
    Terminal state of one lender.

    Attributes:
        classification: Which bucket the lender landed in
        drop_reason: Set for auto-dropped lenders
        failure: The objecting check for non-qualified lenders
    """

    classification: Classification
    drop_reason: Optional[DropReason] = None
    failure: Optional[EvaluationResult] = None


def structural_drop_reason(lender: LenderRecord) -> Optional[DropReason]:
    """
    Decide whether a row is unusable before any rule runs.

    Returns:
        The DropReason, or None when the row can be evaluated
    """
    name = lender.name
    if len(name) < 2:
        return DropReason.BLANK_NAME

    lowered = name.lower()
    if (
        "$" in name
        or _ALL_DIGITS.fullmatch(name)
        or any(marker in lowered for marker in SUMMARY_ROW_MARKERS)
    ):
        return DropReason.INVALID_NAME

    if lender.number(POS_MIN) is None or lender.number(POS_MAX) is None:
        return DropReason.MISSING_POSITION_BOUNDS

    return None


class Classifier:
    """
    Per-lender state machine over a whole lender table.

    Each lender goes through:
    1. Structural validation (name and position bounds), else AUTO_DROPPED
    2. The rule chain, first objection gives NON_QUALIFIED
    3. QUALIFIED when no check objects

    A failure while evaluating one lender drops that lender and is recorded
    as a diagnostic; the rest of the table is still processed.
    """

    def __init__(
        self,
        context: Optional[ScreeningContext] = None,
        rule_engine: Optional[RuleEngine] = None,
    ):
        """
        Initialize the classifier.

        Args:
            context: Screening context (debug flag)
            rule_engine: Engine holding the evaluator chain
        """
        self.context = context or DEFAULT_CONTEXT
        self.rule_engine = rule_engine or RuleEngine()

    def classify_lender(
        self,
        lender: LenderRecord,
        criteria: MerchantCriteria,
    ) -> LenderOutcome:
        """Move a single lender to its terminal state."""
        drop_reason = structural_drop_reason(lender)
        if drop_reason is not None:
            return LenderOutcome(Classification.AUTO_DROPPED, drop_reason=drop_reason)

        failure = self.rule_engine.evaluate_lender(lender, criteria)
        if failure is not None:
            return LenderOutcome(Classification.NON_QUALIFIED, failure=failure)

        return LenderOutcome(Classification.QUALIFIED)

    def classify(
        self,
        lenders: Sequence[LenderRecord],
        criteria: MerchantCriteria,
    ) -> ClassificationResult:
        """
        Classify every lender for one merchant.

        Args:
            lenders: Parsed lender records
            criteria: Merchant criteria

        Returns:
            ClassificationResult covering every record exactly once
        """
        result = ClassificationResult(total_records=len(lenders))

        for index, lender in enumerate(lenders):
            try:
                outcome = self.classify_lender(lender, criteria)
            except Exception as e:
                message = f"Row {index + 1}: {e}"
                result.diagnostics.append(message)
                result.auto_dropped_count += 1
                if self.context.debug:
                    logger.warning(f"Processing error: {message}")
                logger.debug(
                    f"Row {index + 1} auto-dropped: {DropReason.EVALUATION_ERROR.value}"
                )
                continue

            if outcome.classification == Classification.AUTO_DROPPED:
                result.auto_dropped_count += 1
                logger.debug(
                    f"Row {index + 1} auto-dropped: {outcome.drop_reason.value}"
                )
            elif outcome.classification == Classification.NON_QUALIFIED:
                result.non_qualified.append(
                    NonQualifiedLender(
                        lender=lender.name,
                        blocking_rule=outcome.failure.reason,
                        rule_type=outcome.failure.rule_type,
                    )
                )
            else:
                tier = lender.text(TIER).strip() or UNKNOWN_TIER
                result.qualified.append(QualifiedLender(record=lender, tier=tier))

        logger.info(
            f"Screened {result.total_records} lenders: "
            f"{len(result.qualified)} qualified, "
            f"{len(result.non_qualified)} non-qualified, "
            f"{result.auto_dropped_count} auto-dropped"
        )
        return result


def classify(
    lenders: Sequence[LenderRecord],
    criteria: MerchantCriteria,
    context: Optional[ScreeningContext] = None,
) -> ClassificationResult:
    """Classify a lender table with a one-off Classifier."""
    return Classifier(context).classify(lenders, criteria)
