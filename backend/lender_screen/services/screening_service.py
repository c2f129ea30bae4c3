"""Screening service for orchestrating one merchant screening pass."""

import logging
from typing import Optional

from lender_screen.models.domain.context import DEFAULT_CONTEXT, ScreeningContext
from lender_screen.models.domain.merchant import MerchantCriteria
from lender_screen.models.domain.result import ClassificationResult
from lender_screen.services.rule_engine.classifier import Classifier
from lender_screen.services.table_parser import TableParser

logger = logging.getLogger(__name__)


class ScreeningService:
    """
    Screening service tying the parser to the classifier.

    This service:
    - Parses the raw lender table for one request
    - Classifies every lender against the merchant criteria
    - Logs the run outcome

    Nothing is cached between calls; each run starts from the raw text.
    """

    def __init__(self, context: Optional[ScreeningContext] = None):
        """
        Initialize the screening service.

        Args:
            context: Screening context shared by parser and classifier
        """
        self.context = context or DEFAULT_CONTEXT
        self.parser = TableParser(self.context)
        self.classifier = Classifier(self.context)

    def screen(self, table_text: str, criteria: MerchantCriteria) -> ClassificationResult:
        """
        Screen a lender table for one merchant.

        Args:
            table_text: Raw delimited lender table
            criteria: Validated merchant criteria

        Returns:
            ClassificationResult for every parsed lender

        Raises:
            FormatError: If the table has no header or no data rows
        """
        lenders = self.parser.parse(table_text)

        logger.info(
            f"Running screening for {criteria.industry!r} in {criteria.state!r} "
            f"(position {criteria.requested_position}) against {len(lenders)} lenders"
        )
        result = self.classifier.classify(lenders, criteria)

        if result.diagnostics:
            logger.warning(
                f"Screening finished with {len(result.diagnostics)} processing errors"
            )
        return result
