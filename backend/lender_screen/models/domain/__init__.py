"""Domain models for the application."""

from lender_screen.models.domain.context import DEFAULT_CONTEXT, ScreeningContext
from lender_screen.models.domain.lender import (
    Cell,
    LenderRecord,
    NumberCell,
    TextCell,
)
from lender_screen.models.domain.merchant import MerchantCriteria
from lender_screen.models.domain.result import (
    ClassificationResult,
    NonQualifiedLender,
    QualifiedLender,
)

__all__ = [
    "Cell",
    "NumberCell",
    "TextCell",
    "LenderRecord",
    "MerchantCriteria",
    "ScreeningContext",
    "DEFAULT_CONTEXT",
    "ClassificationResult",
    "QualifiedLender",
    "NonQualifiedLender",
]
