"""Classification output of one screening pass."""

from dataclasses import dataclass, field
from typing import List

from lender_screen.core.enums import RuleType
from lender_screen.models.domain.lender import LenderRecord

UNKNOWN_TIER = "Unknown"


@dataclass(frozen=True)
class QualifiedLender:
    """
    Lender that passed every check.

    Attributes:
        record: The full lender row
        tier: Trimmed Tier cell, or "Unknown" when blank
    """

    record: LenderRecord
    tier: str = UNKNOWN_TIER

    @property
    def name(self) -> str:
        return self.record.name


@dataclass(frozen=True)
class NonQualifiedLender:
    """
    Lender blocked by a check.

    Attributes:
        lender: Lender name
        blocking_rule: Reason from the first check that objected
        rule_type: Which check objected
    """

    lender: str
    blocking_rule: str
    rule_type: RuleType


@dataclass
class ClassificationResult:
    """
    Partition of the lender table for one merchant.

    Every input record lands in exactly one of qualified, non_qualified or
    the auto-dropped count.

    Attributes:
        qualified: Lenders with no objection, in input order
        non_qualified: Blocked lenders, in input order
        auto_dropped_count: Rows rejected before rule evaluation
        diagnostics: Messages for rows that failed during evaluation
        total_records: Number of records evaluated
    """

    qualified: List[QualifiedLender] = field(default_factory=list)
    non_qualified: List[NonQualifiedLender] = field(default_factory=list)
    auto_dropped_count: int = 0
    diagnostics: List[str] = field(default_factory=list)
    total_records: int = 0

    @property
    def is_complete(self) -> bool:
        """Whether every record was classified exactly once."""
        return (
            len(self.qualified) + len(self.non_qualified) + self.auto_dropped_count
            == self.total_records
        )
