"""Display ordering for classification results."""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from lender_screen.models.domain.result import (
    UNKNOWN_TIER,
    ClassificationResult,
    NonQualifiedLender,
    QualifiedLender,
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(tier: str) -> Optional[int]:
    """Integer prefix of a tier label ("2A" -> 2), None when there is none."""
    match = _LEADING_INT.match(tier)
    return int(match.group(1)) if match else None


def tier_sort_key(tier: str) -> Tuple[int, int, str]:
    """
    Sort key for tier labels.

    Numeric tiers come first in numeric order, then named tiers
    alphabetically, then "Unknown".
    """
    if tier == UNKNOWN_TIER:
        return (2, 0, "")
    number = _leading_int(tier)
    if number is not None:
        return (0, number, tier)
    return (1, 0, tier.lower())


def tier_label(tier: str) -> str:
    return "No Tier Specified" if tier == UNKNOWN_TIER else f"Tier {tier}"


@dataclass(frozen=True)
class TierGroup:
    """Qualified lenders sharing one tier label."""

    tier: str
    label: str
    lenders: List[QualifiedLender]


class ResultPresenter:
    """Groups and orders a ClassificationResult for display."""

    @staticmethod
    def group_by_tier(result: ClassificationResult) -> List[TierGroup]:
        """
        Group qualified lenders by tier.

        Returns:
            Tier groups in display order, lenders sorted by name within a tier
        """
        groups: Dict[str, List[QualifiedLender]] = {}
        for lender in result.qualified:
            groups.setdefault(lender.tier, []).append(lender)

        return [
            TierGroup(
                tier=tier,
                label=tier_label(tier),
                lenders=sorted(groups[tier], key=lambda item: item.name.lower()),
            )
            for tier in sorted(groups, key=tier_sort_key)
        ]

    @staticmethod
    def sorted_non_qualified(result: ClassificationResult) -> List[NonQualifiedLender]:
        """Non-qualified lenders sorted by lender name."""
        return sorted(result.non_qualified, key=lambda item: item.lender.lower())
