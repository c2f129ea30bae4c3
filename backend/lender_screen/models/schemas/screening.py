"""Pydantic schemas for screening requests and results."""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from lender_screen.core.enums import RuleType
from lender_screen.models.domain.merchant import MerchantCriteria
from lender_screen.models.domain.result import ClassificationResult
from lender_screen.services.result_presenter import ResultPresenter


# ==================== Request Schemas ====================


class MerchantCriteriaRequest(BaseModel):
    """Schema for the merchant funding request."""

    requested_position: int = Field(..., ge=1, le=10)
    tib: int = Field(..., ge=0, description="Time in business, months")
    monthly_revenue: int = Field(..., ge=0)
    fico: int = Field(..., ge=300, le=850)
    state: str = Field(..., min_length=1, max_length=100)
    industry: str = Field(..., min_length=1, max_length=255)
    is_sole_prop: bool = False

    @field_validator("state", "industry")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Trim and reject whitespace-only values."""
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    def to_domain(self) -> MerchantCriteria:
        return MerchantCriteria(
            requested_position=self.requested_position,
            tib=self.tib,
            monthly_revenue=self.monthly_revenue,
            fico=self.fico,
            state=self.state,
            industry=self.industry,
            is_sole_prop=self.is_sole_prop,
        )


class ScreeningRequest(BaseModel):
    """Schema for screening a lender table supplied as text."""

    csv_text: str = Field(..., min_length=1)
    criteria: MerchantCriteriaRequest


# ==================== Response Schemas ====================


class QualifiedLenderResponse(BaseModel):
    """Schema for a qualified lender."""

    lender_name: str
    tier: str
    record: dict[str, Union[float, str]]


class TierGroupResponse(BaseModel):
    """Schema for qualified lenders grouped by tier."""

    tier: str
    label: str
    lenders: list[QualifiedLenderResponse]


class NonQualifiedLenderResponse(BaseModel):
    """Schema for a blocked lender."""

    lender: str
    blocking_rule: str
    rule_type: RuleType


class ScreeningSummary(BaseModel):
    """Schema for result counts."""

    qualified: int = 0
    non_qualified: int = 0
    auto_dropped: int = 0
    total: int = 0


class ScreeningResponse(BaseModel):
    """Schema for a complete screening result."""

    summary: ScreeningSummary
    tiers: list[TierGroupResponse] = []
    non_qualified: list[NonQualifiedLenderResponse] = []
    diagnostics: list[str] = []
    message: Optional[str] = None

    @classmethod
    def from_result(
        cls,
        result: ClassificationResult,
        include_diagnostics: bool = False,
    ) -> "ScreeningResponse":
        """
        Build the response in display order.

        Args:
            result: Classification output
            include_diagnostics: Whether to expose processing errors

        Returns:
            ScreeningResponse with tiers and non-qualified lenders sorted
        """
        tiers = [
            TierGroupResponse(
                tier=group.tier,
                label=group.label,
                lenders=[
                    QualifiedLenderResponse(
                        lender_name=lender.name,
                        tier=lender.tier,
                        record=lender.record.to_dict(),
                    )
                    for lender in group.lenders
                ],
            )
            for group in ResultPresenter.group_by_tier(result)
        ]

        non_qualified = [
            NonQualifiedLenderResponse(
                lender=item.lender,
                blocking_rule=item.blocking_rule,
                rule_type=item.rule_type,
            )
            for item in ResultPresenter.sorted_non_qualified(result)
        ]

        message = None
        if not result.qualified:
            message = "No qualified lenders found. Please check your criteria or CSV data."

        return cls(
            summary=ScreeningSummary(
                qualified=len(result.qualified),
                non_qualified=len(result.non_qualified),
                auto_dropped=result.auto_dropped_count,
                total=result.total_records,
            ),
            tiers=tiers,
            non_qualified=non_qualified,
            diagnostics=list(result.diagnostics) if include_diagnostics else [],
            message=message,
        )


class HealthResponse(BaseModel):
    """Schema for the health check."""

    status: str
    api: str
    details: Optional[dict[str, Any]] = None
