"""Pydantic schemas for API validation and serialization."""

from lender_screen.models.schemas.screening import (
    HealthResponse,
    MerchantCriteriaRequest,
    NonQualifiedLenderResponse,
    QualifiedLenderResponse,
    ScreeningRequest,
    ScreeningResponse,
    ScreeningSummary,
    TierGroupResponse,
)

__all__ = [
    # Request schemas
    "MerchantCriteriaRequest",
    "ScreeningRequest",
    # Response schemas
    "QualifiedLenderResponse",
    "TierGroupResponse",
    "NonQualifiedLenderResponse",
    "ScreeningSummary",
    "ScreeningResponse",
    "HealthResponse",
]
