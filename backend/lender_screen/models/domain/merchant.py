"""Merchant funding request under evaluation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MerchantCriteria:
    """
    Merchant criteria for one screening pass.

    Ranges are validated at the API boundary; the engine trusts these values.

    Attributes:
        requested_position: Funding position requested (1 = first position)
        tib: Time in business, in months
        monthly_revenue: Average monthly revenue
        fico: Owner FICO score
        state: State name or two-letter code as entered
        industry: Free-text industry description
        is_sole_prop: Whether the business is a sole proprietorship
    """

    requested_position: int
    tib: float
    monthly_revenue: float
    fico: int
    state: str
    industry: str
    is_sole_prop: bool = False
