"""Shared fixtures for lender screening tests."""

import pytest

from lender_screen.models.domain.lender import LenderRecord
from lender_screen.models.domain.merchant import MerchantCriteria

SAMPLE_CSV = """Lender Name,Tier,pos_min,pos_max,State_Restrictions,Prohibited_Industries,Other_Key_Requirements,Min_TIB_Months,Min_Monthly_Revenue,Min_FICO
Lexio Capital,1,1,4,,,,6,10000,550
Fast Funds,2,1,3,"CA, NY",,,12,15000,600
Corp Capital,1,1,5,,,Corp only,3,5000,500
Green Leaf Funding,,2,6,,"Cannabis, Firearms",,,,
Strict Lender,3,1,2,,,,24,50000,700
"Total",,,,,,,,,
Bad Row Lender,2,N/A,4,,,,,,
"""


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def make_criteria():
    """Factory for merchant criteria with sensible defaults."""

    def _make(**overrides) -> MerchantCriteria:
        values = {
            "requested_position": 2,
            "tib": 24,
            "monthly_revenue": 20000,
            "fico": 650,
            "state": "TX",
            "industry": "Retail",
            "is_sole_prop": False,
        }
        values.update(overrides)
        return MerchantCriteria(**values)

    return _make


@pytest.fixture
def make_lender():
    """Factory for lender records; pos_min/pos_max default to 1-10."""

    def _make(name: str = "Test Lender", **columns) -> LenderRecord:
        values = {"Lender Name": name, "pos_min": 1, "pos_max": 10}
        values.update(columns)
        return LenderRecord.from_values(values)

    return _make


@pytest.fixture
def criteria(make_criteria) -> MerchantCriteria:
    return make_criteria()
