"""Tests for the screening service and result presenter."""

import pytest

from lender_screen.core.enums import RuleType
from lender_screen.core.exceptions import FormatError
from lender_screen.models.domain.lender import LenderRecord
from lender_screen.models.domain.result import (
    ClassificationResult,
    NonQualifiedLender,
    QualifiedLender,
)
from lender_screen.models.schemas.screening import ScreeningResponse
from lender_screen.services import ResultPresenter, ScreeningService
from lender_screen.services.result_presenter import tier_label, tier_sort_key


def _qualified(name: str, tier: str) -> QualifiedLender:
    return QualifiedLender(record=LenderRecord.from_values({"Lender Name": name}), tier=tier)


class TestResultPresenter:
    def test_tier_order(self):
        tiers = ["B", "10", "Unknown", "2", "a"]
        assert sorted(tiers, key=tier_sort_key) == ["2", "10", "a", "B", "Unknown"]

    def test_tier_labels(self):
        assert tier_label("1") == "Tier 1"
        assert tier_label("Unknown") == "No Tier Specified"

    def test_group_by_tier_sorts_names(self):
        result = ClassificationResult(
            qualified=[
                _qualified("Zeta Funding", "1"),
                _qualified("Other Capital", "Unknown"),
                _qualified("Alpha Funding", "1"),
                _qualified("Mid Capital", "2"),
            ],
            total_records=4,
        )

        groups = ResultPresenter.group_by_tier(result)

        assert [g.tier for g in groups] == ["1", "2", "Unknown"]
        assert [l.name for l in groups[0].lenders] == ["Alpha Funding", "Zeta Funding"]
        assert groups[2].label == "No Tier Specified"

    def test_non_qualified_sorted_by_name(self):
        result = ClassificationResult(
            non_qualified=[
                NonQualifiedLender("beta", "Position - Positions 1-1", RuleType.POSITION),
                NonQualifiedLender("Alpha", "Sole Prop - Not accepted", RuleType.SOLE_PROP),
            ],
            total_records=2,
        )
        assert [n.lender for n in ResultPresenter.sorted_non_qualified(result)] == ["Alpha", "beta"]


class TestScreeningService:
    def test_screen_sample(self, sample_csv, criteria):
        result = ScreeningService().screen(sample_csv, criteria)
        assert len(result.qualified) == 4
        assert len(result.non_qualified) == 1
        assert result.auto_dropped_count == 2

    def test_invalid_table(self, criteria):
        with pytest.raises(FormatError):
            ScreeningService().screen("Lender Name,pos_min", criteria)

    def test_response_in_display_order(self, sample_csv, criteria):
        result = ScreeningService().screen(sample_csv, criteria)
        response = ScreeningResponse.from_result(result)

        assert response.summary.qualified == 4
        assert response.summary.total == 7
        assert [t.label for t in response.tiers] == ["Tier 1", "Tier 2", "No Tier Specified"]
        assert [l.lender_name for l in response.tiers[0].lenders] == ["Corp Capital", "Lexio Capital"]
        assert response.non_qualified[0].rule_type == RuleType.MINIMUM_REQUIREMENTS
        assert response.message is None

    def test_response_message_when_nothing_qualifies(self, criteria):
        response = ScreeningResponse.from_result(ClassificationResult(auto_dropped_count=1, total_records=1))
        assert response.message.startswith("No qualified lenders found")

    def test_diagnostics_hidden_unless_requested(self):
        result = ClassificationResult(auto_dropped_count=1, diagnostics=["Row 1: boom"], total_records=1)
        assert ScreeningResponse.from_result(result).diagnostics == []
        assert ScreeningResponse.from_result(result, include_diagnostics=True).diagnostics == ["Row 1: boom"]
