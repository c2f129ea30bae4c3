"""
Tests for the per-lender classification state machine.
"""

from typing import Optional

import pytest

from lender_screen.core.enums import Classification, DropReason, RuleType
from lender_screen.models.domain.context import ScreeningContext
from lender_screen.services.rule_engine import (
    Classifier,
    EvaluationContext,
    RuleEngine,
    RuleEvaluator,
    classify,
)
from lender_screen.services.rule_engine.classifier import structural_drop_reason
from lender_screen.services.table_parser import parse


class ExplodingEvaluator(RuleEvaluator):
    """Evaluator that fails for one lender name."""

    rule_type = RuleType.INDUSTRY

    def __init__(self, target: str):
        self.target = target

    def evaluate(self, context: EvaluationContext) -> Optional[str]:
        if context.lender.name == self.target:
            raise RuntimeError("malformed cell")
        return None


class TestStructuralValidation:
    @pytest.mark.parametrize(
        "name, reason",
        [
            ("", DropReason.BLANK_NAME),
            ("A", DropReason.BLANK_NAME),
            ("1234", DropReason.INVALID_NAME),
            ("$25,000 funded", DropReason.INVALID_NAME),
            ("TOTAL", DropReason.INVALID_NAME),
            ("Monthly Summary", DropReason.INVALID_NAME),
        ],
    )
    def test_invalid_names(self, make_lender, name, reason):
        assert structural_drop_reason(make_lender(name)) == reason

    def test_numeric_name_cell(self, make_lender):
        assert structural_drop_reason(make_lender(1234)) == DropReason.INVALID_NAME

    @pytest.mark.parametrize(
        "columns",
        [{"pos_min": "N/A"}, {"pos_max": ""}, {"pos_min": "1st"}],
    )
    def test_missing_position_bounds(self, make_lender, columns):
        lender = make_lender("Acme Funding", **columns)
        assert structural_drop_reason(lender) == DropReason.MISSING_POSITION_BOUNDS

    def test_valid_row(self, make_lender):
        assert structural_drop_reason(make_lender("Acme Funding")) is None

    def test_non_ascii_digit_name_is_not_numeric(self, make_lender):
        assert structural_drop_reason(make_lender("\u0661\u0662\u0663\u0664")) is None


class TestClassifyLender:
    def test_purely_numeric_name_is_auto_dropped(self, make_lender, criteria):
        lender = make_lender("1234", pos_min=1, pos_max=5)
        outcome = Classifier().classify_lender(lender, criteria)
        assert outcome.classification == Classification.AUTO_DROPPED

    def test_lexio_trucking_scenario(self, make_lender, make_criteria):
        lender = make_lender("Lexio Capital", pos_min=1, pos_max=4)
        criteria = make_criteria(industry="trucking", requested_position=3)
        outcome = Classifier().classify_lender(lender, criteria)
        assert outcome.classification == Classification.NON_QUALIFIED
        assert outcome.failure.reason == "Industry - Trucking 1st-2nd position only"
        assert outcome.failure.rule_type == RuleType.CUSTOM_RESTRICTION

    def test_qualified(self, make_lender, criteria):
        outcome = Classifier().classify_lender(make_lender("Acme Funding"), criteria)
        assert outcome.classification == Classification.QUALIFIED


class TestClassify:
    def test_sample_partition(self, sample_csv, criteria):
        records = parse(sample_csv)
        result = classify(records, criteria)

        assert [q.name for q in result.qualified] == [
            "Lexio Capital",
            "Fast Funds",
            "Corp Capital",
            "Green Leaf Funding",
        ]
        assert [(n.lender, n.blocking_rule) for n in result.non_qualified] == [
            ("Strict Lender", "Revenue - Min $50,000"),
        ]
        assert result.auto_dropped_count == 2
        assert result.total_records == 7
        assert result.is_complete
        assert result.diagnostics == []

    def test_sole_prop_partition(self, sample_csv, make_criteria):
        result = classify(parse(sample_csv), make_criteria(is_sole_prop=True))
        blocked = {n.lender: n.blocking_rule for n in result.non_qualified}
        assert blocked["Corp Capital"] == "Sole Prop - Not accepted"
        assert result.is_complete

    def test_tiers(self, sample_csv, criteria):
        result = classify(parse(sample_csv), criteria)
        assert {q.name: q.tier for q in result.qualified} == {
            "Lexio Capital": "1",
            "Fast Funds": "2",
            "Corp Capital": "1",
            "Green Leaf Funding": "Unknown",
        }

    def test_every_row_lands_in_one_bucket(self, make_lender, make_criteria):
        lenders = [
            make_lender("Acme Funding"),
            make_lender("Tight Funding", pos_min=1, pos_max=1),
            make_lender("Totals"),
            make_lender("X"),
            make_lender("No Bounds", pos_min=""),
            make_lender("Picky Funding", Min_FICO=800),
        ]
        result = classify(lenders, make_criteria(fico=700))
        assert len(result.qualified) == 1
        assert len(result.non_qualified) == 2
        assert result.auto_dropped_count == 3
        assert result.is_complete

    def test_evaluation_error_drops_lender_and_continues(self, make_lender, criteria):
        engine = RuleEngine(chain=(ExplodingEvaluator("Broken Funding"),))
        lenders = [make_lender("Acme Funding"), make_lender("Broken Funding"), make_lender("Beta Funding")]

        result = Classifier(rule_engine=engine).classify(lenders, criteria)

        assert [q.name for q in result.qualified] == ["Acme Funding", "Beta Funding"]
        assert result.auto_dropped_count == 1
        assert result.diagnostics == ["Row 2: malformed cell"]
        assert result.is_complete

    def test_debug_logs_processing_errors(self, make_lender, criteria, caplog):
        engine = RuleEngine(chain=(ExplodingEvaluator("Broken Funding"),))
        classifier = Classifier(ScreeningContext(debug=True), rule_engine=engine)

        with caplog.at_level("WARNING"):
            classifier.classify([make_lender("Broken Funding")], criteria)

        assert "Row 1: malformed cell" in caplog.text

    def test_evaluation_error_logs_drop_reason(self, make_lender, criteria, caplog):
        engine = RuleEngine(chain=(ExplodingEvaluator("Broken Funding"),))

        with caplog.at_level("DEBUG", logger="lender_screen"):
            Classifier(rule_engine=engine).classify([make_lender("Broken Funding")], criteria)

        assert f"Row 1 auto-dropped: {DropReason.EVALUATION_ERROR.value}" in caplog.text

    def test_deterministic_and_does_not_mutate_input(self, sample_csv, criteria):
        records = parse(sample_csv)
        snapshot = [r.to_dict() for r in records]

        first = classify(records, criteria)
        second = classify(records, criteria)

        assert first == second
        assert [r.to_dict() for r in records] == snapshot

    def test_empty_dataset(self, criteria):
        result = classify([], criteria)
        assert result.total_records == 0
        assert result.is_complete
