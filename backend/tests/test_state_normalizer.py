"""Tests for US state normalization."""

import pytest

from lender_screen.services.state_normalizer import (
    STATE_CODES,
    STATE_NAMES,
    to_code,
    to_full_name,
)


class TestToCode:
    def test_full_name(self):
        assert to_code("New York") == "ny"
        assert to_code("  north CAROLINA ") == "nc"

    def test_code_passes_through_lowercased(self):
        assert to_code(" IL ") == "il"

    def test_unknown_value_is_lowered_and_trimmed(self):
        assert to_code("  Ontario ") == "ontario"

    @pytest.mark.parametrize("value", ["", None])
    def test_empty(self, value):
        assert to_code(value) == ""


class TestToFullName:
    def test_code_to_title_case(self):
        assert to_full_name("nh") == "New Hampshire"
        assert to_full_name(" IL") == "Illinois"

    def test_full_name_is_not_a_code(self):
        # Only codes are expanded; names come back untouched
        assert to_full_name("illinois") == "illinois"

    def test_unknown_value_is_returned_unchanged(self):
        assert to_full_name("Ontario ") == "Ontario "

    @pytest.mark.parametrize("value", ["", None])
    def test_empty(self, value):
        assert to_full_name(value) == ""


class TestStateTables:
    def test_covers_fifty_states(self):
        assert len(STATE_CODES) == 50
        assert len(STATE_NAMES) == 50

    @pytest.mark.parametrize("code", sorted(STATE_NAMES))
    def test_round_trip(self, code):
        assert to_code(to_full_name(code)) == code
        assert to_code(to_full_name(code.upper())) == code
