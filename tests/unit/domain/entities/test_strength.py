"""Unit tests for the StrengthLevel enum."""

import pytest

from passgen.domain.entities import StrengthLevel
from passgen.domain.exceptions import UnknownStrengthError


class TestOrdering:
    """Strength levels are totally ordered by strictness."""

    def test_rank_order(self):
        assert StrengthLevel.LOW.rank < StrengthLevel.MEDIUM.rank < StrengthLevel.HIGH.rank

    def test_comparisons_follow_strictness(self):
        """Comparisons use strictness, not alphabetical order of the values."""
        assert StrengthLevel.LOW < StrengthLevel.MEDIUM < StrengthLevel.HIGH
        assert StrengthLevel.HIGH > StrengthLevel.MEDIUM
        assert StrengthLevel.MEDIUM >= StrengthLevel.MEDIUM
        assert StrengthLevel.LOW <= StrengthLevel.HIGH

    def test_sorted(self):
        levels = [StrengthLevel.HIGH, StrengthLevel.LOW, StrengthLevel.MEDIUM]
        assert sorted(levels) == [StrengthLevel.LOW, StrengthLevel.MEDIUM, StrengthLevel.HIGH]

    def test_str_is_value(self):
        assert str(StrengthLevel.HIGH) == "high"


class TestParse:
    """Boundary parsing of external strength input."""

    def test_parse_member_returns_member(self):
        assert StrengthLevel.parse(StrengthLevel.MEDIUM) is StrengthLevel.MEDIUM

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("low", StrengthLevel.LOW),
            ("Medium", StrengthLevel.MEDIUM),
            ("  HIGH ", StrengthLevel.HIGH),
        ],
    )
    def test_parse_strings(self, raw, expected):
        assert StrengthLevel.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["", "extreme", "lo w", None, 1])
    def test_parse_rejects_unknown(self, raw):
        with pytest.raises(UnknownStrengthError) as exc_info:
            StrengthLevel.parse(raw)
        assert exc_info.value.value == raw
        assert exc_info.value.code == "strength_unknown"

    def test_unknown_strength_is_value_error(self):
        with pytest.raises(ValueError):
            StrengthLevel.parse("ultra")
