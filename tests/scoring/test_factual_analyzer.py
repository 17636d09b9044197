"""Tests for FactualConsistencyAnalyzer."""

import pytest

from fakenews_detector.config.scoring_rules import RuleCategory
from fakenews_detector.scoring import FactualConsistencyAnalyzer


@pytest.fixture
def analyzer():
    return FactualConsistencyAnalyzer()


class TestUnsourcedNumbers:
    """Numeric claims cost 25 unless a source marker is present."""

    def test_plain_text_scores_baseline(self, analyzer):
        assert analyzer.analyze("The council approved the budget.").score == 75

    @pytest.mark.parametrize(
        "text",
        [
            "Crime rose 45% last year.",
            "Inflation hit 12.5% in March.",
            "Drivers face a $500 fine.",
            "Over 3 million people signed.",
            "Some 40 thousand fans attended.",
            "The deal was worth 2 billion.",
        ],
    )
    def test_numeric_claim_without_source(self, analyzer, text):
        result = analyzer.analyze(text)
        assert result.details["unsourced_numbers"] is True
        assert result.score == 50

    @pytest.mark.parametrize(
        "marker",
        ["according to police data", "source: census bureau", "a study shows", "research indicates"],
    )
    def test_numeric_claim_with_source(self, analyzer, marker):
        result = analyzer.analyze(f"Crime rose 45% last year, {marker}.")
        assert result.details["unsourced_numbers"] is False
        assert result.score == 75

    def test_bare_numbers_are_not_claims(self, analyzer):
        result = analyzer.analyze("The meeting starts at 10 on day 3.")
        assert result.details["numeric_claim"] is False
        assert result.score == 75


class TestAbsoluteAndConspiracyRules:
    """Tests for absolute language and conspiracy rhetoric."""

    def test_absolute_statements(self, analyzer):
        result = analyzer.analyze("Politicians always lie and never listen.")
        assert len(result.matched(RuleCategory.ABSOLUTE)) == 2
        assert result.score == 55

    def test_all_are_pattern(self, analyzer):
        result = analyzer.analyze("All of them are corrupt.")
        assert [rule.pattern for rule in result.matched_rules] == ["all .* are"]
        assert result.score == 65

    def test_substring_match_is_intentional(self, analyzer):
        """'nevertheless' contains 'never' and is penalised like a standalone word."""
        assert analyzer.analyze("Nevertheless, the hall was painted.").score == 65

    def test_conspiracy_rhetoric(self, analyzer):
        result = analyzer.analyze("Wake up! The mainstream media hides the hidden truth.")
        assert len(result.matched(RuleCategory.CONSPIRACY)) == 3
        assert result.score == 30

    def test_clamped_to_zero(self, analyzer):
        text = (
            "Wake up, they don't want you to know the hidden truth about the cover-up "
            "the mainstream media always and never tells everyone, nobody is completely "
            "totally safe"
        )
        result = analyzer.analyze(text)
        assert result.raw_score < 0
        assert result.score == 0
