"""Factual consistency scoring.

Starts at 75. Numbers without a cited source cost 25, every absolute
statement rule costs 10 and every conspiracy rule costs 15.
"""

from typing import Optional

from loguru import logger

from fakenews_detector.config.scoring_rules import (
    FACTUAL_BASELINE,
    UNSOURCED_NUMBER_PENALTY,
    RuleCategory,
)
from fakenews_detector.scoring.rule_matcher import FactorScore, RuleMatcher
from fakenews_detector.scoring.text_signals import has_numeric_claim, has_source_marker


class FactualConsistencyAnalyzer:
    """Scores whether claims in a text are substantiated and measured."""

    CATEGORIES = (RuleCategory.ABSOLUTE, RuleCategory.CONSPIRACY)

    def __init__(self, matcher: Optional[RuleMatcher] = None):
        self.matcher = matcher or RuleMatcher()
        self._logger = logger.bind(component="FactualConsistencyAnalyzer")

    def analyze(self, text: str) -> FactorScore:
        numeric_claim = has_numeric_claim(text)
        source_marker = has_source_marker(text)
        unsourced_numbers = numeric_claim and not source_marker

        result = self.matcher.score(
            text,
            baseline=FACTUAL_BASELINE,
            categories=self.CATEGORIES,
            adjustment=-UNSOURCED_NUMBER_PENALTY if unsourced_numbers else 0,
            details={
                "numeric_claim": numeric_claim,
                "source_marker": source_marker,
                "unsourced_numbers": unsourced_numbers,
            },
        )

        self._logger.debug(
            f"Factual consistency score: {result.score}",
            matched=[rule.pattern for rule in result.matched_rules],
            unsourced_numbers=unsourced_numbers,
        )
        return result


__all__ = ["FactualConsistencyAnalyzer"]
