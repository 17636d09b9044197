"""Source reliability scoring.

Looks for markers of where a text got its information. Credible markers
(.edu/.gov domains, wire services, peer review, journals, universities) add
15 each; unreliable markers (blogs, social posts, anonymous or leaked
sources, "exclusive") subtract 10 each. Text with no attribution verb at all
loses a further 20. Starts at 60, clamped to 0-100.
"""

from typing import Optional

from loguru import logger

from fakenews_detector.config.scoring_rules import (
    MISSING_ATTRIBUTION_PENALTY,
    SOURCE_BASELINE,
    RuleCategory,
)
from fakenews_detector.scoring.rule_matcher import FactorScore, RuleMatcher
from fakenews_detector.scoring.text_signals import has_attribution


class SourceReliabilityAnalyzer:
    """
    Scores the reliability of the sources a text refers to.

    Only textual markers are considered. The text is not fetched, and no
    domain reputation lookup is made.
    """

    CATEGORIES = (RuleCategory.CREDIBLE_SOURCE, RuleCategory.UNRELIABLE_SOURCE)

    def __init__(self, matcher: Optional[RuleMatcher] = None):
        self.matcher = matcher or RuleMatcher()
        self._logger = logger.bind(component="SourceReliabilityAnalyzer")

    def analyze(self, text: str) -> FactorScore:
        """
        Compute the source reliability score.

        Args:
            text: Raw input text

        Returns:
            FactorScore with matched credible/unreliable rules
        """
        attributed = has_attribution(text)

        result = self.matcher.score(
            text,
            baseline=SOURCE_BASELINE,
            categories=self.CATEGORIES,
            adjustment=0 if attributed else -MISSING_ATTRIBUTION_PENALTY,
            details={"attribution": attributed},
        )

        self._logger.debug(
            f"Source reliability score: {result.score}",
            credible=len(result.matched(RuleCategory.CREDIBLE_SOURCE)),
            unreliable=len(result.matched(RuleCategory.UNRELIABLE_SOURCE)),
            attribution=attributed,
        )
        return result


__all__ = ["SourceReliabilityAnalyzer"]
