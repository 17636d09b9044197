"""Language pattern scoring.

Starts at 80 and subtracts for sensationalist writing:

| Signal                 | Check                                 | Delta        |
|------------------------|---------------------------------------|--------------|
| Excessive capitals     | [A-Z] count / length > 0.3            | -20          |
| Punctuation run        | two or more consecutive ! or ?        | -15          |
| Clickbait phrasing     | CLICKBAIT rules                       | -10 per rule |
| Emotional language     | EMOTIONAL rules                       | -8 per rule  |

Result is clamped to 0-100.
"""

from typing import Optional

from loguru import logger

from fakenews_detector.config.scoring_rules import (
    EXCESSIVE_CAPS_PENALTY,
    EXCESSIVE_CAPS_RATIO,
    LANGUAGE_BASELINE,
    PUNCTUATION_RUN_PENALTY,
    RuleCategory,
)
from fakenews_detector.scoring.rule_matcher import FactorScore, RuleMatcher
from fakenews_detector.scoring.text_signals import caps_ratio, has_punctuation_run


class LanguagePatternAnalyzer:
    """
    Scores how sensationalist a text reads.

    Usage:
        analyzer = LanguagePatternAnalyzer()
        result = analyzer.analyze("SHOCKING news!!")
        print(result.score)
    """

    CATEGORIES = (RuleCategory.CLICKBAIT, RuleCategory.EMOTIONAL)

    def __init__(self, matcher: Optional[RuleMatcher] = None):
        self.matcher = matcher or RuleMatcher()
        self._logger = logger.bind(component="LanguagePatternAnalyzer")

    def analyze(self, text: str) -> FactorScore:
        """
        Compute the language pattern score.

        Args:
            text: Raw input text

        Returns:
            FactorScore with matched clickbait/emotional rules
        """
        ratio = caps_ratio(text)
        excessive_caps = ratio > EXCESSIVE_CAPS_RATIO
        punctuation_run = has_punctuation_run(text)

        adjustment = 0
        if excessive_caps:
            adjustment -= EXCESSIVE_CAPS_PENALTY
        if punctuation_run:
            adjustment -= PUNCTUATION_RUN_PENALTY

        result = self.matcher.score(
            text,
            baseline=LANGUAGE_BASELINE,
            categories=self.CATEGORIES,
            adjustment=adjustment,
            details={
                "caps_ratio": ratio,
                "excessive_caps": excessive_caps,
                "punctuation_run": punctuation_run,
            },
        )

        self._logger.debug(
            f"Language pattern score: {result.score}",
            matched=[rule.pattern for rule in result.matched_rules],
            caps_ratio=round(ratio, 3),
        )
        return result


__all__ = ["LanguagePatternAnalyzer"]
