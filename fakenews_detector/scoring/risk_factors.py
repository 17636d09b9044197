"""Risk factor detection using independent checks.

Each check maps to exactly one label, so a report never repeats a label.
Labels are emitted in the fixed check order below, not by severity:

| # | Label                                  | Trigger                                   |
|---|----------------------------------------|-------------------------------------------|
| 1 | Suspicious language patterns detected  | language score < 50                       |
| 2 | Lack of factual substantiation         | factual score < 50                        |
| 3 | Clickbait-style language               | you won't believe / shocking / amazing    |
| 4 | Conspiracy-style rhetoric              | they don't want you to know / hidden truth / cover-up |
| 5 | Excessive capitalization               | caps ratio > 0.3                          |
| 6 | Excessive punctuation                  | run of two or more ! or ?                 |
| 7 | No attribution to sources              | no attribution verb AND length > 100      |
"""

from dataclasses import dataclass
from typing import Callable, List, Optional

from fakenews_detector.config.scoring_rules import (
    ATTRIBUTION_MIN_LENGTH,
    EXCESSIVE_CAPS_RATIO,
    RISK_CLICKBAIT_PATTERN,
    RISK_CONSPIRACY_PATTERN,
)
from fakenews_detector.scoring.text_signals import (
    caps_ratio,
    has_attribution,
    has_punctuation_run,
    text_length,
)

LOW_SCORE_THRESHOLD = 50

SUSPICIOUS_LANGUAGE = "Suspicious language patterns detected"
LACK_OF_SUBSTANTIATION = "Lack of factual substantiation"
CLICKBAIT_LANGUAGE = "Clickbait-style language"
CONSPIRACY_RHETORIC = "Conspiracy-style rhetoric"
EXCESSIVE_CAPITALIZATION = "Excessive capitalization"
EXCESSIVE_PUNCTUATION = "Excessive punctuation"
NO_ATTRIBUTION = "No attribution to sources"


@dataclass(frozen=True)
class RiskCheck:
    """A labelled predicate over (text, language_score, factual_score)."""

    label: str
    triggered: Callable[[str, int, int], bool]


RISK_CHECKS: List[RiskCheck] = [
    RiskCheck(SUSPICIOUS_LANGUAGE, lambda text, language, factual: language < LOW_SCORE_THRESHOLD),
    RiskCheck(LACK_OF_SUBSTANTIATION, lambda text, language, factual: factual < LOW_SCORE_THRESHOLD),
    RiskCheck(CLICKBAIT_LANGUAGE, lambda text, language, factual: bool(RISK_CLICKBAIT_PATTERN.search(text))),
    RiskCheck(CONSPIRACY_RHETORIC, lambda text, language, factual: bool(RISK_CONSPIRACY_PATTERN.search(text))),
    RiskCheck(EXCESSIVE_CAPITALIZATION, lambda text, language, factual: caps_ratio(text) > EXCESSIVE_CAPS_RATIO),
    RiskCheck(EXCESSIVE_PUNCTUATION, lambda text, language, factual: has_punctuation_run(text)),
    RiskCheck(
        NO_ATTRIBUTION,
        lambda text, language, factual: (
            not has_attribution(text) and text_length(text) > ATTRIBUTION_MIN_LENGTH
        ),
    ),
]


class RiskFactorDetector:
    """
    Builds the ordered list of risk labels for a report.

    Usage:
        detector = RiskFactorDetector()
        labels = detector.detect(text, language_score=35, factual_score=60)
    """

    def __init__(self, checks: Optional[List[RiskCheck]] = None):
        self.checks: List[RiskCheck] = list(checks) if checks is not None else list(RISK_CHECKS)

    def detect(self, text: str, language_score: int, factual_score: int) -> List[str]:
        """
        Evaluate every check in order.

        Args:
            text: Raw input text
            language_score: Language pattern score already computed for text
            factual_score: Factual consistency score already computed for text

        Returns:
            Labels of triggered checks, in check order
        """
        return [
            check.label
            for check in self.checks
            if check.triggered(text, language_score, factual_score)
        ]


__all__ = [
    "RiskCheck",
    "RiskFactorDetector",
    "RISK_CHECKS",
    "SUSPICIOUS_LANGUAGE",
    "LACK_OF_SUBSTANTIATION",
    "CLICKBAIT_LANGUAGE",
    "CONSPIRACY_RHETORIC",
    "EXCESSIVE_CAPITALIZATION",
    "EXCESSIVE_PUNCTUATION",
    "NO_ATTRIBUTION",
]
