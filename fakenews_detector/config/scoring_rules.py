"""Scoring rule tables and fixed constants for credibility analysis.

Every regex heuristic the engine applies is listed here as a PatternRule so
each rule can be audited and tested on its own. Weights are signed score
deltas applied once per matching rule (a rule matching several times in the
same text still counts once).

Sub-score baselines:
1. Language pattern: 80
2. Factual consistency: 75
3. Source reliability: 60

Overall score weights: language 0.3, sentiment 0.2, factual 0.3, source 0.2.

These values are not calibrated against any dataset. They are fixed so that
scores stay reproducible; do not tune them.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple


class RuleCategory(str, Enum):
    """Category of a pattern rule, one per sub-score adjustment."""

    CLICKBAIT = "clickbait"
    EMOTIONAL = "emotional"
    ABSOLUTE = "absolute"
    CONSPIRACY = "conspiracy"
    CREDIBLE_SOURCE = "credible_source"
    UNRELIABLE_SOURCE = "unreliable_source"


@dataclass(frozen=True)
class PatternRule:
    """A single regex heuristic.

    Attributes:
        pattern: Regular expression source
        weight: Signed score delta applied when the pattern matches
        category: Which sub-score family the rule belongs to
        ignore_case: Match case-insensitively (default True)
    """

    pattern: str
    weight: int
    category: RuleCategory
    ignore_case: bool = True
    regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        flags = re.IGNORECASE if self.ignore_case else 0
        object.__setattr__(self, "regex", re.compile(self.pattern, flags))

    def matches(self, text: str) -> bool:
        """Return True if the pattern occurs anywhere in text."""
        return self.regex.search(text) is not None


# Sub-score baselines
LANGUAGE_BASELINE: int = 80
FACTUAL_BASELINE: int = 75
SOURCE_BASELINE: int = 60

# Single-condition penalties
EXCESSIVE_CAPS_RATIO: float = 0.3
EXCESSIVE_CAPS_PENALTY: int = 20
PUNCTUATION_RUN_PENALTY: int = 15
UNSOURCED_NUMBER_PENALTY: int = 25
MISSING_ATTRIBUTION_PENALTY: int = 20

# Risk factor "No attribution to sources" only fires on texts longer than this
ATTRIBUTION_MIN_LENGTH: int = 100

SCORE_MIN: int = 0
SCORE_MAX: int = 100

# Overall score weights (applied in this order)
FACTOR_WEIGHTS: Dict[str, float] = {
    "language_pattern": 0.3,
    "sentiment_analysis": 0.2,
    "factual_consistency": 0.3,
    "source_reliability": 0.2,
}

# Classification thresholds (inclusive)
TRUSTWORTHY_THRESHOLD: int = 75
MISLEADING_THRESHOLD: int = 40

# Confidence = min(round(|score - 50| * 2), CONFIDENCE_CAP)
CONFIDENCE_MIDPOINT: int = 50
CONFIDENCE_CAP: int = 95

# Neutral default when no sentiment classifier is available
NEUTRAL_SENTIMENT_LABEL: str = "NEUTRAL"
NEUTRAL_SENTIMENT_SCORE: float = 0.5

# Fallback analysis constants
FALLBACK_SENTIMENT_FACTOR: int = 60
FALLBACK_CONFIDENCE: int = 75
FALLBACK_RISK_SCORE: int = 60
FALLBACK_BASE: float = 70.0
FALLBACK_QUESTION_PENALTY: float = 5.0
FALLBACK_EXCLAMATION_PENALTY: float = 3.0
FALLBACK_WORDS_PER_POINT: float = 10.0
FALLBACK_MAX_WORD_BONUS: float = 15.0
FALLBACK_SCORE_RANGE: Tuple[float, float] = (30.0, 85.0)


# Single-condition patterns
UPPERCASE_PATTERN = re.compile(r"[A-Z]")
PUNCTUATION_RUN_PATTERN = re.compile(r"[!?]{2,}")
NUMERIC_CLAIM_PATTERN = re.compile(
    r"\d+%|\d+\.\d+%|\$\d+|\d+ (?:million|billion|thousand)", re.IGNORECASE
)
SOURCE_MARKER_PATTERN = re.compile(
    r"according to|source:|study shows|research indicates", re.IGNORECASE
)
ATTRIBUTION_VERB_PATTERN = re.compile(r"said|according|reported|stated", re.IGNORECASE)

# Risk factor checks use a narrower phrase set than the scoring rules
RISK_CLICKBAIT_PATTERN = re.compile(r"you won't believe|shocking|amazing", re.IGNORECASE)
RISK_CONSPIRACY_PATTERN = re.compile(
    r"they don't want you to know|hidden truth|cover.?up", re.IGNORECASE
)


SCORING_RULES: List[PatternRule] = [
    # Clickbait phrasing (language pattern score)
    PatternRule(r"you won't believe", -10, RuleCategory.CLICKBAIT),
    PatternRule(r"shocking", -10, RuleCategory.CLICKBAIT),
    PatternRule(r"amazing", -10, RuleCategory.CLICKBAIT),
    PatternRule(r"incredible", -10, RuleCategory.CLICKBAIT),
    PatternRule(r"unbelievable", -10, RuleCategory.CLICKBAIT),
    PatternRule(r"must see", -10, RuleCategory.CLICKBAIT),
    PatternRule(r"viral", -10, RuleCategory.CLICKBAIT),

    # Emotionally loaded words (language pattern score)
    PatternRule(r"devastating", -8, RuleCategory.EMOTIONAL),
    PatternRule(r"outrageous", -8, RuleCategory.EMOTIONAL),
    PatternRule(r"scandal", -8, RuleCategory.EMOTIONAL),
    PatternRule(r"explosive", -8, RuleCategory.EMOTIONAL),
    PatternRule(r"bombshell", -8, RuleCategory.EMOTIONAL),

    # Absolute statements (factual consistency score)
    PatternRule(r"always", -10, RuleCategory.ABSOLUTE),
    PatternRule(r"never", -10, RuleCategory.ABSOLUTE),
    PatternRule(r"everyone", -10, RuleCategory.ABSOLUTE),
    PatternRule(r"nobody", -10, RuleCategory.ABSOLUTE),
    PatternRule(r"all .* are", -10, RuleCategory.ABSOLUTE),
    PatternRule(r"completely", -10, RuleCategory.ABSOLUTE),
    PatternRule(r"totally", -10, RuleCategory.ABSOLUTE),

    # Conspiracy rhetoric (factual consistency score)
    PatternRule(r"they don't want you to know", -15, RuleCategory.CONSPIRACY),
    PatternRule(r"hidden truth", -15, RuleCategory.CONSPIRACY),
    PatternRule(r"cover.?up", -15, RuleCategory.CONSPIRACY),
    PatternRule(r"mainstream media", -15, RuleCategory.CONSPIRACY),
    PatternRule(r"wake up", -15, RuleCategory.CONSPIRACY),

    # Credible source indicators (source reliability score)
    PatternRule(r"\.edu", 15, RuleCategory.CREDIBLE_SOURCE, ignore_case=False),
    PatternRule(r"\.gov", 15, RuleCategory.CREDIBLE_SOURCE, ignore_case=False),
    PatternRule(r"reuters", 15, RuleCategory.CREDIBLE_SOURCE),
    PatternRule(r"associated press", 15, RuleCategory.CREDIBLE_SOURCE),
    PatternRule(r"bbc", 15, RuleCategory.CREDIBLE_SOURCE),
    PatternRule(r"peer.?reviewed", 15, RuleCategory.CREDIBLE_SOURCE),
    PatternRule(r"journal", 15, RuleCategory.CREDIBLE_SOURCE),
    PatternRule(r"university", 15, RuleCategory.CREDIBLE_SOURCE),

    # Unreliable source indicators (source reliability score)
    PatternRule(r"blog", -10, RuleCategory.UNRELIABLE_SOURCE),
    PatternRule(r"facebook post", -10, RuleCategory.UNRELIABLE_SOURCE),
    PatternRule(r"twitter", -10, RuleCategory.UNRELIABLE_SOURCE),
    PatternRule(r"anonymous source", -10, RuleCategory.UNRELIABLE_SOURCE),
    PatternRule(r"leaked", -10, RuleCategory.UNRELIABLE_SOURCE),
    PatternRule(r"exclusive", -10, RuleCategory.UNRELIABLE_SOURCE),
]


def rules_for(category: RuleCategory) -> List[PatternRule]:
    """Return the rules of one category, in table order."""
    return [rule for rule in SCORING_RULES if rule.category == category]


__all__ = [
    "RuleCategory",
    "PatternRule",
    "SCORING_RULES",
    "rules_for",
    "FACTOR_WEIGHTS",
    "TRUSTWORTHY_THRESHOLD",
    "MISLEADING_THRESHOLD",
]
