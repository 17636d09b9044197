"""Raw text signals shared by the factor analyzers and risk detection.

All helpers are pure functions of the input text. Rounding is half-up
(``floor(x + 0.5)``) rather than Python's banker's rounding so that scores
match what the dashboard has always displayed (84.5 -> 85, not 84).
"""

import math

from fakenews_detector.config.scoring_rules import (
    ATTRIBUTION_VERB_PATTERN,
    NUMERIC_CLAIM_PATTERN,
    PUNCTUATION_RUN_PATTERN,
    SCORE_MAX,
    SCORE_MIN,
    SOURCE_MARKER_PATTERN,
    UPPERCASE_PATTERN,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float, low: int = SCORE_MIN, high: int = SCORE_MAX) -> int:
    """Clamp a score into [low, high]."""
    return int(max(low, min(high, value)))


def text_length(text: str) -> int:
    """
    Length in UTF-16 code units, the unit the dashboard has always measured in.

    Characters outside the Basic Multilingual Plane (most emoji) count as 2.
    """
    return len(text.encode("utf-16-le")) // 2


def caps_ratio(text: str) -> float:
    """
    Share of ASCII uppercase letters over the full text length.

    Length includes spaces and punctuation and is measured by text_length().
    Empty text has ratio 0.0.
    """
    if not text:
        return 0.0
    return len(UPPERCASE_PATTERN.findall(text)) / text_length(text)


def has_punctuation_run(text: str) -> bool:
    """True if two or more consecutive ``!``/``?`` characters appear."""
    return PUNCTUATION_RUN_PATTERN.search(text) is not None


def has_attribution(text: str) -> bool:
    """True if an attribution verb (said, according, reported, stated) appears."""
    return ATTRIBUTION_VERB_PATTERN.search(text) is not None


def has_numeric_claim(text: str) -> bool:
    """True for percentages, dollar amounts or counts in thousands/millions/billions."""
    return NUMERIC_CLAIM_PATTERN.search(text) is not None


def has_source_marker(text: str) -> bool:
    """True if the text cites where a claim comes from ("according to", "source:", ...)."""
    return SOURCE_MARKER_PATTERN.search(text) is not None


def word_count(text: str) -> int:
    """Number of pieces when splitting on single spaces (empty text counts as 1)."""
    return len(text.split(" "))


__all__ = [
    "round_half_up",
    "clamp_score",
    "text_length",
    "caps_ratio",
    "has_punctuation_run",
    "has_attribution",
    "has_numeric_claim",
    "has_source_marker",
    "word_count",
]
