"""Apply PatternRule tables to text.

Each rule contributes its weight at most once, no matter how many times its
pattern occurs. Matched rules are kept on the FactorScore so callers can see
exactly which heuristics moved a score.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from fakenews_detector.config.scoring_rules import (
    SCORING_RULES,
    PatternRule,
    RuleCategory,
)
from fakenews_detector.scoring.text_signals import clamp_score


@dataclass
class FactorScore:
    """Score for one credibility factor.

    Attributes:
        score: Clamped score 0-100
        raw_score: Score before clamping (may fall outside 0-100)
        matched_rules: Pattern rules that fired, in table order
        details: Single-condition checks and their outcome
    """

    score: int
    raw_score: int
    matched_rules: List[PatternRule] = field(default_factory=list)
    details: Dict[str, Any] = field(default_factory=dict)

    def matched(self, category: RuleCategory) -> List[PatternRule]:
        """Matched rules of one category."""
        return [rule for rule in self.matched_rules if rule.category == category]


class RuleMatcher:
    """
    Finds which rules of a category match a text.

    Usage:
        matcher = RuleMatcher()
        hits = matcher.match("Shocking and amazing!", RuleCategory.CLICKBAIT)
        delta = matcher.total_weight(hits)  # -20

    Attributes:
        rules: Rule table to evaluate (defaults to SCORING_RULES)
    """

    def __init__(self, rules: Optional[Iterable[PatternRule]] = None):
        self.rules: List[PatternRule] = list(rules) if rules is not None else list(SCORING_RULES)

    def match(self, text: str, *categories: RuleCategory) -> List[PatternRule]:
        """Return rules in the given categories whose pattern occurs in text."""
        return [
            rule
            for rule in self.rules
            if rule.category in categories and rule.matches(text)
        ]

    @staticmethod
    def total_weight(matched: Iterable[PatternRule]) -> int:
        return sum(rule.weight for rule in matched)

    def score(
        self,
        text: str,
        baseline: int,
        categories: Iterable[RuleCategory],
        adjustment: int = 0,
        details: Optional[Dict[str, Any]] = None,
    ) -> FactorScore:
        """
        Score text from a baseline plus rule weights plus a fixed adjustment.

        Args:
            text: Input text
            baseline: Starting score
            categories: Rule categories that feed this factor
            adjustment: Extra delta from single-condition checks
            details: Outcome of those checks, stored for debugging

        Returns:
            FactorScore clamped to 0-100
        """
        matched = self.match(text, *categories)
        raw = baseline + adjustment + self.total_weight(matched)
        return FactorScore(
            score=clamp_score(raw),
            raw_score=raw,
            matched_rules=matched,
            details=details or {},
        )


__all__ = ["FactorScore", "RuleMatcher"]
