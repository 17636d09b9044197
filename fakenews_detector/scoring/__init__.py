"""Credibility scoring components.

Components:
    CredibilityEngine: Combines the factors into an AnalysisResult
    LanguagePatternAnalyzer: Caps, punctuation runs, clickbait, emotional words
    FactualConsistencyAnalyzer: Unsourced numbers, absolutes, conspiracy rhetoric
    SourceReliabilityAnalyzer: Credible vs unreliable source markers, attribution
    RiskFactorDetector: Ordered human-readable risk labels
    RuleMatcher: Applies the PatternRule table

Usage:
    from fakenews_detector.scoring import analyze

    result = analyze("SHOCKING!! You won't believe this")
    print(result.classification.value, result.risk_factors)
"""

from fakenews_detector.scoring.engine import CredibilityEngine, analyze, get_engine
from fakenews_detector.scoring.factual_analyzer import FactualConsistencyAnalyzer
from fakenews_detector.scoring.language_analyzer import LanguagePatternAnalyzer
from fakenews_detector.scoring.risk_factors import RiskFactorDetector
from fakenews_detector.scoring.rule_matcher import FactorScore, RuleMatcher
from fakenews_detector.scoring.source_analyzer import SourceReliabilityAnalyzer

__all__ = [
    "CredibilityEngine",
    "analyze",
    "get_engine",
    "FactualConsistencyAnalyzer",
    "LanguagePatternAnalyzer",
    "RiskFactorDetector",
    "FactorScore",
    "RuleMatcher",
    "SourceReliabilityAnalyzer",
]
