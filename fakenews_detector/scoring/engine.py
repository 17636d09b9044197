"""Credibility scoring engine.

Combines four independent factor scores into a single credibility report:

    credibility = round(language * 0.3 + sentiment * 0.2 + factual * 0.3 + source * 0.2)

where ``sentiment`` is the classifier probability scaled to 0-100, inverted
for NEGATIVE labels. Weights and thresholds are fixed (see
fakenews_detector.config.scoring_rules).

If the sentiment classifier raises, the engine does not fail. It switches to
a fallback formula driven only by word and punctuation counts:

    credibility = clamp(70 - 5*questions - 3*exclamations + min(words/10, 15), 30, 85)

with sentiment pinned to 60 and confidence pinned to 75.

Usage:
    from fakenews_detector.scoring import CredibilityEngine

    engine = CredibilityEngine()
    result = engine.analyze("According to Reuters, ...")
    print(result.credibility_score, result.classification.value)
"""

import asyncio
from typing import Callable, Optional

from loguru import logger

from fakenews_detector.config.scoring_rules import (
    CONFIDENCE_CAP,
    CONFIDENCE_MIDPOINT,
    FACTOR_WEIGHTS,
    FALLBACK_BASE,
    FALLBACK_CONFIDENCE,
    FALLBACK_EXCLAMATION_PENALTY,
    FALLBACK_MAX_WORD_BONUS,
    FALLBACK_QUESTION_PENALTY,
    FALLBACK_RISK_SCORE,
    FALLBACK_SCORE_RANGE,
    FALLBACK_SENTIMENT_FACTOR,
    FALLBACK_WORDS_PER_POINT,
)
from fakenews_detector.data_management.schemas import (
    AnalysisResult,
    Classification,
    CredibilityFactors,
)
from fakenews_detector.scoring.factual_analyzer import FactualConsistencyAnalyzer
from fakenews_detector.scoring.language_analyzer import LanguagePatternAnalyzer
from fakenews_detector.scoring.risk_factors import RiskFactorDetector
from fakenews_detector.scoring.rule_matcher import RuleMatcher
from fakenews_detector.scoring.source_analyzer import SourceReliabilityAnalyzer
from fakenews_detector.scoring.text_signals import round_half_up, word_count
from fakenews_detector.sentiment import (
    NEUTRAL_PREDICTION,
    SentimentClassifier,
    SentimentPrediction,
    get_sentiment_classifier,
)


def sentiment_factor(prediction: SentimentPrediction) -> float:
    """
    Scale a sentiment prediction to 0-100 (unrounded).

    NEGATIVE predictions are inverted: a confident negative text scores low.
    """
    if prediction.is_negative:
        return (1 - prediction.score) * 100
    return prediction.score * 100


def confidence_for(score: int) -> int:
    """Distance from the uncertain midpoint, doubled and capped at 95."""
    return min(round_half_up(abs(score - CONFIDENCE_MIDPOINT) * 2), CONFIDENCE_CAP)


class CredibilityEngine:
    """
    Scores text credibility from heuristics plus optional sentiment.

    The engine holds no per-request state; analyze() is safe to call
    repeatedly and returns identical output for identical input as long as
    the sentiment classifier is deterministic.

    Attributes:
        language_analyzer: Language pattern factor
        factual_analyzer: Factual consistency factor
        source_analyzer: Source reliability factor
        risk_detector: Risk label builder
    """

    def __init__(
        self,
        sentiment_classifier: Optional[SentimentClassifier] = None,
        classifier_provider: Callable[[], Optional[SentimentClassifier]] = get_sentiment_classifier,
        matcher: Optional[RuleMatcher] = None,
    ):
        """
        Initialize the engine.

        Args:
            sentiment_classifier: Classifier to use. When None, the
                classifier_provider is asked on every analysis.
            classifier_provider: Accessor for the process-wide classifier
                (may return None when sentiment is unavailable)
            matcher: Shared rule matcher for the factor analyzers
        """
        matcher = matcher or RuleMatcher()
        self._sentiment_classifier = sentiment_classifier
        self._classifier_provider = classifier_provider
        self.language_analyzer = LanguagePatternAnalyzer(matcher)
        self.factual_analyzer = FactualConsistencyAnalyzer(matcher)
        self.source_analyzer = SourceReliabilityAnalyzer(matcher)
        self.risk_detector = RiskFactorDetector()
        self._logger = logger.bind(component="CredibilityEngine")

    def _get_classifier(self) -> Optional[SentimentClassifier]:
        if self._sentiment_classifier is not None:
            return self._sentiment_classifier
        return self._classifier_provider()

    def analyze(self, text: str) -> AnalysisResult:
        """
        Score a text.

        Args:
            text: Raw input text

        Returns:
            AnalysisResult. Uses the fallback formula if the sentiment
            classifier raises.
        """
        classifier = self._get_classifier()

        try:
            prediction = classifier.classify(text) if classifier else NEUTRAL_PREDICTION
        except Exception as e:
            self._logger.opt(exception=e).warning(
                "Sentiment analysis failed, using fallback analysis"
            )
            return self.fallback_analysis(text)

        language = self.language_analyzer.analyze(text).score
        factual = self.factual_analyzer.analyze(text).score
        source = self.source_analyzer.analyze(text).score
        sentiment = sentiment_factor(prediction)

        credibility_score = round_half_up(
            language * FACTOR_WEIGHTS["language_pattern"]
            + sentiment * FACTOR_WEIGHTS["sentiment_analysis"]
            + factual * FACTOR_WEIGHTS["factual_consistency"]
            + source * FACTOR_WEIGHTS["source_reliability"]
        )

        result = AnalysisResult(
            credibility_score=credibility_score,
            classification=Classification.from_score(credibility_score),
            factors=CredibilityFactors(
                language_pattern=language,
                sentiment_analysis=round_half_up(sentiment),
                factual_consistency=factual,
                source_reliability=source,
            ),
            risk_factors=self.risk_detector.detect(text, language, factual),
            confidence_level=confidence_for(credibility_score),
        )

        self._logger.info(
            f"Analysis complete: {result.classification.value} ({result.credibility_score})",
            sentiment_label=prediction.label,
            risk_count=len(result.risk_factors),
        )
        return result

    def fallback_analysis(self, text: str) -> AnalysisResult:
        """
        Deterministic report used when the sentiment classifier fails.

        Factor scores are still computed normally, but the credibility score
        comes from word and punctuation counts only. Risk factors are
        evaluated with language and factual scores pinned to 60, so only the
        text-driven checks can fire.

        Args:
            text: Raw input text

        Returns:
            AnalysisResult with used_fallback=True
        """
        questions = text.count("?")
        exclamations = text.count("!")
        words = word_count(text)

        low, high = FALLBACK_SCORE_RANGE
        raw_score = max(
            low,
            min(
                high,
                FALLBACK_BASE
                - questions * FALLBACK_QUESTION_PENALTY
                - exclamations * FALLBACK_EXCLAMATION_PENALTY
                + min(words / FALLBACK_WORDS_PER_POINT, FALLBACK_MAX_WORD_BONUS),
            ),
        )
        credibility_score = round_half_up(raw_score)

        result = AnalysisResult(
            credibility_score=credibility_score,
            classification=Classification.from_score(credibility_score),
            factors=CredibilityFactors(
                language_pattern=self.language_analyzer.analyze(text).score,
                sentiment_analysis=FALLBACK_SENTIMENT_FACTOR,
                factual_consistency=self.factual_analyzer.analyze(text).score,
                source_reliability=self.source_analyzer.analyze(text).score,
            ),
            risk_factors=self.risk_detector.detect(text, FALLBACK_RISK_SCORE, FALLBACK_RISK_SCORE),
            confidence_level=FALLBACK_CONFIDENCE,
            used_fallback=True,
        )

        self._logger.info(
            f"Fallback analysis complete: {result.classification.value} ({result.credibility_score})",
            words=words,
            questions=questions,
            exclamations=exclamations,
        )
        return result

    async def analyze_async(self, text: str) -> AnalysisResult:
        """Run analyze() on a worker thread (model inference blocks)."""
        return await asyncio.to_thread(self.analyze, text)


_default_engine: Optional[CredibilityEngine] = None


def get_engine() -> CredibilityEngine:
    """Return the shared engine backed by the process-wide sentiment classifier."""
    global _default_engine
    if _default_engine is None:
        _default_engine = CredibilityEngine()
    return _default_engine


def analyze(text: str) -> AnalysisResult:
    """Score text with the shared engine."""
    return get_engine().analyze(text)


__all__ = [
    "CredibilityEngine",
    "analyze",
    "get_engine",
    "sentiment_factor",
    "confidence_for",
]
