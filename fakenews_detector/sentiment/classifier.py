"""Sentiment classification backed by a Hugging Face transformers pipeline.

The sentiment model is an optional collaborator of the scoring engine. It is
loaded lazily, at most once per process, behind get_sentiment_classifier().
If transformers is not installed, sentiment is disabled in settings, or the
model fails to load, the accessor returns None for the rest of the process
and the engine falls back to a neutral 0.5 probability.

Usage:
    from fakenews_detector.sentiment import get_sentiment_classifier

    classifier = get_sentiment_classifier()
    if classifier is not None:
        prediction = classifier.classify("What a wonderful day")
        print(prediction.label, prediction.score)
"""

import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from loguru import logger

from fakenews_detector.config.scoring_rules import (
    NEUTRAL_SENTIMENT_LABEL,
    NEUTRAL_SENTIMENT_SCORE,
)
from fakenews_detector.config.settings import settings


@dataclass(frozen=True)
class SentimentPrediction:
    """Top label from a sentiment model.

    Attributes:
        label: POSITIVE, NEGATIVE or NEUTRAL
        score: Probability of label (0.0-1.0)
    """

    label: str
    score: float

    @property
    def is_negative(self) -> bool:
        return self.label.upper() == "NEGATIVE"


NEUTRAL_PREDICTION = SentimentPrediction(
    label=NEUTRAL_SENTIMENT_LABEL,
    score=NEUTRAL_SENTIMENT_SCORE,
)


class SentimentClassifier(Protocol):
    """Anything that can label the sentiment of a text."""

    def classify(self, text: str) -> SentimentPrediction:
        ...


class TransformersSentimentClassifier:
    """
    Sentiment classifier wrapping ``transformers.pipeline("sentiment-analysis")``.

    The underlying pipeline is built on first use so constructing the wrapper
    is cheap. Inputs longer than the model's window are truncated by the
    tokenizer.

    Attributes:
        model_name: Hugging Face model id
        device: Device index (-1 = CPU)
    """

    TASK = "sentiment-analysis"

    def __init__(
        self,
        model_name: str = settings.sentiment_model,
        device: int = settings.sentiment_device,
        pipeline_factory: Optional[Callable[..., Any]] = None,
    ):
        """
        Initialize the classifier wrapper.

        Args:
            model_name: Hugging Face model id
            device: Device index passed to the pipeline (-1 = CPU)
            pipeline_factory: Callable used in place of transformers.pipeline
                (injected by tests)
        """
        self.model_name = model_name
        self.device = device
        self._pipeline_factory = pipeline_factory
        self._pipeline = None
        self._logger = logger.bind(component="TransformersSentimentClassifier")

    def load(self) -> None:
        """Build the transformers pipeline if it has not been built yet."""
        if self._pipeline is not None:
            return

        factory = self._pipeline_factory
        if factory is None:
            from transformers import pipeline as factory

        self._logger.info(f"Loading sentiment model {self.model_name}")
        self._pipeline = factory(self.TASK, model=self.model_name, device=self.device)
        self._logger.info("Sentiment model ready")

    def classify(self, text: str) -> SentimentPrediction:
        """
        Label the sentiment of text.

        Args:
            text: Input text

        Returns:
            SentimentPrediction for the top label

        Raises:
            Exception: Whatever the underlying pipeline raises
        """
        self.load()
        outputs = self._pipeline(text, truncation=True)
        if not outputs:
            return NEUTRAL_PREDICTION

        top = outputs[0]
        score = top.get("score")
        return SentimentPrediction(
            label=str(top.get("label", NEUTRAL_SENTIMENT_LABEL)).upper(),
            score=float(score) if score is not None else NEUTRAL_SENTIMENT_SCORE,
        )


# Process-wide sentiment handle, initialised at most once
_classifier: Optional[SentimentClassifier] = None
_initialized = False
_lock = threading.Lock()


def _build_default_classifier() -> Optional[SentimentClassifier]:
    if not settings.sentiment_enabled:
        logger.bind(component="sentiment").info("Sentiment analysis disabled in settings")
        return None

    classifier = TransformersSentimentClassifier()
    try:
        classifier.load()
    except ImportError as e:
        logger.bind(component="sentiment").warning(
            f"transformers not installed, using neutral sentiment: {e}"
        )
        return None
    except Exception as e:
        logger.bind(component="sentiment").error(
            f"Error initializing sentiment model, using neutral sentiment: {e}"
        )
        return None
    return classifier


def get_sentiment_classifier() -> Optional[SentimentClassifier]:
    """
    Return the process-wide sentiment classifier.

    The first call attempts initialisation under a lock; later calls return
    the cached handle (or None if initialisation failed) without retrying.

    Returns:
        Loaded classifier, or None when sentiment is unavailable
    """
    global _classifier, _initialized

    if _initialized:
        return _classifier

    with _lock:
        if not _initialized:
            _classifier = _build_default_classifier()
            _initialized = True

    return _classifier


def set_sentiment_classifier(classifier: Optional[SentimentClassifier]) -> None:
    """Install a classifier as the process-wide handle (skips lazy loading)."""
    global _classifier, _initialized

    with _lock:
        _classifier = classifier
        _initialized = True


def reset_sentiment_classifier() -> None:
    """Forget the cached handle so the next access initialises again."""
    global _classifier, _initialized

    with _lock:
        _classifier = None
        _initialized = False


__all__ = [
    "SentimentPrediction",
    "SentimentClassifier",
    "TransformersSentimentClassifier",
    "NEUTRAL_PREDICTION",
    "get_sentiment_classifier",
    "set_sentiment_classifier",
    "reset_sentiment_classifier",
]
