"""Shared fixtures: no test ever loads the real transformers model."""

import pytest

from fakenews_detector.sentiment import (
    SentimentPrediction,
    reset_sentiment_classifier,
    set_sentiment_classifier,
)


class StubSentimentClassifier:
    """Deterministic classifier returning a fixed prediction."""

    def __init__(self, label: str = "POSITIVE", score: float = 0.9):
        self.prediction = SentimentPrediction(label=label, score=score)
        self.calls = []

    def classify(self, text: str) -> SentimentPrediction:
        self.calls.append(text)
        return self.prediction


class FailingSentimentClassifier:
    """Classifier whose every call raises."""

    def __init__(self):
        self.calls = 0

    def classify(self, text: str) -> SentimentPrediction:
        self.calls += 1
        raise RuntimeError("model inference failed")


@pytest.fixture(autouse=True)
def no_sentiment_model():
    """Process-wide classifier is 'unavailable' unless a test installs one."""
    set_sentiment_classifier(None)
    yield
    reset_sentiment_classifier()


@pytest.fixture
def positive_classifier():
    return StubSentimentClassifier("POSITIVE", 0.9)


@pytest.fixture
def negative_classifier():
    return StubSentimentClassifier("NEGATIVE", 0.99)


@pytest.fixture
def failing_classifier():
    return FailingSentimentClassifier()


@pytest.fixture
def make_classifier():
    """Factory for stubs with a custom label and probability."""
    return StubSentimentClassifier
