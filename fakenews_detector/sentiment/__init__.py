"""Optional sentiment collaborator for the scoring engine."""

from fakenews_detector.sentiment.classifier import (
    NEUTRAL_PREDICTION,
    SentimentClassifier,
    SentimentPrediction,
    TransformersSentimentClassifier,
    get_sentiment_classifier,
    reset_sentiment_classifier,
    set_sentiment_classifier,
)

__all__ = [
    "NEUTRAL_PREDICTION",
    "SentimentClassifier",
    "SentimentPrediction",
    "TransformersSentimentClassifier",
    "get_sentiment_classifier",
    "reset_sentiment_classifier",
    "set_sentiment_classifier",
]
