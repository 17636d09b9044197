"""Tests for the transformers sentiment wrapper and the process-wide accessor."""

from unittest.mock import MagicMock

import pytest

from fakenews_detector.config.settings import settings
from fakenews_detector.sentiment import classifier as sentiment_module
from fakenews_detector.sentiment import (
    NEUTRAL_PREDICTION,
    SentimentPrediction,
    TransformersSentimentClassifier,
    get_sentiment_classifier,
    reset_sentiment_classifier,
    set_sentiment_classifier,
)


@pytest.fixture
def fake_pipeline():
    """Callable standing in for a built transformers pipeline."""
    return MagicMock(return_value=[{"label": "NEGATIVE", "score": 0.75}])


@pytest.fixture
def pipeline_factory(fake_pipeline):
    return MagicMock(return_value=fake_pipeline)


class TestTransformersSentimentClassifier:
    """Tests for TransformersSentimentClassifier."""

    def test_pipeline_built_lazily(self, pipeline_factory):
        TransformersSentimentClassifier(model_name="some/model", pipeline_factory=pipeline_factory)
        pipeline_factory.assert_not_called()

    def test_classify(self, pipeline_factory, fake_pipeline):
        classifier = TransformersSentimentClassifier(
            model_name="some/model",
            device=-1,
            pipeline_factory=pipeline_factory,
        )

        prediction = classifier.classify("Terrible news")

        assert prediction == SentimentPrediction(label="NEGATIVE", score=0.75)
        assert prediction.is_negative
        pipeline_factory.assert_called_once_with("sentiment-analysis", model="some/model", device=-1)
        fake_pipeline.assert_called_once_with("Terrible news", truncation=True)

    def test_pipeline_built_once(self, pipeline_factory, fake_pipeline):
        classifier = TransformersSentimentClassifier(pipeline_factory=pipeline_factory)
        classifier.classify("one")
        classifier.classify("two")

        assert pipeline_factory.call_count == 1
        assert fake_pipeline.call_count == 2

    def test_label_normalized_to_upper_case(self, pipeline_factory, fake_pipeline):
        fake_pipeline.return_value = [{"label": "positive", "score": 0.6}]
        classifier = TransformersSentimentClassifier(pipeline_factory=pipeline_factory)

        assert classifier.classify("nice").label == "POSITIVE"

    def test_empty_output_is_neutral(self, pipeline_factory, fake_pipeline):
        fake_pipeline.return_value = []
        classifier = TransformersSentimentClassifier(pipeline_factory=pipeline_factory)

        assert classifier.classify("...") == NEUTRAL_PREDICTION

    def test_missing_score_defaults_to_half(self, pipeline_factory, fake_pipeline):
        fake_pipeline.return_value = [{"label": "POSITIVE"}]
        classifier = TransformersSentimentClassifier(pipeline_factory=pipeline_factory)

        assert classifier.classify("meh").score == 0.5

    def test_zero_score_kept(self, pipeline_factory, fake_pipeline):
        fake_pipeline.return_value = [{"label": "POSITIVE", "score": 0.0}]
        classifier = TransformersSentimentClassifier(pipeline_factory=pipeline_factory)

        assert classifier.classify("meh").score == 0.0

    def test_pipeline_errors_propagate(self, pipeline_factory, fake_pipeline):
        """The engine, not the wrapper, decides how to recover."""
        fake_pipeline.side_effect = RuntimeError("CUDA out of memory")
        classifier = TransformersSentimentClassifier(pipeline_factory=pipeline_factory)

        with pytest.raises(RuntimeError):
            classifier.classify("text")


class TestGetSentimentClassifier:
    """Tests for the guarded process-wide accessor."""

    @pytest.fixture(autouse=True)
    def fresh_state(self):
        reset_sentiment_classifier()
        yield
        reset_sentiment_classifier()

    def test_initialized_once(self, monkeypatch):
        built = []

        def build():
            instance = object()
            built.append(instance)
            return instance

        monkeypatch.setattr(sentiment_module, "_build_default_classifier", build)

        first = get_sentiment_classifier()
        second = get_sentiment_classifier()

        assert first is second
        assert len(built) == 1

    def test_disabled_in_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "sentiment_enabled", False)
        load = MagicMock()
        monkeypatch.setattr(TransformersSentimentClassifier, "load", load)

        assert get_sentiment_classifier() is None
        load.assert_not_called()

    def test_missing_transformers_degrades_to_none(self, monkeypatch):
        monkeypatch.setattr(settings, "sentiment_enabled", True)
        monkeypatch.setattr(
            TransformersSentimentClassifier,
            "load",
            MagicMock(side_effect=ImportError("No module named 'transformers'")),
        )

        assert get_sentiment_classifier() is None

    def test_load_failure_is_not_retried(self, monkeypatch):
        monkeypatch.setattr(settings, "sentiment_enabled", True)
        load = MagicMock(side_effect=OSError("model not found"))
        monkeypatch.setattr(TransformersSentimentClassifier, "load", load)

        assert get_sentiment_classifier() is None
        assert get_sentiment_classifier() is None
        assert load.call_count == 1

    def test_successful_load_returns_wrapper(self, monkeypatch):
        monkeypatch.setattr(settings, "sentiment_enabled", True)
        monkeypatch.setattr(TransformersSentimentClassifier, "load", MagicMock())

        assert isinstance(get_sentiment_classifier(), TransformersSentimentClassifier)

    def test_set_and_reset(self):
        stub = object()
        set_sentiment_classifier(stub)
        assert get_sentiment_classifier() is stub

        reset_sentiment_classifier()
        set_sentiment_classifier(None)
        assert get_sentiment_classifier() is None
