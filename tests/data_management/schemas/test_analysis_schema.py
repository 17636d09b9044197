"""Tests for AnalysisResult and CredibilityFactors schemas."""

import json

import pytest
from pydantic import ValidationError

from fakenews_detector.data_management.schemas import (
    AnalysisResult,
    Classification,
    CredibilityFactors,
)


@pytest.fixture
def factors():
    return CredibilityFactors(
        language_pattern=80,
        sentiment_analysis=90,
        factual_consistency=75,
        source_reliability=100,
    )


@pytest.fixture
def result(factors):
    return AnalysisResult(
        credibility_score=85,
        classification=Classification.TRUSTWORTHY,
        factors=factors,
        risk_factors=[],
        confidence_level=70,
    )


class TestCredibilityFactors:
    """Tests for factor bounds."""

    @pytest.mark.parametrize("value", [-1, 101])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValidationError):
            CredibilityFactors(
                language_pattern=value,
                sentiment_analysis=50,
                factual_consistency=50,
                source_reliability=50,
            )

    def test_accepts_camel_case(self):
        factors = CredibilityFactors.model_validate(
            {
                "languagePattern": 1,
                "sentimentAnalysis": 2,
                "factualConsistency": 3,
                "sourceReliability": 4,
            }
        )
        assert factors.factual_consistency == 3


class TestAnalysisResult:
    """Tests for AnalysisResult."""

    def test_defaults(self, result):
        assert result.used_fallback is False
        assert result.risk_factors == []

    def test_frozen(self, result):
        with pytest.raises(ValidationError):
            result.credibility_score = 10

    def test_confidence_cap(self, factors):
        with pytest.raises(ValidationError):
            AnalysisResult(
                credibility_score=100,
                classification=Classification.TRUSTWORTHY,
                factors=factors,
                confidence_level=96,
            )

    def test_to_dict_uses_camel_case(self, result):
        data = result.to_dict()

        assert data == {
            "credibilityScore": 85,
            "classification": "trustworthy",
            "factors": {
                "languagePattern": 80,
                "sentimentAnalysis": 90,
                "factualConsistency": 75,
                "sourceReliability": 100,
            },
            "riskFactors": [],
            "confidenceLevel": 70,
            "usedFallback": False,
        }

    def test_json_round_trip(self, result):
        restored = AnalysisResult.model_validate(json.loads(result.to_json()))
        assert restored == result
