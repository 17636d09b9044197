"""Analysis result schema for credibility scoring.

An AnalysisResult is transient: it is recomputed for every request and never
mutated after creation (models are frozen). Field names are snake_case in
Python; JSON export uses the camelCase keys the dashboard consumes
(credibilityScore, factors.languagePattern, ...).
"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fakenews_detector.config.scoring_rules import (
    MISLEADING_THRESHOLD,
    TRUSTWORTHY_THRESHOLD,
)


class Classification(str, Enum):
    """Coarse credibility bucket derived from fixed score thresholds.

    TRUSTWORTHY: score >= 75
    MISLEADING: score <= 40
    UNCERTAIN: anything in between
    """

    TRUSTWORTHY = "trustworthy"
    MISLEADING = "misleading"
    UNCERTAIN = "uncertain"

    @classmethod
    def from_score(cls, score: float) -> "Classification":
        """Bucket a credibility score."""
        if score >= TRUSTWORTHY_THRESHOLD:
            return cls.TRUSTWORTHY
        if score <= MISLEADING_THRESHOLD:
            return cls.MISLEADING
        return cls.UNCERTAIN


class CredibilityFactors(BaseModel):
    """The four independent sub-scores, each clamped to 0-100."""

    language_pattern: int = Field(..., ge=0, le=100, description="Language pattern score")
    sentiment_analysis: int = Field(..., ge=0, le=100, description="Displayed sentiment factor")
    factual_consistency: int = Field(..., ge=0, le=100, description="Factual consistency score")
    source_reliability: int = Field(..., ge=0, le=100, description="Source reliability score")

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AnalysisResult(BaseModel):
    """Credibility report for a single text.

    Attributes:
        credibility_score: Weighted combination of the four factors (0-100)
        classification: Bucket derived from credibility_score
        factors: The four sub-scores
        risk_factors: Human-readable triggers in evaluation order
        confidence_level: Distance from the uncertain midpoint (0-95)
        used_fallback: True when the sentiment classifier failed and the
            fallback formula produced the score
    """

    credibility_score: int = Field(..., ge=0, le=100)
    classification: Classification
    factors: CredibilityFactors
    risk_factors: List[str] = Field(default_factory=list)
    confidence_level: int = Field(..., ge=0, le=95)
    used_fallback: bool = False

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
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
            ]
        },
    )

    def to_dict(self) -> Dict[str, Any]:
        """Export with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: int = 2) -> str:
        """Export report as JSON string."""
        return self.model_dump_json(by_alias=True, indent=indent)


__all__ = ["Classification", "CredibilityFactors", "AnalysisResult"]
