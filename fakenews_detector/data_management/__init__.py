"""Data structures shared between the scoring engine and the presentation shell."""

from fakenews_detector.data_management.schemas import (
    AnalysisResult,
    Classification,
    CredibilityFactors,
)

__all__ = ["AnalysisResult", "Classification", "CredibilityFactors"]
