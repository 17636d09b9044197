"""Schema package for credibility analysis data structures.

Primary exports:
- AnalysisResult: The credibility report returned by the scoring engine
- CredibilityFactors: The four sub-scores inside a report
- Classification: trustworthy / misleading / uncertain bucket

Usage:
    from fakenews_detector.data_management.schemas import AnalysisResult
    print(result.to_json())
"""

from fakenews_detector.data_management.schemas.analysis_schema import (
    AnalysisResult,
    Classification,
    CredibilityFactors,
)

__all__ = [
    "AnalysisResult",
    "Classification",
    "CredibilityFactors",
]
