"""Presentation shell state: validation, scripted progress, notices."""

from fakenews_detector.shell.session import (
    ANALYSIS_FAILED_NOTICE,
    EMPTY_TEXT_NOTICE,
    DetectorSession,
    EmptyTextError,
    Notice,
    validate_text,
)

__all__ = [
    "ANALYSIS_FAILED_NOTICE",
    "EMPTY_TEXT_NOTICE",
    "DetectorSession",
    "EmptyTextError",
    "Notice",
    "validate_text",
]
