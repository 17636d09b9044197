"""Detector session: the transient UI state behind the dashboard.

A session holds the text being analysed, an in-flight flag, the last result,
a simulated progress percentage and the last user-facing notice. Submitting
text walks a scripted progress sequence (purely cosmetic, unrelated to the
engine's actual work), then awaits the engine. A new submit overwrites all
previous state; there is no cancellation.

Usage:
    session = DetectorSession()
    notice = await session.submit("Breaking: ...")
    if session.result:
        print(session.result.credibility_score)
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, List, Optional

from fakenews_detector.config.settings import settings
from fakenews_detector.data_management.schemas import AnalysisResult
from fakenews_detector.scoring.engine import CredibilityEngine, get_engine
from fakenews_detector.utils.logging import get_correlation_id, get_structured_logger

NOTICE_DEFAULT = "default"
NOTICE_DESTRUCTIVE = "destructive"


class EmptyTextError(ValueError):
    """Raised when there is no text to analyse."""


@dataclass(frozen=True)
class Notice:
    """User-facing message produced by a submit.

    Attributes:
        title: Short heading ("Analysis Complete", "Error", ...)
        description: One-line explanation
        variant: "default" or "destructive"
    """

    title: str
    description: str
    variant: str = NOTICE_DEFAULT

    @property
    def is_error(self) -> bool:
        return self.variant == NOTICE_DESTRUCTIVE


EMPTY_TEXT_NOTICE = Notice(
    title="Error",
    description="Please enter some text to analyze",
    variant=NOTICE_DESTRUCTIVE,
)
ANALYSIS_FAILED_NOTICE = Notice(
    title="Analysis Failed",
    description="Unable to analyze the text. Please try again.",
    variant=NOTICE_DESTRUCTIVE,
)


def validate_text(text: Optional[str]) -> str:
    """
    Check that there is something to analyse.

    Args:
        text: Raw user input

    Returns:
        The input unchanged (the engine scores untrimmed text)

    Raises:
        EmptyTextError: If text is None, empty or whitespace only
    """
    if text is None or not text.strip():
        raise EmptyTextError("Please enter some text to analyze")
    return text


class DetectorSession:
    """
    Transient state and submit flow for one dashboard user.

    Attributes:
        text: Last submitted text
        is_analyzing: True while a submit is in flight
        result: Last AnalysisResult, or None
        progress: Simulated progress percentage (0-100)
        notice: Last user-facing notice, or None
    """

    def __init__(
        self,
        engine: Optional[CredibilityEngine] = None,
        progress_steps: Optional[List[int]] = None,
        step_delay: Optional[float] = None,
        on_progress: Optional[Callable[[int], None]] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialize a session.

        Args:
            engine: Scoring engine. Defaults to the shared engine.
            progress_steps: Scripted progress percentages (settings default)
            step_delay: Seconds to wait after each step (settings default)
            on_progress: Called with each progress value as it is set
            sleep: Awaitable sleep, injectable for tests
        """
        self._engine = engine
        self.progress_steps = list(progress_steps if progress_steps is not None else settings.progress_steps)
        self.step_delay = step_delay if step_delay is not None else settings.progress_step_delay
        self._on_progress = on_progress
        self._sleep = sleep

        self.session_id = get_correlation_id()
        self.text = ""
        self.is_analyzing = False
        self.result: Optional[AnalysisResult] = None
        self.progress = 0
        self.notice: Optional[Notice] = None
        self._logger = get_structured_logger(__name__, session_id=self.session_id)

    @property
    def engine(self) -> CredibilityEngine:
        """Lazy-init the shared engine."""
        if self._engine is None:
            self._engine = get_engine()
        return self._engine

    def _set_progress(self, value: int) -> None:
        self.progress = value
        if self._on_progress is not None:
            self._on_progress(value)

    async def submit(self, text: str) -> Notice:
        """
        Validate, animate progress, analyse and record the outcome.

        Args:
            text: Raw user input

        Returns:
            Notice describing the outcome (also stored on self.notice)
        """
        self.text = text

        try:
            validate_text(text)
        except EmptyTextError:
            self._logger.info("validation_failed", reason="empty_text")
            self.notice = EMPTY_TEXT_NOTICE
            return self.notice

        correlation_id = get_correlation_id()
        log = self._logger.bind(correlation_id=correlation_id)

        self.is_analyzing = True
        self.progress = 0
        self.result = None
        log.info("analysis_started", text_length=len(text))

        try:
            for step in self.progress_steps:
                self._set_progress(step)
                await self._sleep(self.step_delay)

            self.result = await self.engine.analyze_async(text)
            self.notice = Notice(
                title="Analysis Complete",
                description=f"Text classified as {self.result.classification.value}",
            )
            log.info(
                "analysis_complete",
                classification=self.result.classification.value,
                credibility_score=self.result.credibility_score,
                used_fallback=self.result.used_fallback,
            )
        except Exception as e:
            log.error("analysis_failed", error=str(e), exc_info=True)
            self.notice = ANALYSIS_FAILED_NOTICE
        finally:
            self.is_analyzing = False

        return self.notice


__all__ = [
    "DetectorSession",
    "Notice",
    "EmptyTextError",
    "validate_text",
    "EMPTY_TEXT_NOTICE",
    "ANALYSIS_FAILED_NOTICE",
]
