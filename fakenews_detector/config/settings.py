"""Application settings using Pydantic BaseSettings for environment variable management."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
        sentiment_enabled: Load the transformers sentiment pipeline at all
        sentiment_model: Hugging Face model id for sentiment analysis
        sentiment_device: Torch device index for the pipeline (-1 = CPU)
        progress_steps: Scripted progress percentages shown during analysis
        progress_step_delay: Seconds to wait after each progress step
    """

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )
    sentiment_enabled: bool = Field(
        default=True,
        description="Enable the transformers sentiment pipeline"
    )
    sentiment_model: str = Field(
        default="distilbert-base-uncased-finetuned-sst-2-english",
        description="Sentiment classification model identifier"
    )
    sentiment_device: int = Field(
        default=-1,
        description="Device index passed to transformers.pipeline (-1 = CPU)"
    )
    progress_steps: list[int] = Field(
        default_factory=lambda: [20, 45, 70, 90, 100],
        description="Progress percentages stepped through before analysis"
    )
    progress_step_delay: float = Field(
        default=0.3,
        ge=0.0,
        description="Delay in seconds after each progress step"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance - import this throughout the application
settings = Settings()
