"""Application settings using Pydantic BaseSettings for environment variable management."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Attributes:
        gemini_api_key: Google Gemini API key. Model-backed probes report the
            service as unavailable when it is not set.
        gemini_model: Gemini model used for analysis and translation prompts
        gemini_temperature: Sampling temperature for analysis prompts
        base_language: Language reports are written in and translated to
        content_max_chars: Maximum characters of article text analyzed per run
        outdated_after_days: Age in whole days beyond which an article is
            flagged as potentially outdated
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log output format (json for production, console for dev)
    """

    gemini_api_key: str | None = Field(
        default=None,
        description="Google Gemini API key"
    )
    gemini_model: str = Field(
        default="gemini-1.5-flash",
        description="Gemini model identifier"
    )
    gemini_temperature: float = Field(
        default=0.4,
        ge=0.0,
        le=1.0,
        description="Sampling temperature for analysis prompts"
    )
    base_language: str = Field(
        default="en",
        description="Report language and translation target"
    )
    content_max_chars: int = Field(
        default=2000,
        gt=0,
        description="Character cap applied by the text normalizer"
    )
    outdated_after_days: int = Field(
        default=30,
        ge=0,
        description="Articles older than this many days are potentially outdated"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="json",
        description="Log output format: json or console"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance - import this throughout the application
settings = Settings()
