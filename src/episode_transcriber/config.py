"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel


class GeminiConfig(BaseModel, frozen=True):
    """Gemini model configuration."""

    api_key: str
    model_name: str = "gemini-2.0-flash"
    timeout_seconds: float | None = None


class LoggingConfig(BaseModel, frozen=True):
    """Logging configuration."""

    level: str = "INFO"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    gemini: GeminiConfig
    logging: LoggingConfig = LoggingConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    timeout = os.getenv("GEMINI_TIMEOUT_SECONDS")
    return AppConfig(
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL_NAME", "gemini-2.0-flash"),
            timeout_seconds=float(timeout) if timeout else None,
        ),
        logging=LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
        ),
    )
