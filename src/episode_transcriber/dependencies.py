"""FastAPI dependency injection configuration."""

from functools import lru_cache

from google import genai
from google.genai import types

from episode_transcriber.config import AppConfig, load_config
from episode_transcriber.domain import EpisodeTranscriber
from episode_transcriber.infrastructure import GeminiAudioModel


@lru_cache
def get_config() -> AppConfig:
    """Returns the process-wide application configuration."""
    return load_config()


@lru_cache
def get_transcriber() -> EpisodeTranscriber:
    """Returns the configured episode transcriber."""
    gemini_config = get_config().gemini

    http_options = None
    if gemini_config.timeout_seconds:
        # HttpOptions.timeout is in milliseconds
        http_options = types.HttpOptions(
            timeout=int(gemini_config.timeout_seconds * 1000)
        )

    client = genai.Client(api_key=gemini_config.api_key, http_options=http_options)
    model = GeminiAudioModel(client, gemini_config.model_name)
    return EpisodeTranscriber(model)
