from episode_transcriber.config import AppConfig, GeminiConfig, load_config
from episode_transcriber.exceptions import (
    EmptyAudioError,
    InputRejectedError,
    LLMServiceError,
    TranscriptionFailedError,
    UnsupportedAudioTypeError,
)
from episode_transcriber.logging import setup_logging

__all__ = [
    "setup_logging",
    "AppConfig",
    "GeminiConfig",
    "load_config",
    "InputRejectedError",
    "UnsupportedAudioTypeError",
    "EmptyAudioError",
    "LLMServiceError",
    "TranscriptionFailedError",
]
