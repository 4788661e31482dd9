"""Infrastructure layer exports."""

from episode_transcriber.infrastructure.gemini_model import GeminiAudioModel

__all__ = ["GeminiAudioModel"]
