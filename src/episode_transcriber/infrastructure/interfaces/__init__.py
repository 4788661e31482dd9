"""Infrastructure interface exports."""

from episode_transcriber.infrastructure.interfaces.generative_model import (
    GenerativeModel,
)

__all__ = ["GenerativeModel"]
