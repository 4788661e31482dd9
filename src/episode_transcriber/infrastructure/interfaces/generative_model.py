"""Abstract interface for generative model operations."""

from abc import ABC, abstractmethod

from episode_transcriber.domain.models import AudioPayload


class GenerativeModel(ABC):
    """Abstract base class for audio-capable generative model backends."""

    @abstractmethod
    def generate(self, prompt: str, audio: AudioPayload) -> str:
        """
        Sends a prompt together with audio and returns the model's text reply.

        Args:
            prompt: Instruction text for the model.
            audio: The audio to accompany the prompt.

        Returns:
            The raw text produced by the model.

        Raises:
            LLMServiceError: If the model call fails.
        """
        pass
