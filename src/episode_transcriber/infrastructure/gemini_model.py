"""Gemini implementation of the GenerativeModel interface."""

from google import genai
from google.genai import types

from episode_transcriber.domain.models import AudioPayload
from episode_transcriber.exceptions import LLMServiceError
from episode_transcriber.infrastructure.interfaces import GenerativeModel
from episode_transcriber.logging import setup_logging

logger = setup_logging()


class GeminiAudioModel(GenerativeModel):
    """Generates text from a prompt and inline audio using Google Gemini."""

    def __init__(self, client: genai.Client, model_name: str):
        self._client = client
        self._model_name = model_name

    def generate(self, prompt: str, audio: AudioPayload) -> str:
        """
        Sends the prompt and audio to Gemini in a single request.

        The audio travels inline; the SDK base64-encodes it on the wire.

        Raises:
            LLMServiceError: If the Gemini API call fails or returns no text.
        """
        try:
            response = self._client.models.generate_content(
                model=self._model_name,
                contents=[
                    prompt,
                    types.Part.from_bytes(data=audio.data, mime_type=audio.mime_type),
                ],
            )
        except Exception as e:
            logger.exception(
                "Gemini API call failed", extra={"model_name": self._model_name}
            )
            raise LLMServiceError(f"Gemini generation failed: {e}", cause=e) from e

        if not response.text:
            raise LLMServiceError("Gemini returned empty response")

        logger.info(
            "Gemini generation completed",
            extra={"model_name": self._model_name, "characters": len(response.text)},
        )
        return response.text
