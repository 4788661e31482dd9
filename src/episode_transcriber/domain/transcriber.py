"""Core business logic for episode transcription."""

from episode_transcriber.domain.models import AudioPayload
from episode_transcriber.domain.prompt_builder import build_prompt
from episode_transcriber.domain.speaker_relabeler import relabel_speakers
from episode_transcriber.exceptions import TranscriptionFailedError
from episode_transcriber.infrastructure.interfaces import GenerativeModel
from episode_transcriber.logging import setup_logging

logger = setup_logging()

DEFAULT_PROMPT_SPEAKERS = ["Speaker A", "Speaker B"]


class EpisodeTranscriber:
    """Transcribes an episode with a generative model and names its speakers."""

    def __init__(
        self,
        model: GenerativeModel,
        prompt_speakers: list[str] | None = None,
    ):
        self._model = model
        self._prompt_speakers = list(prompt_speakers or DEFAULT_PROMPT_SPEAKERS)

    def transcribe(
        self, audio: AudioPayload, speakers: list[str] | None = None
    ) -> str:
        """
        Transcribes audio and relabels generic speakers with the given names.

        The model is prompted with generic placeholders only; the caller's
        names are applied to its output afterwards.

        Args:
            audio: The episode audio.
            speakers: Display names in order of first appearance. Defaults to
                two generic placeholders.

        Returns:
            The speaker-attributed transcript.

        Raises:
            TranscriptionFailedError: If the model call fails for any reason.
        """
        speakers = speakers or DEFAULT_PROMPT_SPEAKERS
        prompt = build_prompt(self._prompt_speakers)

        logger.info(
            "Transcribing audio",
            extra={
                "file_name": audio.file_name,
                "size_bytes": audio.size,
                "speaker_count": len(speakers),
            },
        )

        try:
            raw_transcript = self._model.generate(prompt, audio)
            if not raw_transcript or not raw_transcript.strip():
                raise ValueError("Model returned an empty transcript")
        except Exception as e:
            logger.exception(
                "Transcription failed", extra={"file_name": audio.file_name}
            )
            raise TranscriptionFailedError(cause=e) from e

        return relabel_speakers(raw_transcript, speakers)
