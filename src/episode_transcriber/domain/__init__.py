"""Domain layer exports."""

from episode_transcriber.domain.models import M4A_MIME_TYPE, AudioPayload
from episode_transcriber.domain.prompt_builder import DEFAULT_SPEAKERS, build_prompt
from episode_transcriber.domain.speaker_relabeler import SpeakerMap, relabel_speakers
from episode_transcriber.domain.transcriber import (
    DEFAULT_PROMPT_SPEAKERS,
    EpisodeTranscriber,
)

__all__ = [
    "M4A_MIME_TYPE",
    "AudioPayload",
    "DEFAULT_SPEAKERS",
    "build_prompt",
    "SpeakerMap",
    "relabel_speakers",
    "DEFAULT_PROMPT_SPEAKERS",
    "EpisodeTranscriber",
]
