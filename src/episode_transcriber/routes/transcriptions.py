"""Episode transcription endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, UploadFile

from episode_transcriber.dependencies import get_transcriber
from episode_transcriber.domain import M4A_MIME_TYPE, AudioPayload, EpisodeTranscriber
from episode_transcriber.exceptions import (
    EmptyAudioError,
    TranscriptionFailedError,
    UnsupportedAudioTypeError,
)
from episode_transcriber.logging import setup_logging
from episode_transcriber.response_models import HealthResponse, TranscriptResponse

logger = setup_logging()

router = APIRouter(tags=["transcriptions"])

TranscriberDep = Annotated[EpisodeTranscriber, Depends(get_transcriber)]


def _read_audio(file: UploadFile) -> AudioPayload:
    """Reads an upload into an AudioPayload, rejecting anything but M4A."""
    if file.content_type != M4A_MIME_TYPE:
        raise UnsupportedAudioTypeError(file.content_type)

    data = file.file.read()
    if not data:
        raise EmptyAudioError(file.filename)

    return AudioPayload(data=data, mime_type=M4A_MIME_TYPE, file_name=file.filename)


@router.post("/transcriptions", response_model=TranscriptResponse)
def create_transcription(
    file: UploadFile,
    transcriber: TranscriberDep,
    speakers: Annotated[list[str] | None, Form()] = None,
) -> TranscriptResponse:
    """
    Transcribes an uploaded M4A episode.

    Generic speaker labels in the transcript are replaced with the submitted
    speaker names, in order of first appearance.
    """
    try:
        audio = _read_audio(file)
    except UnsupportedAudioTypeError as e:
        logger.info(
            "Rejected upload", extra={"file_name": file.filename, "reason": str(e)}
        )
        raise HTTPException(status_code=422, detail="Please upload an M4A file")
    except EmptyAudioError as e:
        logger.info(
            "Rejected upload", extra={"file_name": file.filename, "reason": str(e)}
        )
        raise HTTPException(status_code=422, detail="Uploaded file is empty")

    names = [name.strip() for name in speakers or [] if name.strip()]

    logger.info(
        "Received transcription request",
        extra={"file_name": audio.file_name, "speakers": names},
    )

    try:
        transcript = transcriber.transcribe(audio, names)
    except TranscriptionFailedError:
        raise HTTPException(
            status_code=500,
            detail="Failed to transcribe the file. Please try again.",
        )

    return TranscriptResponse(transcript=transcript, speakers=names)


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Liveness probe."""
    return HealthResponse()
