"""Response models for the transcription API."""

from pydantic import BaseModel


class TranscriptResponse(BaseModel):
    """Response returned after a successful transcription."""

    transcript: str
    speakers: list[str]


class HealthResponse(BaseModel):
    status: str = "ok"
