"""Domain models for episode transcription."""

from pydantic import BaseModel

M4A_MIME_TYPE = "audio/x-m4a"


class AudioPayload(BaseModel, frozen=True):
    """Raw audio bytes for a single transcription request."""

    data: bytes
    mime_type: str = M4A_MIME_TYPE
    file_name: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)
