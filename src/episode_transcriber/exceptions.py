"""Custom exceptions for the episode transcriber."""


class InputRejectedError(Exception):
    """Raised when an uploaded file is not acceptable for transcription."""


class UnsupportedAudioTypeError(InputRejectedError):
    """Raised when an upload declares a media type other than M4A."""

    def __init__(self, content_type: str | None):
        self.content_type = content_type
        super().__init__(f"Unsupported audio type '{content_type}'")


class EmptyAudioError(InputRejectedError):
    """Raised when an upload contains no audio bytes."""

    def __init__(self, file_name: str | None):
        self.file_name = file_name
        super().__init__(f"Uploaded file '{file_name}' is empty")


class LLMServiceError(Exception):
    """Raised when the generative model call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class TranscriptionFailedError(Exception):
    """Raised when an episode could not be transcribed, whatever the reason."""

    def __init__(self, cause: Exception | None = None):
        self.cause = cause
        super().__init__("Failed to transcribe audio file")
