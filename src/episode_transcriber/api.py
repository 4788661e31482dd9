"""FastAPI application factory."""

from fastapi import FastAPI

from episode_transcriber.routes import transcriptions_router


def create_app() -> FastAPI:
    """Builds the transcription API."""
    app = FastAPI(title="Episode Transcriber")
    app.include_router(transcriptions_router)
    return app
