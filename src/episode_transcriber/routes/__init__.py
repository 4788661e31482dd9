"""API route exports."""

from episode_transcriber.routes.transcriptions import router as transcriptions_router

__all__ = ["transcriptions_router"]
