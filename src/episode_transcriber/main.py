"""
Episode Transcriber Service.

Entry point for the transcription API.
"""

import ddtrace.auto  # noqa: F401
import uvicorn

from episode_transcriber.api import create_app
from episode_transcriber.dependencies import get_config
from episode_transcriber.logging import setup_logging

setup_logging(get_config().logging.level)

app = create_app()


def main():
    """Starts the API server."""
    uvicorn.run(app, host="0.0.0.0", port=8000, log_config=None)


if __name__ == "__main__":
    main()
