import logging

import pytest
from pydantic import ValidationError

from episode_transcriber.config import load_config
from episode_transcriber.logging import setup_logging


def test_defaults(monkeypatch):
    for name in ["GEMINI_API_KEY", "GEMINI_MODEL_NAME", "GEMINI_TIMEOUT_SECONDS", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.gemini.api_key == ""
    assert config.gemini.model_name == "gemini-2.0-flash"
    assert config.gemini.timeout_seconds is None
    assert config.logging.level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    monkeypatch.setenv("GEMINI_MODEL_NAME", "gemini-2.5-flash")
    monkeypatch.setenv("GEMINI_TIMEOUT_SECONDS", "90")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = load_config()

    assert config.gemini.api_key == "secret"
    assert config.gemini.model_name == "gemini-2.5-flash"
    assert config.gemini.timeout_seconds == 90.0
    assert config.logging.level == "DEBUG"


def test_config_is_frozen(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    config = load_config()

    with pytest.raises(ValidationError):
        config.gemini.api_key = "other"


def test_setup_logging_sets_level_and_single_handler():
    root = setup_logging("WARNING")
    try:
        assert root is logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert logging.getLogger("uvicorn.access").propagate is False
    finally:
        setup_logging()
