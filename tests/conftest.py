import pytest

from episode_transcriber.domain import AudioPayload
from episode_transcriber.infrastructure.interfaces import GenerativeModel


class FakeModel(GenerativeModel):
    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, prompt, audio):
        self.calls.append((prompt, audio))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def audio():
    return AudioPayload(data=b"\x00\x00\x00\x20ftypM4A ", file_name="episode.m4a")


@pytest.fixture
def fake_model():
    return FakeModel()
