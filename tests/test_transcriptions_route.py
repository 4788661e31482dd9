import pytest
from fastapi.testclient import TestClient

from conftest import FakeModel
from episode_transcriber.api import create_app
from episode_transcriber.dependencies import get_transcriber
from episode_transcriber.domain import EpisodeTranscriber


@pytest.fixture
def model():
    return FakeModel(reply="[00:00] Speaker A: Hi.\n[00:02] Speaker B: Hello.\n[END]")


@pytest.fixture
def client(model):
    app = create_app()
    app.dependency_overrides[get_transcriber] = lambda: EpisodeTranscriber(model)
    return TestClient(app)


def _upload(content_type="audio/x-m4a", data=b"m4a-bytes"):
    return {"file": ("episode.m4a", data, content_type)}


def test_transcribes_with_named_speakers(client, model):
    response = client.post(
        "/transcriptions",
        files=_upload(),
        data={"speakers": ["Stewart", "James"]},
    )

    assert response.status_code == 200
    assert response.json() == {
        "transcript": "[00:00] Stewart: Hi.\n[00:02] James: Hello.\n[END]",
        "speakers": ["Stewart", "James"],
    }
    _, audio = model.calls[0]
    assert audio.data == b"m4a-bytes"
    assert audio.file_name == "episode.m4a"


def test_without_speakers_uses_placeholders(client):
    response = client.post("/transcriptions", files=_upload())

    assert response.status_code == 200
    assert response.json()["speakers"] == []
    assert response.json()["transcript"].startswith("[00:00] Speaker A: Hi.")


def test_blank_speaker_names_are_dropped(client):
    response = client.post(
        "/transcriptions",
        files=_upload(),
        data={"speakers": ["  ", "James"]},
    )

    assert response.status_code == 200
    assert response.json()["speakers"] == ["James"]
    assert response.json()["transcript"].startswith("[00:00] James: Hi.")


def test_rejects_other_audio_types(client, model):
    response = client.post("/transcriptions", files=_upload(content_type="audio/mpeg"))

    assert response.status_code == 422
    assert response.json()["detail"] == "Please upload an M4A file"
    assert model.calls == []


def test_rejects_empty_upload(client, model):
    response = client.post("/transcriptions", files=_upload(data=b""))

    assert response.status_code == 422
    assert response.json()["detail"] == "Uploaded file is empty"
    assert model.calls == []


def test_model_failure_returns_generic_error(client, model):
    model.error = TimeoutError("deadline exceeded at 10.0.0.1")

    response = client.post("/transcriptions", files=_upload())

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to transcribe the file. Please try again."
    assert "10.0.0.1" not in response.text


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
