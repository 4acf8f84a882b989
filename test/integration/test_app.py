"""Tests for the HTTP application shell."""

import pytest
import socketio
from fastapi.testclient import TestClient

from rosterchat.api.app import build_api, create_app
from rosterchat.config import Settings
from rosterchat.models.transcript_entry import TranscriptEntry


@pytest.fixture
def settings(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>chat</body></html>")
    return Settings(_env_file=None, client_dir=tmp_path, port=3100)


@pytest.fixture
def client(room, settings):
    with TestClient(build_api(room, settings)) as test_client:
        yield test_client


@pytest.mark.integration
def test_health_reports_room_state(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "service": "rosterchat",
        "participants": 0,
        "transcript_entries": 0,
    }


@pytest.mark.integration
def test_health_counts_participants(room, settings):
    room.registry.add("sid-a")
    room.transcript.append(TranscriptEntry(name=None, text="hello"))

    with TestClient(build_api(room, settings)) as test_client:
        body = test_client.get("/api/health").json()

    assert body["participants"] == 1
    assert body["transcript_entries"] == 1


@pytest.mark.integration
def test_serves_client_page(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "chat" in response.text


@pytest.mark.integration
def test_missing_client_dir_skips_static_mount(room, tmp_path):
    settings = Settings(_env_file=None, client_dir=tmp_path / "missing")

    with TestClient(build_api(room, settings)) as test_client:
        assert test_client.get("/").status_code == 404
        assert test_client.get("/api/health").status_code == 200


@pytest.mark.integration
def test_create_app_returns_socketio_wrapper(settings):
    app = create_app(settings)

    assert isinstance(app, socketio.ASGIApp)
    assert app.other_asgi_app.state.chat_room.participant_count == 0
