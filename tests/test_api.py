"""Tests for the HTTP host: /health, /analyze, /settings."""
import inspect

import pytest
from fastapi.testclient import TestClient

from src.api.analyze_api import MAX_TEXT_LENGTH, analyze_text, get_settings, update_settings
from src.api.main import app


@pytest.fixture
def client(monkeypatch, tmp_path):
    monkeypatch.setenv("SENTENCE_COUNTER_SETTINGS", str(tmp_path / "settings.json"))
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_analyze_counts(client):
    resp = client.post("/analyze", json={"text": "Dr. Smith went home. Wait... what?"})
    assert resp.status_code == 200
    assert resp.json() == {"sentence_count": 2, "word_count": 6, "char_count": 34}


def test_analyze_empty_text(client):
    resp = client.post("/analyze", json={"text": "   "})
    assert resp.json() == {"sentence_count": 0, "word_count": 0, "char_count": 0}


def test_analyze_flags_override(client):
    body = {"text": "> [!note]\n> content here", "ignore_callouts": True}
    assert client.post("/analyze", json=body).json()["word_count"] == 0


def test_analyze_uses_persisted_settings(client):
    client.put("/settings", json={"ignore_callouts": True})
    resp = client.post("/analyze", json={"text": "> [!note]\n> content here"})
    assert resp.json()["word_count"] == 0


def test_analyze_rejects_missing_text(client):
    assert client.post("/analyze", json={}).status_code == 422


def test_analyze_rejects_oversized_text(client):
    resp = client.post("/analyze", json={"text": "a" * (MAX_TEXT_LENGTH + 1)})
    assert resp.status_code == 422


def test_settings_round_trip(client):
    assert client.get("/settings").json()["display_location"] == "statusbar"
    resp = client.put("/settings", json={"display_location": "sidebar", "show_word_count": False})
    assert resp.status_code == 200
    stored = client.get("/settings").json()
    assert stored["display_location"] == "sidebar"
    assert stored["show_word_count"] is False


def test_settings_rejects_unknown_location(client):
    assert client.put("/settings", json={"display_location": "popup"}).status_code == 422


def test_endpoints_run_in_threadpool():
    """Settings are read from disk, so handlers must not block the event loop."""
    for handler in (analyze_text, get_settings, update_settings):
        assert not inspect.iscoroutinefunction(handler)
