from types import SimpleNamespace

import pytest
import requests
from fastapi.testclient import TestClient

from conftest import FakeResponse, FakeSession
from inclusive_hub.core.config import settings
from inclusive_hub.core.deps import get_kolosal_client
from inclusive_hub.core.result import Err, Ok
from inclusive_hub.main import create_app
from inclusive_hub.services.kolosal import KolosalClient
from inclusive_hub.services.store import PersonaStore


def _use_client(app, session):
    client = KolosalClient("http://kolosal.test/v1/", "secret", session=session)
    app.state.kolosal = client
    return client


@pytest.mark.anyio
@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.Timeout("read timed out")),
        FakeSession(error=requests.ConnectionError("refused")),
        FakeSession(FakeResponse(503, {"message": "down"})),
        FakeSession(FakeResponse(200, text="<html>")),
        FakeSession(FakeResponse(200, ["not", "an", "object"])),
    ],
)
async def test_bias_check_falls_back_to_mock(app, client, session):
    _use_client(app, session)
    resp = await client.post("/api/bias", json={"content": "Walk in today!"})
    assert resp.status_code == 200
    report = resp.json()["data"]
    assert report["metadata"]["modelVersion"] == "kolosal-bias-v2.1"
    assert report["biases"]
    assert len(session.calls) == 1


@pytest.mark.anyio
async def test_copy_generation_falls_back_to_mock(app, client, timeout_session):
    _use_client(app, timeout_session)
    resp = await client.post("/api/copy", json={"prompt": "Promo", "tone": "empathetic"})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert [v["tone"] for v in data["suggestions"]] == ["empathetic"]
    assert timeout_session.calls[0]["timeout"] == 15.0


@pytest.mark.anyio
async def test_live_bias_response_is_normalized(app, client):
    session = FakeSession(FakeResponse(200, {"checkId": "k-1", "score": 0.72, "tips": ["Use they"], "modelVersion": "kolosal-live"}))
    _use_client(app, session)
    resp = await client.post("/api/bias", json={"content": "Hey guys", "language": "en", "campaignId": "c-7"})
    report = resp.json()["data"]
    assert report["id"] == "k-1"
    assert report["overallScore"] == 72
    assert report["severity"] == "high"
    assert report["suggestions"] == ["Use they"]
    assert report["campaignId"] == "c-7"
    assert report["metadata"]["modelVersion"] == "kolosal-live"

    call = session.calls[0]
    assert call["url"] == "http://kolosal.test/v1/bias-check"
    assert call["headers"]["Authorization"] == "Bearer secret"
    assert call["json"] == {"content": "Hey guys", "language": "en", "campaignId": "c-7"}
    assert call["timeout"] == 10.0


@pytest.mark.anyio
async def test_live_copy_response_is_normalized(app, client):
    session = FakeSession(FakeResponse(200, {"variants": [{"copy": "Hi everyone", "score": 95}]}))
    _use_client(app, session)
    resp = await client.post("/api/copy", json={"prompt": "Hi guys", "tone": "casual"})
    data = resp.json()["data"]
    assert data["suggestions"][0]["text"] == "Hi everyone"
    assert data["suggestions"][0]["tone"] == "casual"
    assert data["suggestions"][0]["inclusivityScore"] == 95
    assert data["original"] == ""
    assert data["campaignId"] == "default"


def test_client_reports_errors_as_values():
    client = KolosalClient("http://x", "k", session=FakeSession(FakeResponse(500, {})))
    result = client.check_bias("text", "en", None)
    assert isinstance(result, Err)
    assert result.status_code == 500

    ok = KolosalClient("http://x", "k", session=FakeSession(FakeResponse(201, {"a": 1}))).generate_copy(
        "p", "en", None, None
    )
    assert ok == Ok({"a": 1})


def test_live_mode_requires_url_and_real_key(monkeypatch):
    monkeypatch.setattr(settings, "KOLOSAL_API_URL", "https://api.kolosal.ai/v1")
    monkeypatch.setattr(settings, "KOLOSAL_API_KEY", "your_kolosal_api_key_here")
    assert KolosalClient.from_settings(settings) is None
    assert settings.mode == "mock"

    monkeypatch.setattr(settings, "KOLOSAL_API_KEY", "real-key")
    assert isinstance(KolosalClient.from_settings(settings), KolosalClient)
    assert settings.mode == "live"

    monkeypatch.setattr(settings, "KOLOSAL_API_URL", None)
    assert KolosalClient.from_settings(settings) is None


@pytest.mark.anyio
async def test_health_reports_live_mode(client, monkeypatch):
    monkeypatch.setattr(settings, "KOLOSAL_API_URL", "https://api.kolosal.ai/v1")
    monkeypatch.setattr(settings, "KOLOSAL_API_KEY", "real-key")
    body = (await client.get("/health")).json()
    assert body["kolosalApiKey"] == "configured"
    assert body["kolosalApiUrl"] == "https://api.kolosal.ai/v1"
    assert body["mode"] == "live"


@pytest.mark.anyio
async def test_unusable_live_bias_payload_falls_back_to_mock(app, client):
    session = FakeSession(FakeResponse(200, {"score": 10**400, "biases": [{"score": 10**400}]}))
    _use_client(app, session)
    resp = await client.post("/api/bias", json={"content": "Walk in today!"})
    assert resp.status_code == 200
    report = resp.json()["data"]
    assert 0 <= report["overallScore"] <= 100


@pytest.mark.anyio
async def test_copy_generation_sends_friendly_tone_by_default(app, client, timeout_session):
    _use_client(app, timeout_session)
    resp = await client.post("/api/copy", json={"prompt": "Promo"})
    assert resp.status_code == 200
    assert timeout_session.calls[0]["json"]["tone"] == "friendly"
    assert [v["tone"] for v in resp.json()["data"]["suggestions"]] == ["friendly"]


def test_live_client_is_shared_and_closed_on_shutdown(monkeypatch, generator):
    monkeypatch.setattr(settings, "KOLOSAL_API_URL", "https://api.kolosal.ai/v1")
    monkeypatch.setattr(settings, "KOLOSAL_API_KEY", "real-key")
    app = create_app(generator=generator, store=PersonaStore([]))
    shared = app.state.kolosal
    assert isinstance(shared, KolosalClient)
    request = SimpleNamespace(app=app)
    assert get_kolosal_client(request) is get_kolosal_client(request)

    shared.close()
    session = FakeSession(FakeResponse(200, {"score": 40}))
    app.state.kolosal = KolosalClient("http://kolosal.test/v1", "secret", session=session)
    with TestClient(app) as http:
        assert http.post("/api/bias", json={"content": "a"}).status_code == 200
        assert http.post("/api/bias", json={"content": "b"}).status_code == 200
        assert not session.closed
    assert len(session.calls) == 2
    assert session.closed


def test_mock_mode_has_no_live_client(app):
    assert app.state.kolosal is None
