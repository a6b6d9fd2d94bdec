# tests/test_health.py
from typing import Any


def test_health_reports_ok(client: Any) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_root_describes_service(client: Any) -> None:
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["docs"] == "/docs"


def test_unknown_route_uses_message_body(client: Any) -> None:
    r = client.get("/nope")
    assert r.status_code == 404
    assert set(r.json()) == {"message"}


def test_startup_warns_about_missing_secrets(app: Any, caplog: Any, monkeypatch: Any) -> None:
    from fastapi.testclient import TestClient

    from authly.core.settings import settings

    monkeypatch.setattr(settings, "auth_secret", None)
    monkeypatch.setattr(settings, "cdn_token", None)

    with caplog.at_level("WARNING", logger="authly.main"):
        with TestClient(app):
            pass

    messages = [record.getMessage() for record in caplog.records if record.name == "authly.main"]
    assert any("AUTH_SECRET is not set" in m for m in messages)
    assert any("CDN_TOKEN is not set" in m for m in messages)
