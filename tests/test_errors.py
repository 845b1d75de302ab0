from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from campusnet.database import get_db
from campusnet.main import app
from campusnet.services import feed_service


@pytest.fixture()
def lenient_client(db_session: Session) -> Iterator[TestClient]:
    """Client that returns 500 responses instead of re-raising server errors."""
    def override_get_db() -> Iterator[Session]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


def test_unexpected_error_is_generic_internal_envelope(lenient_client, alice, auth_headers, monkeypatch):
    def broken_feed(*args, **kwargs):
        raise RuntimeError("secret detail")

    monkeypatch.setattr(feed_service, "feed", broken_feed)

    response = lenient_client.get("/api/v1/posts/feed", headers=auth_headers(alice))
    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "Internal server error"}
    assert "secret detail" not in response.text


def test_unknown_route_is_enveloped(client):
    response = client.get("/api/v1/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "Not Found"}


def test_wrong_method_is_enveloped(client):
    response = client.patch("/api/v1/posts")
    assert response.status_code == 405
    assert response.json() == {"ok": False, "error": "Method Not Allowed"}


def test_malformed_path_parameter_is_validation_error(client, alice, auth_headers):
    response = client.get("/api/v1/posts/not-a-number", headers=auth_headers(alice))
    assert response.status_code == 400
    assert response.json()["ok"] is False
