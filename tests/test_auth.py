from __future__ import annotations

from campusnet.config import settings
from campusnet.core.security import decode_token


def _register(client, **overrides):
    payload = {"name": "Dana Lee", "email": "dana@campus.edu", "password": "StrongPass!234"}
    payload.update(overrides)
    return client.post("/api/v1/auth/register", json=payload)


def test_register_returns_token_and_user(client):
    response = _register(client, email="  Dana@Campus.edu ")
    assert response.status_code == 201

    data = response.json()["data"]
    assert data["user"]["email"] == "dana@campus.edu"
    assert decode_token(data["token"])["sub"] == str(data["user"]["id"])


def test_register_duplicate_email_is_conflict(client):
    _register(client)
    response = _register(client, name="Other")
    assert response.status_code == 409
    assert response.json() == {"ok": False, "error": "Email already registered"}


def test_register_blank_field_is_validation_error(client):
    response = _register(client, name="   ")
    assert response.status_code == 400


def test_register_outside_allowed_domain_is_forbidden(client, monkeypatch):
    monkeypatch.setattr(settings, "ALLOWED_EMAIL_DOMAINS", "campus.edu, staff.campus.edu")

    assert _register(client, email="dana@gmail.com").status_code == 403
    assert _register(client, email="dana@staff.campus.edu").status_code == 201


def test_login(client):
    _register(client)

    response = client.post(
        "/api/v1/auth/login", json={"email": "DANA@campus.edu", "password": "StrongPass!234"}
    )
    assert response.status_code == 200
    assert response.json()["data"]["user"]["name"] == "Dana Lee"


def test_login_with_bad_credentials_is_unauthenticated(client):
    _register(client)

    response = client.post("/api/v1/auth/login", json={"email": "dana@campus.edu", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["ok"] is False


def test_token_grants_access(client):
    token = _register(client).json()["data"]["token"]

    response = client.get("/api/v1/users/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200
    assert response.json()["data"]["email"] == "dana@campus.edu"


def test_invalid_token_is_unauthenticated(client):
    response = client.get("/api/v1/users/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert response.json() == {"ok": False, "error": "Invalid or expired token"}


def test_health(client):
    assert client.get("/health").json() == {"ok": True, "data": {"status": "healthy"}}
