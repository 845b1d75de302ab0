from __future__ import annotations

from campusnet.schemas.post import PostCreate
from campusnet.services import interaction_service, post_service


def test_profile_counts(client, db_session, alice, bob, auth_headers):
    post = post_service.create(db_session, actor=alice, post_in=PostCreate(title="T", body="B"))
    interaction_service.toggle_like(db_session, post_id=post.id, actor=bob)
    interaction_service.add_comment(db_session, post_id=post.id, actor=bob, text="nice")

    alice_profile = client.get("/api/v1/users/me", headers=auth_headers(alice)).json()["data"]
    assert alice_profile["posts_count"] == 1
    assert alice_profile["likes_received_count"] == 1
    assert alice_profile["comments_received_count"] == 1

    bob_profile = client.get("/api/v1/users/me", headers=auth_headers(bob)).json()["data"]
    assert bob_profile["posts_count"] == 0
    assert bob_profile["likes_given_count"] == 1


def test_settings_roundtrip(client, alice, auth_headers):
    headers = auth_headers(alice)

    defaults = client.get("/api/v1/users/settings", headers=headers).json()["data"]
    assert defaults["notification_settings"] == {"likes": True, "comments": True, "replies": True}

    response = client.put(
        "/api/v1/users/settings",
        json={"name": "Alicia", "notification_settings": {"replies": False}},
        headers=headers,
    )
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["name"] == "Alicia"
    assert updated["notification_settings"] == {"likes": True, "comments": True, "replies": False}


def test_settings_reject_blank_name(client, alice, auth_headers):
    response = client.put("/api/v1/users/settings", json={"name": " "}, headers=auth_headers(alice))
    assert response.status_code == 400


def test_block_toggle_and_list(client, alice, bob, auth_headers):
    headers = auth_headers(alice)

    blocked = client.post(f"/api/v1/users/{bob.id}/block", headers=headers).json()["data"]
    assert blocked == {"blocked": True, "blocked_user_id": bob.id}

    listing = client.get("/api/v1/users/blocked", headers=headers).json()["data"]
    assert [u["id"] for u in listing["users"]] == [bob.id]

    unblocked = client.post(f"/api/v1/users/{bob.id}/block", headers=headers).json()["data"]
    assert unblocked["blocked"] is False
    assert client.get("/api/v1/users/blocked", headers=headers).json()["data"]["users"] == []


def test_block_self_is_validation_error(client, alice, auth_headers):
    response = client.post(f"/api/v1/users/{alice.id}/block", headers=auth_headers(alice))
    assert response.status_code == 400


def test_block_unknown_user_is_not_found(client, alice, auth_headers):
    response = client.post("/api/v1/users/9999/block", headers=auth_headers(alice))
    assert response.status_code == 404


def test_change_password(client, alice, auth_headers):
    response = client.post(
        "/api/v1/users/settings/password",
        json={"current_password": "password123", "new_password": "n3w-Passw0rd"},
        headers=auth_headers(alice),
    )
    assert response.status_code == 200
    assert response.json()["data"] == {"message": "Password updated successfully"}

    old = client.post("/api/v1/auth/login", json={"email": "alice@campus.edu", "password": "password123"})
    assert old.status_code == 401
    new = client.post("/api/v1/auth/login", json={"email": "alice@campus.edu", "password": "n3w-Passw0rd"})
    assert new.status_code == 200


def test_change_password_with_wrong_current_password(client, alice, auth_headers):
    response = client.post(
        "/api/v1/users/settings/password",
        json={"current_password": "wrong", "new_password": "n3w-Passw0rd"},
        headers=auth_headers(alice),
    )
    assert response.status_code == 401
    assert response.json() == {"ok": False, "error": "Current password is incorrect"}


def test_change_password_requires_both_fields(client, alice, auth_headers):
    response = client.post(
        "/api/v1/users/settings/password",
        json={"current_password": "password123"},
        headers=auth_headers(alice),
    )
    assert response.status_code == 400
    assert response.json()["ok"] is False


def test_public_profile(client, alice, bob, auth_headers):
    response = client.get(f"/api/v1/users/{bob.id}/public", headers=auth_headers(alice))
    assert response.status_code == 200
    data = response.json()["data"]
    assert set(data) == {"id", "name", "email", "created_at"}
    assert (data["id"], data["name"], data["email"]) == (bob.id, "Bob", "bob@campus.edu")


def test_public_profile_of_unknown_user_is_not_found(client, alice, auth_headers):
    response = client.get("/api/v1/users/9999/public", headers=auth_headers(alice))
    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "User not found"}
