from __future__ import annotations

import pytest

from campusnet.core.exceptions import NotFound
from campusnet.crud import crud_notification
from campusnet.schemas.post import PostCreate
from campusnet.services import interaction_service, notification_service, post_service


@pytest.fixture()
def liked_posts(db_session, alice, bob):
    """Bob likes two of Alice's posts, giving Alice two unread notifications."""
    for title in ("First", "Second"):
        post = post_service.create(db_session, actor=alice, post_in=PostCreate(title=title, body="x"))
        interaction_service.toggle_like(db_session, post_id=post.id, actor=bob)


def test_notify_skips_self(db_session, alice):
    result = notification_service.notify(
        db_session,
        recipient_id=alice.id,
        actor=alice,
        notification_type="like",
        post_id=1,
        post_title="Mine",
    )
    assert result is None
    assert crud_notification.get_total_count(db_session, user_id=alice.id) == 0


def test_notify_skips_missing_recipient(db_session, alice):
    result = notification_service.notify(
        db_session,
        recipient_id=9999,
        actor=alice,
        notification_type="comment",
        post_id=1,
        post_title="Gone",
    )
    assert result is None


def test_notify_respects_muted_type(client, db_session, alice, bob, auth_headers):
    client.put(
        "/api/v1/users/settings",
        json={"notification_settings": {"likes": False}},
        headers=auth_headers(alice),
    )
    post = post_service.create(db_session, actor=alice, post_in=PostCreate(title="Quiet", body="x"))

    interaction_service.toggle_like(db_session, post_id=post.id, actor=bob)
    interaction_service.add_comment(db_session, post_id=post.id, actor=bob, text="hi")

    types = [n.notification_type for n in crud_notification.get_by_user(db_session, user_id=alice.id)]
    assert types == ["comment"]


def test_list_and_unread_count(client, liked_posts, alice, auth_headers):
    headers = auth_headers(alice)

    listing = client.get("/api/v1/notifications", headers=headers).json()["data"]
    assert listing["total"] == 2
    assert listing["unread_count"] == 2
    assert [n["message"] for n in listing["notifications"]] == [
        'Bob liked your post "Second"',
        'Bob liked your post "First"',
    ]

    count = client.get("/api/v1/notifications/unread-count", headers=headers).json()["data"]
    assert count == {"unread_count": 2}


def test_mark_read(client, liked_posts, alice, auth_headers):
    headers = auth_headers(alice)
    first = client.get("/api/v1/notifications", headers=headers).json()["data"]["notifications"][0]

    response = client.post(f"/api/v1/notifications/{first['id']}/read", headers=headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["is_read"] is True
    assert data["read_at"] is not None

    unread = client.get("/api/v1/notifications?unread_only=true", headers=headers).json()["data"]
    assert unread["total"] == 1
    assert len(unread["notifications"]) == 1


def test_mark_read_of_someone_elses_notification_is_not_found(db_session, liked_posts, alice, bob):
    notification = crud_notification.get_by_user(db_session, user_id=alice.id)[0]

    with pytest.raises(NotFound):
        notification_service.mark_read(db_session, notification_id=notification.id, user=bob)


def test_mark_all_read(client, liked_posts, alice, auth_headers):
    headers = auth_headers(alice)

    response = client.post("/api/v1/notifications/read-all", headers=headers)
    assert response.json() == {"ok": True, "data": {"read_count": 2}}

    again = client.post("/api/v1/notifications/read-all", headers=headers)
    assert again.json()["data"]["read_count"] == 0
    assert client.get("/api/v1/notifications/unread-count", headers=headers).json()["data"]["unread_count"] == 0


def test_notifications_outlive_deleted_post(db_session, alice, bob):
    post = post_service.create(db_session, actor=alice, post_in=PostCreate(title="Temp", body="x"))
    interaction_service.toggle_like(db_session, post_id=post.id, actor=bob)

    post_service.delete(db_session, post_id=post.id, actor=alice)

    remaining = crud_notification.get_by_user(db_session, user_id=alice.id)
    assert [n.post_id for n in remaining] == [post.id]
