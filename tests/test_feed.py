from __future__ import annotations

from campusnet.config import settings
from campusnet.schemas.post import PostCreate
from campusnet.services import feed_service, interaction_service, post_service


def _post(db_session, author, title):
    return post_service.create(db_session, actor=author, post_in=PostCreate(title=title, body="body"))


def test_feed_is_newest_first(client, db_session, alice, bob, auth_headers):
    for author, title in [(alice, "one"), (bob, "two"), (alice, "three")]:
        _post(db_session, author, title)

    response = client.get("/api/v1/posts/feed", headers=auth_headers(alice))
    assert response.status_code == 200
    assert [p["title"] for p in response.json()["data"]["posts"]] == ["three", "two", "one"]


def test_feed_pagination(db_session, alice):
    for i in range(5):
        _post(db_session, alice, f"post {i}")

    page = feed_service.feed(db_session, actor=alice, skip=1, limit=2)
    assert [p.title for p in page.posts] == ["post 3", "post 2"]


def test_trending_ranks_by_likes_then_recency(client, db_session, alice, bob, carol, auth_headers):
    old_popular = _post(db_session, alice, "old popular")
    quiet = _post(db_session, alice, "quiet")
    new_popular = _post(db_session, bob, "new popular")
    for voter in (bob, carol):
        interaction_service.toggle_like(db_session, post_id=old_popular.id, actor=voter)
        interaction_service.toggle_like(db_session, post_id=new_popular.id, actor=voter)
    interaction_service.toggle_like(db_session, post_id=quiet.id, actor=bob)

    response = client.get("/api/v1/posts/trending/all", headers=auth_headers(carol))
    posts = response.json()["data"]["posts"]
    assert [p["title"] for p in posts] == ["new popular", "old popular", "quiet"]
    assert posts[0]["is_liked"] is True
    assert [p["like_count"] for p in posts] == [2, 2, 1]
    assert posts[2]["is_liked"] is False


def test_trending_is_limited(db_session, alice, monkeypatch):
    monkeypatch.setattr(settings, "TRENDING_LIMIT", 2)
    for i in range(3):
        _post(db_session, alice, f"post {i}")

    assert len(feed_service.trending(db_session, actor=alice).posts) == 2


def test_mine_returns_only_own_posts(client, db_session, alice, bob, auth_headers):
    _post(db_session, alice, "alice 1")
    _post(db_session, bob, "bob 1")
    _post(db_session, alice, "alice 2")

    response = client.get("/api/v1/posts/mine", headers=auth_headers(alice))
    assert [p["title"] for p in response.json()["data"]["posts"]] == ["alice 2", "alice 1"]
