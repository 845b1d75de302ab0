from __future__ import annotations

import pytest

from campusnet.schemas.post import PostCreate
from campusnet.services import block_service, feed_service, interaction_service, post_service


def _block(db_session, blocker, blocked):
    result = block_service.toggle(db_session, actor=blocker, target_user_id=blocked.id)
    assert result.blocked is True


@pytest.fixture()
def posts(db_session, alice, bob):
    alice_post = post_service.create(db_session, actor=alice, post_in=PostCreate(title="From Alice", body="a"))
    bob_post = post_service.create(db_session, actor=bob, post_in=PostCreate(title="From Bob", body="b"))
    return alice_post, bob_post


def test_feed_never_returns_blocked_authors(db_session, posts, alice, bob, carol):
    _block(db_session, carol, bob)

    titles = [p.title for p in feed_service.feed(db_session, actor=carol).posts]
    assert titles == ["From Alice"]


def test_block_is_one_directional(db_session, posts, alice, bob):
    _block(db_session, alice, bob)

    titles = [p.title for p in feed_service.feed(db_session, actor=bob).posts]
    assert titles == ["From Bob", "From Alice"]


def test_trending_excludes_blocked_authors(db_session, posts, alice, bob, carol):
    _, bob_post = posts
    interaction_service.toggle_like(db_session, post_id=bob_post.id, actor=alice)
    _block(db_session, carol, bob)

    titles = [p.title for p in feed_service.trending(db_session, actor=carol).posts]
    assert titles == ["From Alice"]


def test_single_get_is_annotated_not_filtered(db_session, posts, bob, carol):
    _, bob_post = posts
    _block(db_session, carol, bob)

    fetched = post_service.get(db_session, post_id=bob_post.id, actor=carol)
    assert fetched.title == "From Bob"
    assert fetched.author_blocked is True


def test_blocked_comments_and_replies_are_hidden_on_every_view(db_session, posts, alice, bob, carol):
    alice_post, _ = posts
    kept = interaction_service.add_comment(db_session, post_id=alice_post.id, actor=alice, text="kept")
    kept_id = kept.comments[0].id
    interaction_service.add_comment(db_session, post_id=alice_post.id, actor=bob, text="hidden")
    interaction_service.reply_to_comment(
        db_session, post_id=alice_post.id, comment_id=kept_id, actor=bob, text="hidden reply"
    )
    interaction_service.reply_to_comment(
        db_session, post_id=alice_post.id, comment_id=kept_id, actor=alice, text="kept reply"
    )
    _block(db_session, carol, bob)

    fetched = post_service.get(db_session, post_id=alice_post.id, actor=carol)
    assert [c.text for c in fetched.comments] == ["kept"]
    assert [r.text for r in fetched.comments[0].replies] == ["kept reply"]
    assert fetched.comment_count == 2

    feed_post = feed_service.feed(db_session, actor=carol).posts[0]
    assert [c.text for c in feed_post.comments] == ["kept"]

    listing = interaction_service.add_comment(db_session, post_id=alice_post.id, actor=carol, text="mine")
    assert listing.comments_count == 3
    assert [c.text for c in listing.comments] == ["kept", "mine"]

    replied = interaction_service.reply_to_comment(
        db_session, post_id=alice_post.id, comment_id=kept_id, actor=carol, text="me too"
    )
    assert [r.text for r in replied.replies] == ["kept reply", "me too"]


def test_blocking_never_rejects_interactions(db_session, posts, alice, bob):
    alice_post, _ = posts
    _block(db_session, alice, bob)

    liked = interaction_service.toggle_like(db_session, post_id=alice_post.id, actor=bob)
    assert liked.liked is True
    commented = interaction_service.add_comment(db_session, post_id=alice_post.id, actor=bob, text="still here")
    assert commented.comments_count == 1
