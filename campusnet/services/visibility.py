"""Block-list visibility filtering.

A viewer never sees content authored by users on their block-list in any
list result: feed and trending drop whole posts, and every view of a post
drops comments and replies written by blocked users. A single post fetched
by id is still returned (flagged with ``author_blocked``), and the block-list
is never consulted to reject a mutation.
"""

from typing import Iterable, List, Set

from campusnet.models.post import Post
from campusnet.models.post_comment import CommentReply, PostComment
from campusnet.models.user import User
from campusnet.schemas.post import CommentResponse, ReplyResponse


def blocked_ids_for(user: User) -> Set[int]:
    return set(user.blocked_user_ids)


def filter_posts(posts: Iterable[Post], blocked_ids: Set[int]) -> List[Post]:
    return [post for post in posts if post.author_user_id not in blocked_ids]


def visible_replies(replies: Iterable[CommentReply], blocked_ids: Set[int]) -> List[ReplyResponse]:
    return [
        ReplyResponse.model_validate(reply)
        for reply in replies
        if reply.user_id not in blocked_ids
    ]


def visible_comments(comments: Iterable[PostComment], blocked_ids: Set[int]) -> List[CommentResponse]:
    """Comments in insertion order, minus blocked authors at both levels."""
    visible = []
    for comment in comments:
        if comment.user_id in blocked_ids:
            continue
        visible.append(CommentResponse(
            id=comment.id,
            post_id=comment.post_id,
            user_id=comment.user_id,
            user_name=comment.user_name,
            user_email=comment.user_email,
            text=comment.text,
            created_at=comment.created_at,
            replies=visible_replies(comment.replies, blocked_ids),
        ))
    return visible
