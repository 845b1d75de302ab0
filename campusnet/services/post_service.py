"""Post aggregate service: create, read, edit and delete posts and comments."""

import logging
from typing import Optional, Set

from sqlalchemy.orm import Session

from campusnet.core.exceptions import Forbidden, NotFound, ValidationError
from campusnet.crud import crud_post, crud_post_comment
from campusnet.models.post import Post
from campusnet.models.user import User
from campusnet.schemas.post import (
    CommentDeletedResponse,
    PostCreate,
    PostDeletedResponse,
    PostDetailResponse,
    PostResponse,
    PostUpdate,
)
from campusnet.services.visibility import blocked_ids_for, visible_comments

logger = logging.getLogger(__name__)


def _require_text(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required")
    return value


def build_post_response(post: Post, viewer: User, blocked_ids: Set[int]) -> PostResponse:
    """Render a post for ``viewer`` with blocked commenters removed."""
    liker_ids = post.liker_ids
    return PostResponse(
        id=post.id,
        author_user_id=post.author_user_id,
        author_name=post.author_name,
        author_email=post.author_email,
        title=post.title,
        body=post.body,
        edited=post.edited,
        likes=liker_ids,
        like_count=post.like_count,
        is_liked=viewer.id in liker_ids,
        comment_count=post.comment_count,
        comments=visible_comments(post.comments, blocked_ids),
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


class PostService:
    """Owns the post aggregate and the authorship rules around it."""

    def get_post_or_404(self, db: Session, post_id: int) -> Post:
        post = crud_post.get_by_id(db, post_id=post_id)
        if post is None:
            raise NotFound("Post not found")
        return post

    def create(self, db: Session, *, actor: User, post_in: PostCreate) -> PostResponse:
        """
        Create a post authored by ``actor``.

        The author's name and email are copied onto the post and are not
        updated if the author later renames.

        Raises:
            ValidationError: if title or body is blank
        """
        title = _require_text(post_in.title, "Title")
        body = _require_text(post_in.body, "Body")

        post = crud_post.create_post(
            db,
            author_user_id=actor.id,
            author_name=actor.name,
            author_email=actor.email,
            title=title,
            body=body,
        )
        logger.info(f"Post created: id={post.id}, author_id={actor.id}")
        return build_post_response(post, actor, blocked_ids_for(actor))

    def get(self, db: Session, *, post_id: int, actor: User) -> PostDetailResponse:
        """Fetch one post. The post is returned even if its author is blocked."""
        post = self.get_post_or_404(db, post_id)
        blocked_ids = blocked_ids_for(actor)
        response = build_post_response(post, actor, blocked_ids)
        return PostDetailResponse(
            **response.model_dump(),
            author_blocked=post.author_user_id in blocked_ids,
        )

    def edit(self, db: Session, *, post_id: int, actor: User, post_in: PostUpdate) -> PostResponse:
        """
        Apply a partial edit. Only provided fields change; ``edited`` is set
        on every successful call, including one with no fields.

        Raises:
            NotFound: post does not exist
            Forbidden: actor is not the author
            ValidationError: a provided field is blank
        """
        post = self.get_post_or_404(db, post_id)
        if post.author_user_id != actor.id:
            raise Forbidden("Only the author can edit this post")

        title = _require_text(post_in.title, "Title") if post_in.title is not None else None
        body = _require_text(post_in.body, "Body") if post_in.body is not None else None

        post = crud_post.apply_edit(db, post=post, title=title, body=body)
        logger.info(f"Post edited: id={post.id}, author_id={actor.id}")
        return build_post_response(post, actor, blocked_ids_for(actor))

    def delete(self, db: Session, *, post_id: int, actor: User) -> PostDeletedResponse:
        """Hard delete a post together with its likes, comments and replies."""
        post = self.get_post_or_404(db, post_id)
        if post.author_user_id != actor.id:
            raise Forbidden("Only the author can delete this post")

        crud_post.remove(db, db_obj=post)
        logger.info(f"Post deleted: id={post_id}, author_id={actor.id}")
        return PostDeletedResponse(post_id=post_id)

    def delete_comment(
        self,
        db: Session,
        *,
        post_id: int,
        comment_id: int,
        actor: User,
    ) -> CommentDeletedResponse:
        """
        Remove a comment and its replies.

        Allowed for the comment's author and for the post's author.
        """
        post = self.get_post_or_404(db, post_id)
        comment = crud_post_comment.get_in_post(db, post_id=post_id, comment_id=comment_id)
        if comment is None:
            raise NotFound("Comment not found")

        if actor.id not in (comment.user_id, post.author_user_id):
            raise Forbidden("Only the comment author or the post author can delete this comment")

        crud_post_comment.remove(db, db_obj=comment)
        logger.info(f"Comment deleted: id={comment_id}, post_id={post_id}, actor_id={actor.id}")
        return CommentDeletedResponse(
            post_id=post_id,
            comment_id=comment_id,
            comments_count=crud_post_comment.count_for_post(db, post_id=post_id),
        )


post_service = PostService()
