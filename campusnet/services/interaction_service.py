"""Likes, comments and replies, with their notification side effects."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campusnet.core.exceptions import Conflict, NotFound, ValidationError
from campusnet.crud import crud_post_comment, crud_post_like
from campusnet.models.user import User
from campusnet.schemas.post import (
    CommentListResponse,
    LikeToggleResponse,
    ReplyCreatedResponse,
    ReplyResponse,
)
from campusnet.services.notification_service import notification_service
from campusnet.services.post_service import post_service
from campusnet.services.visibility import blocked_ids_for, visible_comments, visible_replies

logger = logging.getLogger(__name__)


class InteractionService:
    """
    Each interaction commits its own row first and only then asks the
    notification sink to fan out, so a failed notification never rolls
    back the like, comment or reply.
    """

    def toggle_like(self, db: Session, *, post_id: int, actor: User) -> LikeToggleResponse:
        """
        Like the post if the actor has not liked it yet, otherwise unlike it.

        Raises:
            NotFound: post does not exist
            Conflict: a concurrent request by the same user liked it first
        """
        post = post_service.get_post_or_404(db, post_id)

        try:
            liked, likes_count = crud_post_like.toggle_like(db, post_id=post.id, user_id=actor.id)
        except IntegrityError:
            logger.warning(f"Concurrent like detected: post_id={post.id}, user_id={actor.id}")
            raise Conflict("Like state changed concurrently, please retry")

        logger.info(f"Like toggled: post_id={post.id}, user_id={actor.id}, liked={liked}")

        if liked:
            notification_service.notify(
                db,
                recipient_id=post.author_user_id,
                actor=actor,
                notification_type="like",
                post_id=post.id,
                post_title=post.title,
            )

        return LikeToggleResponse(post_id=post.id, liked=liked, likes_count=likes_count)

    def add_comment(self, db: Session, *, post_id: int, actor: User, text: str) -> CommentListResponse:
        """
        Append a comment to the post.

        Raises:
            ValidationError: text is blank (checked before anything is read)
            NotFound: post does not exist
        """
        if text is None or not text.strip():
            raise ValidationError("Comment text is required")

        post = post_service.get_post_or_404(db, post_id)
        comment = crud_post_comment.create_comment(db, post_id=post.id, author=actor, text=text)
        logger.info(f"Comment added: id={comment.id}, post_id={post.id}, user_id={actor.id}")

        notification_service.notify(
            db,
            recipient_id=post.author_user_id,
            actor=actor,
            notification_type="comment",
            post_id=post.id,
            post_title=post.title,
            comment_id=comment.id,
        )

        db.refresh(post)
        return CommentListResponse(
            post_id=post.id,
            comments_count=post.comment_count,
            comments=visible_comments(post.comments, blocked_ids_for(actor)),
        )

    def reply_to_comment(
        self,
        db: Session,
        *,
        post_id: int,
        comment_id: int,
        actor: User,
        text: str,
    ) -> ReplyCreatedResponse:
        """
        Append a reply under a comment and notify the comment's author.

        Raises:
            NotFound: post, or the comment under that post, does not exist
            ValidationError: text is blank
        """
        post = post_service.get_post_or_404(db, post_id)
        comment = crud_post_comment.get_in_post(db, post_id=post.id, comment_id=comment_id)
        if comment is None:
            raise NotFound("Comment not found")

        if text is None or not text.strip():
            raise ValidationError("Reply text is required")

        reply = crud_post_comment.create_reply(db, comment_id=comment.id, author=actor, text=text)
        logger.info(f"Reply added: id={reply.id}, comment_id={comment.id}, user_id={actor.id}")

        notification_service.notify(
            db,
            recipient_id=comment.user_id,
            actor=actor,
            notification_type="reply",
            post_id=post.id,
            post_title=post.title,
            comment_id=comment.id,
        )

        db.refresh(comment)
        return ReplyCreatedResponse(
            post_id=post.id,
            comment_id=comment.id,
            replies=visible_replies(comment.replies, blocked_ids_for(actor)),
            reply=ReplyResponse.model_validate(reply),
        )


interaction_service = InteractionService()
