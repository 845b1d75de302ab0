"""CRUD operations for PostComment and CommentReply."""

from typing import Optional
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from campusnet.crud.base import CRUDBase
from campusnet.models.post_comment import CommentReply, PostComment
from campusnet.models.user import User


class CRUDPostComment(CRUDBase[PostComment, dict, dict]):
    """CRUD operations for comments and their replies."""

    def create_comment(
        self,
        db: Session,
        *,
        post_id: int,
        author: User,
        text: str
    ) -> PostComment:
        """Append a comment to a post."""
        comment = PostComment(
            post_id=post_id,
            user_id=author.id,
            user_name=author.name,
            user_email=author.email,
            text=text.strip(),
        )
        return self.add(db, comment)

    def get_in_post(
        self,
        db: Session,
        *,
        post_id: int,
        comment_id: int
    ) -> Optional[PostComment]:
        """Get a comment only if it belongs to the given post."""
        stmt = select(PostComment).where(
            PostComment.id == comment_id,
            PostComment.post_id == post_id,
        )
        return db.scalars(stmt).first()

    def count_for_post(self, db: Session, *, post_id: int) -> int:
        stmt = select(func.count(PostComment.id)).where(PostComment.post_id == post_id)
        return db.scalar(stmt) or 0

    def create_reply(
        self,
        db: Session,
        *,
        comment_id: int,
        author: User,
        text: str
    ) -> CommentReply:
        """Append a reply to a comment."""
        reply = CommentReply(
            comment_id=comment_id,
            user_id=author.id,
            user_name=author.name,
            user_email=author.email,
            text=text.strip(),
        )
        try:
            db.add(reply)
            db.commit()
            db.refresh(reply)
        except Exception:
            db.rollback()
            raise
        return reply


# Singleton instance
crud_post_comment = CRUDPostComment(PostComment)
