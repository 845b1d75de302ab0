"""CRUD operations for `User` and the block-list."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from campusnet.core.security import get_password_hash, verify_password
from campusnet.crud.base import CRUDBase
from campusnet.models.post import Post
from campusnet.models.post_comment import PostComment
from campusnet.models.post_like import PostLike
from campusnet.models.user import User
from campusnet.models.user_block import UserBlock
from campusnet.schemas.user import UserCreate, SettingsUpdate


class CRUDUser(CRUDBase[User, UserCreate, SettingsUpdate]):
    def get_by_email(self, db: Session, email: Optional[str]) -> Optional[User]:
        if not email:
            return None
        stmt = select(User).where(User.email == email.strip().lower()).limit(1)
        return db.scalars(stmt).first()

    def create_user(self, db: Session, *, user_in: UserCreate) -> User:
        db_obj = User(
            name=user_in.name.strip(),
            email=user_in.email.strip().lower(),
            password_hash=get_password_hash(user_in.password),
        )
        return self.add(db, db_obj)

    def authenticate(self, db: Session, *, email: str, password: str) -> Optional[User]:
        user = self.get_by_email(db, email)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def change_password(self, db: Session, *, user: User, new_password: str) -> User:
        return self.update(db, db_obj=user, obj_in={"password_hash": get_password_hash(new_password)})

    def update_settings(self, db: Session, *, user: User, settings_in: SettingsUpdate) -> User:
        """Apply a name change and/or notification preference changes."""
        if settings_in.name is not None and settings_in.name.strip():
            user.name = settings_in.name.strip()

        prefs = settings_in.notification_settings
        if prefs is not None:
            if prefs.likes is not None:
                user.notify_likes = prefs.likes
            if prefs.comments is not None:
                user.notify_comments = prefs.comments
            if prefs.replies is not None:
                user.notify_replies = prefs.replies

        try:
            db.add(user)
            db.commit()
            db.refresh(user)
        except Exception:
            db.rollback()
            raise
        return user

    def get_activity_counts(self, db: Session, *, user_id: int) -> dict:
        """Counters shown on the profile page."""
        posts_count = db.scalar(
            select(func.count(Post.id)).where(Post.author_user_id == user_id)
        ) or 0
        likes_given = db.scalar(
            select(func.count(PostLike.id)).where(PostLike.user_id == user_id)
        ) or 0
        likes_received = db.scalar(
            select(func.count(PostLike.id))
            .join(Post, Post.id == PostLike.post_id)
            .where(Post.author_user_id == user_id)
        ) or 0
        comments_received = db.scalar(
            select(func.count(PostComment.id))
            .join(Post, Post.id == PostComment.post_id)
            .where(Post.author_user_id == user_id)
        ) or 0
        return {
            "posts_count": posts_count,
            "likes_given_count": likes_given,
            "likes_received_count": likes_received,
            "comments_received_count": comments_received,
        }

    # ----- Block-list -----
    def get_blocked_users(self, db: Session, *, user_id: int) -> List[User]:
        stmt = (
            select(User)
            .join(UserBlock, UserBlock.blocked_user_id == User.id)
            .where(UserBlock.blocker_user_id == user_id)
            .order_by(UserBlock.created_at.desc(), UserBlock.id.desc())
        )
        return list(db.scalars(stmt).all())

    def toggle_block(self, db: Session, *, blocker_id: int, blocked_id: int) -> bool:
        """
        Toggle ``blocked_id`` on the blocker's block-list.

        Returns:
            True if the user is now blocked, False if the block was removed.
        """
        result = db.execute(
            delete(UserBlock).where(
                UserBlock.blocker_user_id == blocker_id,
                UserBlock.blocked_user_id == blocked_id,
            )
        )
        if result.rowcount:
            blocked = False
        else:
            db.add(UserBlock(blocker_user_id=blocker_id, blocked_user_id=blocked_id))
            blocked = True

        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        return blocked


# Singleton instance
crud_user = CRUDUser(User)
