"""CRUD operations for `Notification` model."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import and_, func, select, update
from sqlalchemy.orm import Session

from campusnet.crud.base import CRUDBase
from campusnet.models.common import utcnow
from campusnet.models.notification import Notification


class CRUDNotification(CRUDBase[Notification, dict, dict]):
    def create_notification(
        self,
        db: Session,
        *,
        user_id: int,
        actor_user_id: int,
        notification_type: str,
        post_id: int,
        comment_id: Optional[int],
        message: str,
    ) -> Notification:
        notification = Notification(
            user_id=user_id,
            actor_user_id=actor_user_id,
            notification_type=notification_type,
            post_id=post_id,
            comment_id=comment_id,
            message=message,
            is_read=False,
        )
        return self.add(db, notification)

    def get_by_user(
        self,
        db: Session,
        *,
        user_id: int,
        unread_only: bool = False,
        skip: int = 0,
        limit: int = 50,
    ) -> List[Notification]:
        """Get notifications for a specific user, newest first."""
        conditions = [Notification.user_id == user_id]

        if unread_only:
            conditions.append(Notification.is_read.is_(False))

        stmt = (
            select(Notification)
            .where(and_(*conditions))
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(db.scalars(stmt).all())

    def get_total_count(self, db: Session, *, user_id: int, unread_only: bool = False) -> int:
        conditions = [Notification.user_id == user_id]
        if unread_only:
            conditions.append(Notification.is_read.is_(False))
        stmt = select(func.count(Notification.id)).where(and_(*conditions))
        return db.scalar(stmt) or 0

    def get_unread_count(self, db: Session, *, user_id: int) -> int:
        return self.get_total_count(db, user_id=user_id, unread_only=True)

    def get_for_user(self, db: Session, *, notification_id: int, user_id: int) -> Optional[Notification]:
        """Get a notification only if it is addressed to the given user."""
        stmt = select(Notification).where(
            Notification.id == notification_id,
            Notification.user_id == user_id,
        )
        return db.scalars(stmt).first()

    def mark_as_read(self, db: Session, *, notification: Notification) -> Notification:
        """Mark a notification as read. Already-read ones keep their read_at."""
        if notification.is_read:
            return notification
        return self.update(
            db,
            db_obj=notification,
            obj_in={"is_read": True, "read_at": utcnow()},
        )

    def mark_all_read(self, db: Session, *, user_id: int) -> int:
        """Mark all notifications for a user as read.

        Returns the number of notifications marked.
        """
        stmt = (
            update(Notification)
            .where(
                Notification.user_id == user_id,
                Notification.is_read.is_(False),
            )
            .values(is_read=True, read_at=utcnow(), updated_at=utcnow())
        )
        try:
            result = db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return result.rowcount or 0


# Singleton instance
crud_notification = CRUDNotification(Notification)
