"""Service layer for notification management."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from campusnet.core.exceptions import NotFound
from campusnet.crud import crud_notification, crud_user
from campusnet.models.notification import Notification
from campusnet.models.user import User
from campusnet.schemas.notification import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)

logger = logging.getLogger(__name__)


class NotificationService:
    """
    Fan-out sink for interaction events plus the recipient's read side.

    Writes are best effort: they run after the triggering mutation has been
    committed and a failure here is logged and dropped, never raised.
    """

    MESSAGE_TEMPLATES = {
        "like": '{actor} liked your post "{title}"',
        "comment": '{actor} commented on your post "{title}"',
        "reply": '{actor} replied to your comment on "{title}"',
    }

    def notify(
        self,
        db: Session,
        *,
        recipient_id: int,
        actor: User,
        notification_type: str,
        post_id: int,
        post_title: str,
        comment_id: Optional[int] = None,
    ) -> Optional[Notification]:
        """
        Append one notification for ``recipient_id``.

        Returns:
            The created notification, or None when nothing was written: the
            actor is the recipient, the recipient is gone or has muted this
            type, or the write failed.
        """
        if recipient_id == actor.id:
            return None

        template = self.MESSAGE_TEMPLATES[notification_type]
        message = template.format(actor=actor.name, title=post_title)

        try:
            recipient = crud_user.get(db, recipient_id)
            if recipient is None:
                logger.info(f"Notification skipped: recipient user_id={recipient_id} not found")
                return None
            if not recipient.wants_notification(notification_type):
                logger.info(
                    f"Notification skipped: user_id={recipient_id} muted {notification_type} notifications"
                )
                return None

            notification = crud_notification.create_notification(
                db,
                user_id=recipient_id,
                actor_user_id=actor.id,
                notification_type=notification_type,
                post_id=post_id,
                comment_id=comment_id,
                message=message,
            )
        except Exception as e:
            # Don't fail the whole operation if the notification write fails
            db.rollback()
            logger.warning(
                f"Failed to create {notification_type} notification for user_id={recipient_id}: {e}"
            )
            return None

        logger.info(
            f"Notification created: id={notification.id}, "
            f"user_id={recipient_id}, actor_id={actor.id}, type={notification_type}"
        )
        return notification

    def list_for_user(
        self,
        db: Session,
        *,
        user: User,
        unread_only: bool = False,
        skip: int = 0,
        limit: int = 50,
    ) -> NotificationListResponse:
        notifications = crud_notification.get_by_user(
            db, user_id=user.id, unread_only=unread_only, skip=skip, limit=limit
        )
        return NotificationListResponse(
            notifications=[NotificationResponse.model_validate(n) for n in notifications],
            total=crud_notification.get_total_count(db, user_id=user.id, unread_only=unread_only),
            unread_count=crud_notification.get_unread_count(db, user_id=user.id),
        )

    def unread_count(self, db: Session, *, user: User) -> UnreadCountResponse:
        return UnreadCountResponse(
            unread_count=crud_notification.get_unread_count(db, user_id=user.id)
        )

    def mark_read(self, db: Session, *, notification_id: int, user: User) -> NotificationResponse:
        """Mark one of the user's notifications as read.

        Raises:
            NotFound: if the id is unknown or addressed to someone else
        """
        notification = crud_notification.get_for_user(
            db, notification_id=notification_id, user_id=user.id
        )
        if notification is None:
            raise NotFound("Notification not found")

        notification = crud_notification.mark_as_read(db, notification=notification)
        return NotificationResponse.model_validate(notification)

    def mark_all_read(self, db: Session, *, user: User) -> MarkAllReadResponse:
        read_count = crud_notification.mark_all_read(db, user_id=user.id)
        logger.info(f"Marked {read_count} notifications read for user_id={user.id}")
        return MarkAllReadResponse(read_count=read_count)


notification_service = NotificationService()
