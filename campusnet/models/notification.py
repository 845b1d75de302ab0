from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from ..database import Base
from .common import utcnow


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)

    # Recipient and actor
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    actor_user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)

    # Classification
    notification_type = Column(String(20), nullable=False, index=True)

    # Referenced content. Plain ids: notifications outlive deleted posts.
    post_id = Column(Integer, nullable=False)
    comment_id = Column(Integer, nullable=True)

    message = Column(Text, nullable=False)

    # Status
    is_read = Column(Boolean, default=False, nullable=False, index=True)
    read_at = Column(DateTime(timezone=True))

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Constraints and Indexes
    __table_args__ = (
        CheckConstraint(
            "notification_type IN ('like', 'comment', 'reply')",
            name="check_notification_type"
        ),
        CheckConstraint("user_id <> actor_user_id", name="check_no_self_notification"),
        # Composite index for the unread badge query
        Index("ix_notifications_user_unread", "user_id", "is_read", "created_at"),
    )

    # Relationships
    user = relationship("User", foreign_keys=[user_id])
