from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from ..database import Base
from .common import utcnow


class User(Base):
    __tablename__ = "users"

    # Primary Key
    id = Column(Integer, primary_key=True, index=True)

    # Authentication & Contact
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Notification preferences
    notify_likes = Column(Boolean, default=True, nullable=False)
    notify_comments = Column(Boolean, default=True, nullable=False)
    notify_replies = Column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Relationships
    blocks = relationship(
        "UserBlock",
        foreign_keys="UserBlock.blocker_user_id",
        back_populates="blocker",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def blocked_user_ids(self) -> set:
        """Ids of the users this user has blocked."""
        return {block.blocked_user_id for block in self.blocks}

    def wants_notification(self, notification_type: str) -> bool:
        """Whether the user accepts notifications of the given type."""
        preferences = {
            "like": self.notify_likes,
            "comment": self.notify_comments,
            "reply": self.notify_replies,
        }
        return bool(preferences.get(notification_type, True))
