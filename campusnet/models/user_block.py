"""UserBlock model for the per-user block-list."""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from ..database import Base
from .common import utcnow


class UserBlock(Base):
    """One entry of a user's block-list. The relation is one-directional."""

    __tablename__ = "user_blocks"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    blocker_user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    blocked_user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Constraints
    __table_args__ = (
        UniqueConstraint("blocker_user_id", "blocked_user_id", name="uq_user_block"),
        CheckConstraint("blocker_user_id <> blocked_user_id", name="check_no_self_block"),
    )

    # Relationships
    blocker = relationship("User", foreign_keys=[blocker_user_id], back_populates="blocks")
    blocked_user = relationship("User", foreign_keys=[blocked_user_id])
