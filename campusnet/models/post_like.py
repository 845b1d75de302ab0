"""PostLike model for post likes."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from ..database import Base
from .common import utcnow


class PostLike(Base):
    """One user's like on a post."""

    __tablename__ = "post_likes"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    post_id = Column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Constraints
    __table_args__ = (
        # A user likes a post at most once
        UniqueConstraint("post_id", "user_id", name="uq_post_like"),
        Index("idx_post_like_user", "user_id", "created_at"),
    )

    # Relationships
    post = relationship("Post", back_populates="likes")
