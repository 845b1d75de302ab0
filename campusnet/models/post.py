"""Post model for the campus feed."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from ..database import Base
from .common import utcnow


class Post(Base):
    """A user-authored text post owning its likes and comments."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)

    # Foreign Keys
    author_user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Author snapshot taken at creation, not re-synced on rename
    author_name = Column(String(255), nullable=False)
    author_email = Column(String(255), nullable=False)

    # Post Content
    title = Column(String(500), nullable=False)
    body = Column(Text, nullable=False)

    # Flips to True on the first edit and stays there
    edited = Column(Boolean, default=False, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    # Constraints & Indexes
    __table_args__ = (
        # Own-posts listing, newest first
        Index("idx_post_author_created", "author_user_id", "created_at"),
    )

    # Relationships
    likes = relationship(
        "PostLike",
        back_populates="post",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    comments = relationship(
        "PostComment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="PostComment.id",
        lazy="selectin",
    )

    @property
    def liker_ids(self) -> list:
        return [like.user_id for like in self.likes]

    @property
    def like_count(self) -> int:
        return len(self.likes)

    @property
    def comment_count(self) -> int:
        return len(self.comments)
