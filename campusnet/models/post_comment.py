"""PostComment and CommentReply models."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from ..database import Base
from .common import utcnow


class PostComment(Base):
    """Comment owned by a post. Deleting it deletes its replies."""

    __tablename__ = "post_comments"

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

    # Commenter snapshot
    user_name = Column(String(255), nullable=False)
    user_email = Column(String(255), nullable=False)

    text = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_post_comment_post", "post_id", "created_at"),
    )

    # Relationships
    post = relationship("Post", back_populates="comments")
    replies = relationship(
        "CommentReply",
        back_populates="comment",
        cascade="all, delete-orphan",
        order_by="CommentReply.id",
        lazy="selectin",
    )


class CommentReply(Base):
    """Reply owned by a comment. Has no lifecycle of its own."""

    __tablename__ = "comment_replies"

    id = Column(Integer, primary_key=True, index=True)

    comment_id = Column(
        Integer,
        ForeignKey("post_comments.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    user_name = Column(String(255), nullable=False)
    user_email = Column(String(255), nullable=False)

    text = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    comment = relationship("PostComment", back_populates="replies")
