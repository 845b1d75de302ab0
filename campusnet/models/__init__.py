"""
SQLAlchemy Models for Campus Social
"""

from ..database import Base
from .user import User
from .user_block import UserBlock
from .post import Post
from .post_like import PostLike
from .post_comment import PostComment, CommentReply
from .notification import Notification

# Export all models
__all__ = [
    "Base",
    "User",
    "UserBlock",
    "Post",
    "PostLike",
    "PostComment",
    "CommentReply",
    "Notification",
]
