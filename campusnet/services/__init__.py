"""Services package for the Campus Social API."""

from .notification_service import notification_service, NotificationService
from .post_service import post_service, PostService
from .interaction_service import interaction_service, InteractionService
from .feed_service import feed_service, FeedService
from .block_service import block_service, BlockService

__all__ = [
    "notification_service",
    "NotificationService",
    "post_service",
    "PostService",
    "interaction_service",
    "InteractionService",
    "feed_service",
    "FeedService",
    "block_service",
    "BlockService",
]
