"""Pydantic schemas for `Notification` domain objects."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class NotificationResponse(BaseModel):
    id: int
    user_id: int
    actor_user_id: int
    notification_type: str
    post_id: int
    comment_id: Optional[int] = None
    message: str
    is_read: bool
    read_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True, json_schema_extra={
        "example": {
            "id": 1,
            "user_id": 10,
            "actor_user_id": 11,
            "notification_type": "like",
            "post_id": 5,
            "comment_id": None,
            "message": "Sam liked your post \"Midterms\"",
            "is_read": False,
            "read_at": None,
            "created_at": "2025-02-13T10:00:00Z",
            "updated_at": "2025-02-13T10:00:00Z",
        }
    })


class NotificationListResponse(BaseModel):
    notifications: List[NotificationResponse]
    total: int
    unread_count: int


class UnreadCountResponse(BaseModel):
    unread_count: int


class MarkAllReadResponse(BaseModel):
    read_count: int
