"""Notification endpoints for the current user."""

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from campusnet.api.deps import get_current_user, get_db
from campusnet.models.user import User
from campusnet.schemas.common import Envelope
from campusnet.schemas.notification import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)
from campusnet.services import notification_service

router = APIRouter(
    prefix="/notifications",
    tags=["Notifications"],
)


@router.get(
    "",
    response_model=Envelope[NotificationListResponse],
    status_code=status.HTTP_200_OK,
    summary="List notifications",
    description="""
    Notifications for the current user, newest first.

    **Pagination:**
    - `skip`: Number of records to skip (default: 0)
    - `limit`: Maximum records to return (default: 50, max: 100)
    """,
)
def list_notifications(
    skip: int = Query(0, ge=0, description="Number of records to skip"),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of records to return"),
    unread_only: bool = Query(False, description="Only return unread notifications"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[NotificationListResponse]:
    return Envelope(
        data=notification_service.list_for_user(
            db, user=current_user, unread_only=unread_only, skip=skip, limit=limit
        )
    )


@router.get(
    "/unread-count",
    response_model=Envelope[UnreadCountResponse],
    summary="Get unread notification count",
)
def get_unread_count(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[UnreadCountResponse]:
    return Envelope(data=notification_service.unread_count(db, user=current_user))


@router.post(
    "/read-all",
    response_model=Envelope[MarkAllReadResponse],
    summary="Mark all notifications as read",
)
def mark_all_notifications_read(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[MarkAllReadResponse]:
    return Envelope(data=notification_service.mark_all_read(db, user=current_user))


@router.post(
    "/{notification_id}/read",
    response_model=Envelope[NotificationResponse],
    summary="Mark notification as read",
    responses={404: {"description": "Notification not found"}},
)
def mark_notification_read(
    notification_id: int = Path(..., description="Notification ID"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[NotificationResponse]:
    return Envelope(
        data=notification_service.mark_read(db, notification_id=notification_id, user=current_user)
    )
