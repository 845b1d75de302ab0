"""User endpoints: profile, settings and block-list."""

import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from campusnet.api.deps import get_current_user, get_db
from campusnet.core.exceptions import NotFound, Unauthenticated, ValidationError
from campusnet.core.security import verify_password
from campusnet.crud import crud_user
from campusnet.models.user import User
from campusnet.schemas.common import Envelope
from campusnet.schemas.user import (
    BlockedUserListResponse,
    BlockToggleResponse,
    NotificationSettings,
    PasswordChange,
    PasswordChangedResponse,
    ProfileResponse,
    PublicProfileResponse,
    SettingsResponse,
    SettingsUpdate,
)
from campusnet.services import block_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


def _settings_response(user: User) -> SettingsResponse:
    return SettingsResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        notification_settings=NotificationSettings(
            likes=user.notify_likes,
            comments=user.notify_comments,
            replies=user.notify_replies,
        ),
        created_at=user.created_at,
    )


@router.get(
    "/me",
    response_model=Envelope[ProfileResponse],
    status_code=status.HTTP_200_OK,
    summary="Get current user profile",
)
def get_me(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[ProfileResponse]:
    """Current user's profile with post and like counters."""
    counts = crud_user.get_activity_counts(db, user_id=current_user.id)
    return Envelope(data=ProfileResponse(
        id=current_user.id,
        name=current_user.name,
        email=current_user.email,
        created_at=current_user.created_at,
        **counts,
    ))


@router.get(
    "/blocked",
    response_model=Envelope[BlockedUserListResponse],
    summary="List blocked users",
)
def list_blocked_users(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[BlockedUserListResponse]:
    return Envelope(data=block_service.list_blocked(db, actor=current_user))


@router.get(
    "/settings",
    response_model=Envelope[SettingsResponse],
    summary="Get account settings",
)
def get_settings(
    current_user: User = Depends(get_current_user),
) -> Envelope[SettingsResponse]:
    return Envelope(data=_settings_response(current_user))


@router.put(
    "/settings",
    response_model=Envelope[SettingsResponse],
    summary="Update account settings",
    description="""
    Change the display name and/or notification preferences. Omitted fields
    keep their current value. The name shown on existing posts and comments
    is not changed.
    """,
)
def update_settings(
    settings_in: SettingsUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[SettingsResponse]:
    if settings_in.name is not None and not settings_in.name.strip():
        raise ValidationError("Name cannot be empty")

    user = crud_user.update_settings(db, user=current_user, settings_in=settings_in)
    logger.info(f"Settings updated: user_id={user.id}")
    return Envelope(data=_settings_response(user))


@router.post(
    "/settings/password",
    response_model=Envelope[PasswordChangedResponse],
    summary="Change password",
    responses={
        400: {"description": "Current or new password missing"},
        401: {"description": "Current password is incorrect"},
    },
)
def change_password(
    password_in: PasswordChange,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[PasswordChangedResponse]:
    if not password_in.current_password or not password_in.new_password:
        raise ValidationError("current_password and new_password are required")

    if not verify_password(password_in.current_password, current_user.password_hash):
        raise Unauthenticated("Current password is incorrect")

    crud_user.change_password(db, user=current_user, new_password=password_in.new_password)
    logger.info(f"Password changed: user_id={current_user.id}")
    return Envelope(data=PasswordChangedResponse())


@router.get(
    "/{user_id}/public",
    response_model=Envelope[PublicProfileResponse],
    summary="Get public profile",
    description="""
    Name, email and join date of any user. Settings and credentials are
    never included.
    """,
    responses={404: {"description": "User not found"}},
)
def get_public_profile(
    user_id: int = Path(..., description="User ID"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[PublicProfileResponse]:
    user = crud_user.get(db, user_id)
    if user is None:
        raise NotFound("User not found")
    return Envelope(data=PublicProfileResponse.model_validate(user))


@router.post(
    "/{user_id}/block",
    response_model=Envelope[BlockToggleResponse],
    summary="Block / unblock user",
    description="""
    Toggle a user on your block-list. Their posts, comments and replies are
    hidden from your feed and post views; nothing stops them interacting with
    your content.
    """,
)
def toggle_block(
    user_id: int = Path(..., description="User ID to block or unblock"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[BlockToggleResponse]:
    return Envelope(data=block_service.toggle(db, actor=current_user, target_user_id=user_id))
