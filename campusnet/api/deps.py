"""FastAPI dependency injection functions for authentication and database access."""

import logging

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from campusnet.core.exceptions import Unauthenticated
from campusnet.core.security import decode_token
from campusnet.crud import crud_user
from campusnet.database import get_db
from campusnet.models.user import User

logger = logging.getLogger(__name__)

# OAuth2 Bearer token scheme. auto_error is off so a missing header is
# rendered through the error envelope like every other 401.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    Dependency to get current authenticated user from JWT token.

    Args:
        token: JWT token from Authorization header
        db: Database session

    Returns:
        User: Authenticated user model, block-list loaded

    Raises:
        Unauthenticated: 401 if token is missing, invalid or the user is gone
    """
    if not token:
        logger.warning("[AUTH] Missing bearer token")
        raise Unauthenticated("Not authenticated")

    try:
        payload = decode_token(token)
    except Unauthenticated:
        logger.warning("[AUTH] Token decode failed")
        raise

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        logger.warning(f"[AUTH] Invalid subject in token payload: {subject!r}")
        raise Unauthenticated()

    user = crud_user.get(db, user_id)
    if user is None:
        logger.warning(f"[AUTH] User not found for id: {user_id}")
        raise Unauthenticated()

    logger.debug(f"[AUTH] User authenticated: id={user.id}")
    return user


__all__ = ["get_db", "get_current_user", "oauth2_scheme"]
