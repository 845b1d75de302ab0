"""Authentication endpoints."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campusnet.api.deps import get_db
from campusnet.config import settings
from campusnet.core.exceptions import Conflict, Forbidden, Unauthenticated, ValidationError
from campusnet.core.security import create_access_token
from campusnet.crud import crud_user
from campusnet.models.user import User
from campusnet.schemas.common import Envelope
from campusnet.schemas.user import (
    AuthResponse,
    UserCreate,
    UserLogin,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
)


def _check_email_domain(email: str) -> None:
    allowed = settings.allowed_email_domains
    if not allowed:
        return
    domain = email.rsplit("@", 1)[-1]
    if domain not in allowed:
        raise Forbidden("Registration is restricted to campus email addresses")


def _auth_response(user: User) -> Envelope[AuthResponse]:
    token = create_access_token(data={"sub": str(user.id)})
    return Envelope(data=AuthResponse(token=token, user=UserResponse.model_validate(user)))


@router.post(
    "/register",
    response_model=Envelope[AuthResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
)
def register(
    user_in: UserCreate,
    db: Session = Depends(get_db),
) -> Envelope[AuthResponse]:
    """
    Register a new user.

    Args:
        user_in: name, email and password
        db: Database session

    Returns:
        Envelope[AuthResponse]: access token and the created user

    Raises:
        ValidationError: 400 if a field is blank
        Forbidden: 403 if the email domain is not allowed
        Conflict: 409 if the email is already registered
    """
    for field in ("name", "email", "password"):
        if not getattr(user_in, field).strip():
            raise ValidationError(f"{field.capitalize()} is required")

    _check_email_domain(user_in.email)

    if crud_user.get_by_email(db, user_in.email):
        raise Conflict("Email already registered")

    try:
        db_user = crud_user.create_user(db, user_in=user_in)
    except IntegrityError:
        raise Conflict("Email already registered")

    logger.info(f"User registered: id={db_user.id}")
    return _auth_response(db_user)


@router.post(
    "/login",
    response_model=Envelope[AuthResponse],
    status_code=status.HTTP_200_OK,
    summary="Login user",
)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db),
) -> Envelope[AuthResponse]:
    """
    Login with email and password.

    Raises:
        Forbidden: 403 if the email domain is not allowed
        Unauthenticated: 401 if credentials are invalid
    """
    _check_email_domain(credentials.email)

    user = crud_user.authenticate(db, email=credentials.email, password=credentials.password)
    if not user:
        raise Unauthenticated("Incorrect email or password")

    return _auth_response(user)
