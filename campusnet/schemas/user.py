"""Pydantic schemas for `User` domain objects."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class UserCreate(BaseModel):
	name: str
	email: str
	password: str

	@field_validator("email")
	@classmethod
	def normalize_email(cls, v: str) -> str:
		return v.strip().lower()

	model_config = ConfigDict(json_schema_extra={
		"example": {
			"name": "Dana Lee",
			"email": "dana@campus.edu",
			"password": "StrongPass!234",
		}
	})


class UserLogin(BaseModel):
	email: str
	password: str

	@field_validator("email")
	@classmethod
	def normalize_email(cls, v: str) -> str:
		return v.strip().lower()


class UserResponse(BaseModel):
	id: int
	name: str
	email: str

	model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
	token: str
	user: UserResponse


class ProfileResponse(UserResponse):
	"""Current user's profile with activity counters."""
	created_at: datetime
	posts_count: int = 0
	likes_given_count: int = 0
	likes_received_count: int = 0
	comments_received_count: int = 0


class NotificationSettings(BaseModel):
	likes: bool = True
	comments: bool = True
	replies: bool = True


class NotificationSettingsUpdate(BaseModel):
	likes: Optional[bool] = None
	comments: Optional[bool] = None
	replies: Optional[bool] = None


class SettingsResponse(BaseModel):
	id: int
	name: str
	email: str
	notification_settings: NotificationSettings
	created_at: datetime


class SettingsUpdate(BaseModel):
	name: Optional[str] = None
	notification_settings: Optional[NotificationSettingsUpdate] = None

	model_config = ConfigDict(json_schema_extra={
		"example": {
			"name": "Dana L.",
			"notification_settings": {"likes": False},
		}
	})


class PasswordChange(BaseModel):
	current_password: Optional[str] = None
	new_password: Optional[str] = None


class PasswordChangedResponse(BaseModel):
	message: str = "Password updated successfully"


class PublicProfileResponse(UserResponse):
	"""What any signed-in user can see about another user."""
	created_at: datetime


class BlockToggleResponse(BaseModel):
	blocked: bool
	blocked_user_id: int


class BlockedUserListResponse(BaseModel):
	users: List[UserResponse]
