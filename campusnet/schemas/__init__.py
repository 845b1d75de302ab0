from .common import Envelope, ErrorEnvelope
from .user import (
	UserCreate,
	UserLogin,
	UserResponse,
	AuthResponse,
	ProfileResponse,
	NotificationSettings,
	NotificationSettingsUpdate,
	SettingsResponse,
	SettingsUpdate,
	PasswordChange,
	PasswordChangedResponse,
	PublicProfileResponse,
	BlockToggleResponse,
	BlockedUserListResponse,
)
from .post import (
	PostCreate,
	PostUpdate,
	CommentCreate,
	ReplyCreate,
	ReplyResponse,
	CommentResponse,
	PostResponse,
	PostDetailResponse,
	PostListResponse,
	PostDeletedResponse,
	LikeToggleResponse,
	CommentListResponse,
	ReplyCreatedResponse,
	CommentDeletedResponse,
)
from .notification import (
	NotificationResponse,
	NotificationListResponse,
	UnreadCountResponse,
	MarkAllReadResponse,
)

__all__ = [
	# Envelope
	"Envelope",
	"ErrorEnvelope",
	# User
	"UserCreate",
	"UserLogin",
	"UserResponse",
	"AuthResponse",
	"ProfileResponse",
	"NotificationSettings",
	"NotificationSettingsUpdate",
	"SettingsResponse",
	"SettingsUpdate",
	"PasswordChange",
	"PasswordChangedResponse",
	"PublicProfileResponse",
	"BlockToggleResponse",
	"BlockedUserListResponse",
	# Post
	"PostCreate",
	"PostUpdate",
	"CommentCreate",
	"ReplyCreate",
	"ReplyResponse",
	"CommentResponse",
	"PostResponse",
	"PostDetailResponse",
	"PostListResponse",
	"PostDeletedResponse",
	"LikeToggleResponse",
	"CommentListResponse",
	"ReplyCreatedResponse",
	"CommentDeletedResponse",
	# Notification
	"NotificationResponse",
	"NotificationListResponse",
	"UnreadCountResponse",
	"MarkAllReadResponse",
]
