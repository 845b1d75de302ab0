"""Pydantic schemas for posts, comments and replies."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a new post."""
    title: str = Field(..., max_length=500, description="Post title")
    body: str = Field(..., description="Post content")


class PostUpdate(BaseModel):
    """Schema for a partial post update. Omitted fields are left unchanged."""
    title: Optional[str] = Field(None, max_length=500)
    body: Optional[str] = None


class CommentCreate(BaseModel):
    text: str = Field(..., description="Comment text")


class ReplyCreate(BaseModel):
    text: str = Field(..., description="Reply text")


class ReplyResponse(BaseModel):
    id: int
    comment_id: int
    user_id: int
    user_name: str
    user_email: str
    text: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentResponse(BaseModel):
    id: int
    post_id: int
    user_id: int
    user_name: str
    user_email: str
    text: str
    created_at: datetime
    replies: List[ReplyResponse] = []


class PostResponse(BaseModel):
    """Schema for Post response."""
    id: int
    author_user_id: int
    author_name: str
    author_email: str
    title: str
    body: str
    edited: bool
    likes: List[int] = Field(default_factory=list, description="Ids of users who liked the post")
    like_count: int
    is_liked: bool = False
    comment_count: int
    comments: List[CommentResponse] = []
    created_at: datetime
    updated_at: datetime


class PostDetailResponse(PostResponse):
    """Single post fetch. Carries whether the viewer blocked the author."""
    author_blocked: bool = False


class PostListResponse(BaseModel):
    posts: List[PostResponse]


class PostDeletedResponse(BaseModel):
    post_id: int
    deleted: bool = True


class LikeToggleResponse(BaseModel):
    post_id: int
    liked: bool
    likes_count: int


class CommentListResponse(BaseModel):
    post_id: int
    comments_count: int
    comments: List[CommentResponse]


class ReplyCreatedResponse(BaseModel):
    post_id: int
    comment_id: int
    replies: List[ReplyResponse]
    reply: ReplyResponse


class CommentDeletedResponse(BaseModel):
    post_id: int
    comment_id: int
    comments_count: int
