"""Post, like, comment and reply endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from campusnet.api.deps import get_current_user, get_db
from campusnet.models.user import User
from campusnet.schemas.common import Envelope
from campusnet.schemas.post import (
    CommentCreate,
    CommentDeletedResponse,
    CommentListResponse,
    LikeToggleResponse,
    PostCreate,
    PostDeletedResponse,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
    PostUpdate,
    ReplyCreate,
    ReplyCreatedResponse,
)
from campusnet.services import feed_service, interaction_service, post_service

router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
)


@router.post(
    "",
    response_model=Envelope[PostResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Create new post",
)
def create_post(
    post_in: PostCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[PostResponse]:
    """Create a new post authored by the current user."""
    return Envelope(data=post_service.create(db, actor=current_user, post_in=post_in))


# Static paths are declared before /{post_id} so they are not parsed as ids
@router.get(
    "/feed",
    response_model=Envelope[PostListResponse],
    summary="Get feed",
    description="""
    All posts, newest first. Posts by users you blocked are left out, as are
    their comments and replies on other posts.
    """,
)
def get_feed(
    skip: int = Query(0, ge=0, description="Number of posts to skip"),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of posts to return"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[PostListResponse]:
    return Envelope(data=feed_service.feed(db, actor=current_user, skip=skip, limit=limit))


@router.get(
    "/trending/all",
    response_model=Envelope[PostListResponse],
    summary="Get trending posts",
    description="""
    Most liked posts first, ties broken by the newest post.
    """,
)
def get_trending(
    limit: Optional[int] = Query(None, ge=1, le=100, description="Maximum number of posts to return"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[PostListResponse]:
    return Envelope(data=feed_service.trending(db, actor=current_user, limit=limit))


@router.get(
    "/mine",
    response_model=Envelope[PostListResponse],
    summary="Get my posts",
)
def get_my_posts(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[PostListResponse]:
    return Envelope(data=feed_service.mine(db, actor=current_user, skip=skip, limit=limit))


@router.get(
    "/{post_id}",
    response_model=Envelope[PostDetailResponse],
    summary="Get post by ID",
    responses={404: {"description": "Post not found"}},
)
def get_post(
    post_id: int = Path(..., description="Post ID"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[PostDetailResponse]:
    """Get a single post with its comments and replies."""
    return Envelope(data=post_service.get(db, post_id=post_id, actor=current_user))


@router.put(
    "/{post_id}",
    response_model=Envelope[PostResponse],
    summary="Edit post",
    description="""
    Update title and/or body. Only the author can edit.
    """,
    responses={
        403: {"description": "Not the author"},
        404: {"description": "Post not found"},
    },
)
def update_post(
    post_in: PostUpdate,
    post_id: int = Path(..., description="Post ID"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[PostResponse]:
    return Envelope(data=post_service.edit(db, post_id=post_id, actor=current_user, post_in=post_in))


@router.delete(
    "/{post_id}",
    response_model=Envelope[PostDeletedResponse],
    summary="Delete post",
    responses={
        403: {"description": "Not the author"},
        404: {"description": "Post not found"},
    },
)
def delete_post(
    post_id: int = Path(..., description="Post ID"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[PostDeletedResponse]:
    return Envelope(data=post_service.delete(db, post_id=post_id, actor=current_user))


@router.post(
    "/{post_id}/like",
    response_model=Envelope[LikeToggleResponse],
    summary="Like / unlike post",
)
def toggle_like(
    post_id: int = Path(..., description="Post ID"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[LikeToggleResponse]:
    """Toggle the current user's like on a post."""
    return Envelope(data=interaction_service.toggle_like(db, post_id=post_id, actor=current_user))


@router.post(
    "/{post_id}/comment",
    response_model=Envelope[CommentListResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Comment on post",
)
def add_comment(
    comment_in: CommentCreate,
    post_id: int = Path(..., description="Post ID"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[CommentListResponse]:
    return Envelope(
        data=interaction_service.add_comment(db, post_id=post_id, actor=current_user, text=comment_in.text)
    )


@router.post(
    "/{post_id}/comment/{comment_id}/reply",
    response_model=Envelope[ReplyCreatedResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Reply to comment",
)
def reply_to_comment(
    reply_in: ReplyCreate,
    post_id: int = Path(..., description="Post ID"),
    comment_id: int = Path(..., description="Comment ID"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[ReplyCreatedResponse]:
    return Envelope(
        data=interaction_service.reply_to_comment(
            db,
            post_id=post_id,
            comment_id=comment_id,
            actor=current_user,
            text=reply_in.text,
        )
    )


@router.delete(
    "/{post_id}/comment/{comment_id}",
    response_model=Envelope[CommentDeletedResponse],
    summary="Delete comment",
    description="""
    Delete a comment and its replies. Allowed for the comment's author and
    the post's author.
    """,
)
def delete_comment(
    post_id: int = Path(..., description="Post ID"),
    comment_id: int = Path(..., description="Comment ID"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Envelope[CommentDeletedResponse]:
    return Envelope(
        data=post_service.delete_comment(db, post_id=post_id, comment_id=comment_id, actor=current_user)
    )
