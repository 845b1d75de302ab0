"""Feed, trending and own-posts listings."""

from typing import Optional

from sqlalchemy.orm import Session

from campusnet.config import settings
from campusnet.crud import crud_post
from campusnet.models.user import User
from campusnet.schemas.post import PostListResponse
from campusnet.services.post_service import build_post_response
from campusnet.services.visibility import blocked_ids_for, filter_posts


class FeedService:
    def feed(self, db: Session, *, actor: User, skip: int = 0, limit: int = 50) -> PostListResponse:
        """All posts newest first, minus posts by users the actor blocked."""
        blocked_ids = blocked_ids_for(actor)
        posts = crud_post.get_recent(db, exclude_author_ids=blocked_ids, skip=skip, limit=limit)
        return PostListResponse(
            posts=[build_post_response(post, actor, blocked_ids) for post in filter_posts(posts, blocked_ids)]
        )

    def trending(self, db: Session, *, actor: User, limit: Optional[int] = None) -> PostListResponse:
        """Most liked posts first. Ties are broken by recency, then by id."""
        blocked_ids = blocked_ids_for(actor)
        posts = crud_post.get_trending(
            db,
            exclude_author_ids=blocked_ids,
            limit=limit or settings.TRENDING_LIMIT,
        )
        return PostListResponse(
            posts=[build_post_response(post, actor, blocked_ids) for post in filter_posts(posts, blocked_ids)]
        )

    def mine(self, db: Session, *, actor: User, skip: int = 0, limit: int = 50) -> PostListResponse:
        blocked_ids = blocked_ids_for(actor)
        posts = crud_post.get_by_author(db, author_user_id=actor.id, skip=skip, limit=limit)
        return PostListResponse(
            posts=[build_post_response(post, actor, blocked_ids) for post in posts]
        )


feed_service = FeedService()
