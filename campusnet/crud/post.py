"""CRUD operations for Post."""

from typing import Iterable, List, Optional
from sqlalchemy import desc, func, select
from sqlalchemy.orm import Session

from campusnet.crud.base import CRUDBase
from campusnet.models.common import utcnow
from campusnet.models.post import Post
from campusnet.models.post_like import PostLike
from campusnet.schemas.post import PostCreate, PostUpdate


class CRUDPost(CRUDBase[Post, PostCreate, PostUpdate]):
    """CRUD operations for Post."""

    def create_post(
        self,
        db: Session,
        *,
        author_user_id: int,
        author_name: str,
        author_email: str,
        title: str,
        body: str
    ) -> Post:
        """Create a new post."""
        post = Post(
            author_user_id=author_user_id,
            author_name=author_name,
            author_email=author_email,
            title=title,
            body=body,
            edited=False,
        )
        return self.add(db, post)

    def get_by_id(self, db: Session, *, post_id: int) -> Optional[Post]:
        """Get post by ID."""
        return db.get(Post, post_id)

    def get_recent(
        self,
        db: Session,
        *,
        exclude_author_ids: Iterable[int] = (),
        skip: int = 0,
        limit: int = 50
    ) -> List[Post]:
        """Newest posts first, skipping the given authors."""
        stmt = select(Post)
        exclude = list(exclude_author_ids)
        if exclude:
            stmt = stmt.where(Post.author_user_id.not_in(exclude))
        stmt = (
            stmt.order_by(desc(Post.created_at), desc(Post.id))
            .offset(skip)
            .limit(limit)
        )
        return list(db.scalars(stmt).all())

    def get_trending(
        self,
        db: Session,
        *,
        exclude_author_ids: Iterable[int] = (),
        limit: int = 20
    ) -> List[Post]:
        """Most liked first; ties go to the newer post."""
        like_count = func.count(PostLike.id).label("like_count")
        stmt = (
            select(Post, like_count)
            .outerjoin(PostLike, PostLike.post_id == Post.id)
            .group_by(Post.id)
        )
        exclude = list(exclude_author_ids)
        if exclude:
            stmt = stmt.where(Post.author_user_id.not_in(exclude))
        stmt = stmt.order_by(
            desc(like_count),
            desc(Post.created_at),
            desc(Post.id),
        ).limit(limit)
        return [row[0] for row in db.execute(stmt).all()]

    def get_by_author(
        self,
        db: Session,
        *,
        author_user_id: int,
        skip: int = 0,
        limit: int = 50
    ) -> List[Post]:
        """Posts written by one user, newest first."""
        stmt = (
            select(Post)
            .where(Post.author_user_id == author_user_id)
            .order_by(desc(Post.created_at), desc(Post.id))
            .offset(skip)
            .limit(limit)
        )
        return list(db.scalars(stmt).all())

    def apply_edit(
        self,
        db: Session,
        *,
        post: Post,
        title: Optional[str] = None,
        body: Optional[str] = None
    ) -> Post:
        """Apply the provided fields and mark the post edited."""
        # updated_at is set explicitly, onupdate only fires when a column value changes
        changes = {"title": title, "body": body, "edited": True, "updated_at": utcnow()}
        return self.update(
            db,
            db_obj=post,
            obj_in={field: value for field, value in changes.items() if value is not None},
        )


# Singleton instance
crud_post = CRUDPost(Post)
