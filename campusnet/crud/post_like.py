"""CRUD operations for PostLike."""

from typing import Tuple
from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from campusnet.crud.base import CRUDBase
from campusnet.models.post_like import PostLike


class CRUDPostLike(CRUDBase[PostLike, dict, dict]):
    """CRUD operations for PostLike."""

    def toggle_like(
        self,
        db: Session,
        *,
        post_id: int,
        user_id: int
    ) -> Tuple[bool, int]:
        """
        Toggle like on a post.

        Removal is a single DELETE and insertion a single INSERT guarded by
        the (post_id, user_id) unique constraint, so concurrent toggles on the
        same post never overwrite each other.

        Returns:
            (is_liked: bool, new_like_count: int)

        Raises:
            sqlalchemy.exc.IntegrityError: if a concurrent request inserted
                the same like first
        """
        result = db.execute(
            delete(PostLike).where(
                PostLike.post_id == post_id,
                PostLike.user_id == user_id,
            )
        )

        if result.rowcount:
            is_liked = False
        else:
            db.add(PostLike(post_id=post_id, user_id=user_id))
            is_liked = True

        try:
            db.commit()
        except Exception:
            db.rollback()
            raise

        return is_liked, self.count_for_post(db, post_id=post_id)

    def count_for_post(self, db: Session, *, post_id: int) -> int:
        stmt = select(func.count(PostLike.id)).where(PostLike.post_id == post_id)
        return db.scalar(stmt) or 0


# Singleton instance
crud_post_like = CRUDPostLike(PostLike)
