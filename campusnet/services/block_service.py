"""Block-list toggling and listing."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campusnet.core.exceptions import Conflict, NotFound, ValidationError
from campusnet.crud import crud_user
from campusnet.models.user import User
from campusnet.schemas.user import BlockedUserListResponse, BlockToggleResponse, UserResponse

logger = logging.getLogger(__name__)


class BlockService:
    def toggle(self, db: Session, *, actor: User, target_user_id: int) -> BlockToggleResponse:
        """
        Block ``target_user_id`` or lift an existing block.

        Blocking is one-directional and only hides content from the actor;
        it never prevents either side from interacting.

        Raises:
            ValidationError: actor tried to block themself
            NotFound: target user does not exist
        """
        if target_user_id == actor.id:
            raise ValidationError("You cannot block yourself")

        target = crud_user.get(db, target_user_id)
        if target is None:
            raise NotFound("User not found")

        try:
            blocked = crud_user.toggle_block(db, blocker_id=actor.id, blocked_id=target.id)
        except IntegrityError:
            raise Conflict("Block state changed concurrently, please retry")

        logger.info(f"Block toggled: blocker_id={actor.id}, blocked_id={target.id}, blocked={blocked}")
        return BlockToggleResponse(blocked=blocked, blocked_user_id=target.id)

    def list_blocked(self, db: Session, *, actor: User) -> BlockedUserListResponse:
        users = crud_user.get_blocked_users(db, user_id=actor.id)
        return BlockedUserListResponse(users=[UserResponse.model_validate(u) for u in users])


block_service = BlockService()
