"""
Tuiter Backend — Follow DAO
============================

What:  Persistence for the follower graph.
Who:   FollowController.

A user cannot follow themselves (ValidationError). Following is idempotent.
"""

import logging
from typing import List

from tuiter.daos.base import BaseDao
from tuiter.exceptions import ValidationError
from tuiter.models.follow import Follow
from tuiter.schemas.common import DeleteStatus
from tuiter.schemas.follow import FollowResponse

logger = logging.getLogger(__name__)


class FollowDao(BaseDao):
    model = Follow
    resource = "follow"

    async def find_users_followed_by_user(self, uid: str) -> List[FollowResponse]:
        """Follows where `uid` is the follower."""
        async with self._session("find_users_followed_by_user") as session:
            rows = await self._select_all(session, Follow.user_following == uid)
            return [FollowResponse.model_validate(row) for row in rows]

    async def find_users_following_user(self, uid: str) -> List[FollowResponse]:
        """Follows where `uid` is being followed."""
        async with self._session("find_users_following_user") as session:
            rows = await self._select_all(session, Follow.user_followed == uid)
            return [FollowResponse.model_validate(row) for row in rows]

    async def user_follows_user(self, uid: str, uid2: str) -> FollowResponse:
        if uid == uid2:
            raise ValidationError(message="Users cannot follow themselves", field="uid2")
        async with self._session("user_follows_user") as session:
            follow, created = await self._get_or_create(
                session, user_following=uid, user_followed=uid2
            )
            if created:
                logger.info("User %s now follows %s", uid, uid2)
            return FollowResponse.model_validate(follow)

    async def user_unfollows_user(self, uid: str, uid2: str) -> DeleteStatus:
        async with self._session("user_unfollows_user") as session:
            status = await self._delete_where(
                session, Follow.user_following == uid, Follow.user_followed == uid2
            )
        logger.info("User %s unfollowed %s: count=%d", uid, uid2, status.deleted_count)
        return status
