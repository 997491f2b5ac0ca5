"""
Tuiter Backend — Like DAO
==========================

What:  Persistence for likes: which users liked which tuits.
Who:   LikeController.

Liking is idempotent: a second like of the same tuit by the same user
returns the existing row.
"""

import logging
from typing import List

from tuiter.daos.base import BaseDao
from tuiter.models.like import Like
from tuiter.schemas.common import DeleteStatus
from tuiter.schemas.like import LikeResponse

logger = logging.getLogger(__name__)


class LikeDao(BaseDao):
    model = Like
    resource = "like"

    async def find_tuits_liked_by_user(self, uid: str) -> List[LikeResponse]:
        async with self._session("find_tuits_liked_by_user") as session:
            rows = await self._select_all(session, Like.liked_by == uid)
            return [LikeResponse.model_validate(row) for row in rows]

    async def find_users_that_liked_tuit(self, tid: str) -> List[LikeResponse]:
        async with self._session("find_users_that_liked_tuit") as session:
            rows = await self._select_all(session, Like.tuit_id == tid)
            return [LikeResponse.model_validate(row) for row in rows]

    async def user_likes_tuit(self, uid: str, tid: str) -> LikeResponse:
        async with self._session("user_likes_tuit") as session:
            like, created = await self._get_or_create(session, tuit_id=tid, liked_by=uid)
            if created:
                logger.info("User %s liked tuit %s", uid, tid)
            return LikeResponse.model_validate(like)

    async def user_unlikes_tuit(self, uid: str, tid: str) -> DeleteStatus:
        async with self._session("user_unlikes_tuit") as session:
            status = await self._delete_where(
                session, Like.tuit_id == tid, Like.liked_by == uid
            )
        logger.info("User %s unliked tuit %s: count=%d", uid, tid, status.deleted_count)
        return status
