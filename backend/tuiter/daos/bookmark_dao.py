"""
Tuiter Backend — Bookmark DAO
==============================

What:  Persistence for bookmarks (tuits a user saved for later).
Who:   BookmarkController.
"""

import logging
from typing import List

from tuiter.daos.base import BaseDao
from tuiter.models.bookmark import Bookmark
from tuiter.schemas.bookmark import BookmarkResponse
from tuiter.schemas.common import DeleteStatus

logger = logging.getLogger(__name__)


class BookmarkDao(BaseDao):
    model = Bookmark
    resource = "bookmark"

    async def find_tuits_bookmarked_by_user(self, uid: str) -> List[BookmarkResponse]:
        async with self._session("find_tuits_bookmarked_by_user") as session:
            rows = await self._select_all(session, Bookmark.bookmarked_by == uid)
            return [BookmarkResponse.model_validate(row) for row in rows]

    async def find_users_that_bookmarked_tuit(self, tid: str) -> List[BookmarkResponse]:
        async with self._session("find_users_that_bookmarked_tuit") as session:
            rows = await self._select_all(session, Bookmark.bookmarked_tuit == tid)
            return [BookmarkResponse.model_validate(row) for row in rows]

    async def user_bookmarks_tuit(self, uid: str, tid: str) -> BookmarkResponse:
        async with self._session("user_bookmarks_tuit") as session:
            bookmark, created = await self._get_or_create(
                session, bookmarked_tuit=tid, bookmarked_by=uid
            )
            if created:
                logger.info("User %s bookmarked tuit %s", uid, tid)
            return BookmarkResponse.model_validate(bookmark)

    async def user_unbookmarks_tuit(self, uid: str, tid: str) -> DeleteStatus:
        async with self._session("user_unbookmarks_tuit") as session:
            status = await self._delete_where(
                session, Bookmark.bookmarked_tuit == tid, Bookmark.bookmarked_by == uid
            )
        logger.info("User %s unbookmarked tuit %s: count=%d", uid, tid, status.deleted_count)
        return status
