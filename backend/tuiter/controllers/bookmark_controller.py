"""
Tuiter Backend — Bookmark Controller
======================================

Endpoints:
    GET    /users/{uid}/bookmarks              bookmarks of a user
    GET    /tuits/{tid}/bookmarks              who bookmarked a tuit
    POST   /users/{uid}/bookmarks/{tid}        user bookmarks tuit
    DELETE /users/{uid}/unbookmarks/{tid}      user removes the bookmark
"""

from typing import List

from fastapi import APIRouter

from tuiter.controllers.base import ResourceController
from tuiter.daos.bookmark_dao import BookmarkDao
from tuiter.schemas.bookmark import BookmarkResponse
from tuiter.schemas.common import DeleteStatus


class BookmarkController(ResourceController):
    dao_class = BookmarkDao
    tag = "Bookmarks"

    def _register_routes(self, router: APIRouter) -> None:
        router.add_api_route(
            "/users/{uid}/bookmarks", self.find_tuits_bookmarked_by_user,
            methods=["GET"], response_model=List[BookmarkResponse],
        )
        router.add_api_route(
            "/tuits/{tid}/bookmarks", self.find_users_that_bookmarked_tuit,
            methods=["GET"], response_model=List[BookmarkResponse],
        )
        router.add_api_route(
            "/users/{uid}/bookmarks/{tid}", self.user_bookmarks_tuit,
            methods=["POST"], response_model=BookmarkResponse,
        )
        router.add_api_route(
            "/users/{uid}/unbookmarks/{tid}", self.user_unbookmarks_tuit,
            methods=["DELETE"], response_model=DeleteStatus,
        )

    async def find_tuits_bookmarked_by_user(self, uid: str) -> List[BookmarkResponse]:
        return await self.dao.find_tuits_bookmarked_by_user(uid)

    async def find_users_that_bookmarked_tuit(self, tid: str) -> List[BookmarkResponse]:
        return await self.dao.find_users_that_bookmarked_tuit(tid)

    async def user_bookmarks_tuit(self, uid: str, tid: str) -> BookmarkResponse:
        return await self.dao.user_bookmarks_tuit(uid, tid)

    async def user_unbookmarks_tuit(self, uid: str, tid: str) -> DeleteStatus:
        return await self.dao.user_unbookmarks_tuit(uid, tid)
