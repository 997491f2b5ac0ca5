"""
Tuiter Backend — Like Controller
==================================

Endpoints:
    GET    /users/{uid}/likes         likes made by a user
    GET    /tuits/{tid}/likes         likes a tuit received
    POST   /users/{uid}/likes/{tid}   user likes tuit
    DELETE /users/{uid}/unlikes/{tid} user unlikes tuit
"""

from typing import List

from fastapi import APIRouter

from tuiter.controllers.base import ResourceController
from tuiter.daos.like_dao import LikeDao
from tuiter.schemas.common import DeleteStatus
from tuiter.schemas.like import LikeResponse


class LikeController(ResourceController):
    dao_class = LikeDao
    tag = "Likes"

    def _register_routes(self, router: APIRouter) -> None:
        router.add_api_route(
            "/users/{uid}/likes", self.find_tuits_liked_by_user,
            methods=["GET"], response_model=List[LikeResponse],
        )
        router.add_api_route(
            "/tuits/{tid}/likes", self.find_users_that_liked_tuit,
            methods=["GET"], response_model=List[LikeResponse],
        )
        router.add_api_route(
            "/users/{uid}/likes/{tid}", self.user_likes_tuit,
            methods=["POST"], response_model=LikeResponse,
        )
        router.add_api_route(
            "/users/{uid}/unlikes/{tid}", self.user_unlikes_tuit,
            methods=["DELETE"], response_model=DeleteStatus,
        )

    async def find_tuits_liked_by_user(self, uid: str) -> List[LikeResponse]:
        return await self.dao.find_tuits_liked_by_user(uid)

    async def find_users_that_liked_tuit(self, tid: str) -> List[LikeResponse]:
        return await self.dao.find_users_that_liked_tuit(tid)

    async def user_likes_tuit(self, uid: str, tid: str) -> LikeResponse:
        return await self.dao.user_likes_tuit(uid, tid)

    async def user_unlikes_tuit(self, uid: str, tid: str) -> DeleteStatus:
        return await self.dao.user_unlikes_tuit(uid, tid)
