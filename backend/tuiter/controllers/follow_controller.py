"""
Tuiter Backend — Follow Controller
====================================

Endpoints:
    GET    /users/{uid}/following          whom the user follows
    GET    /users/{uid}/followers          who follows the user
    POST   /users/{uid}/follows/{uid2}     uid starts following uid2
    DELETE /users/{uid}/unfollows/{uid2}   uid stops following uid2
"""

from typing import List

from fastapi import APIRouter

from tuiter.controllers.base import ResourceController
from tuiter.daos.follow_dao import FollowDao
from tuiter.schemas.common import DeleteStatus, ErrorResponse
from tuiter.schemas.follow import FollowResponse


class FollowController(ResourceController):
    dao_class = FollowDao
    tag = "Follows"

    def _register_routes(self, router: APIRouter) -> None:
        router.add_api_route(
            "/users/{uid}/following", self.find_users_followed_by_user,
            methods=["GET"], response_model=List[FollowResponse],
        )
        router.add_api_route(
            "/users/{uid}/followers", self.find_users_following_user,
            methods=["GET"], response_model=List[FollowResponse],
        )
        router.add_api_route(
            "/users/{uid}/follows/{uid2}", self.user_follows_user,
            methods=["POST"], response_model=FollowResponse,
            responses={400: {"description": "Self-follow", "model": ErrorResponse}},
        )
        router.add_api_route(
            "/users/{uid}/unfollows/{uid2}", self.user_unfollows_user,
            methods=["DELETE"], response_model=DeleteStatus,
        )

    async def find_users_followed_by_user(self, uid: str) -> List[FollowResponse]:
        return await self.dao.find_users_followed_by_user(uid)

    async def find_users_following_user(self, uid: str) -> List[FollowResponse]:
        return await self.dao.find_users_following_user(uid)

    async def user_follows_user(self, uid: str, uid2: str) -> FollowResponse:
        return await self.dao.user_follows_user(uid, uid2)

    async def user_unfollows_user(self, uid: str, uid2: str) -> DeleteStatus:
        return await self.dao.user_unfollows_user(uid, uid2)
