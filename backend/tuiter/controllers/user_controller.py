"""
Tuiter Backend — User Controller
==================================

Endpoints:
    GET    /users          all users
    GET    /users/{uid}    one user, or null
    POST   /users          create a user
    PUT    /users/{uid}    modify a user
    DELETE /users/{uid}    remove a user
"""

from typing import List, Optional

from fastapi import APIRouter

from tuiter.controllers.base import ResourceController
from tuiter.daos.user_dao import UserDao
from tuiter.exceptions import NotFoundError
from tuiter.schemas.common import DeleteStatus, ErrorResponse, UpdateStatus
from tuiter.schemas.user import UserCreate, UserResponse, UserUpdate

DUPLICATE_USERNAME = {400: {"description": "Username already taken", "model": ErrorResponse}}


class UserController(ResourceController):
    dao_class = UserDao
    tag = "Users"

    def _register_routes(self, router: APIRouter) -> None:
        router.add_api_route(
            "/users", self.find_all_users,
            methods=["GET"], response_model=List[UserResponse],
        )
        router.add_api_route(
            "/users/{uid}", self.find_user_by_id,
            methods=["GET"], response_model=Optional[UserResponse],
        )
        router.add_api_route(
            "/users", self.create_user,
            methods=["POST"], response_model=UserResponse,
            responses=DUPLICATE_USERNAME,
        )
        router.add_api_route(
            "/users/{uid}", self.update_user,
            methods=["PUT"], response_model=UpdateStatus,
            responses=DUPLICATE_USERNAME,
        )
        router.add_api_route(
            "/users/{uid}", self.delete_user,
            methods=["DELETE"], response_model=DeleteStatus,
        )

    async def find_all_users(self) -> List[UserResponse]:
        return await self.dao.find_all()

    async def find_user_by_id(self, uid: str) -> Optional[UserResponse]:
        user = await self.dao.find_by_id(uid)
        if user is None and self.strict_not_found:
            raise NotFoundError(resource="user", resource_id=uid)
        return user

    async def create_user(self, user: UserCreate) -> UserResponse:
        return await self.dao.create(user)

    async def update_user(self, uid: str, user: UserUpdate) -> UpdateStatus:
        return await self.dao.update_by_id(uid, user)

    async def delete_user(self, uid: str) -> DeleteStatus:
        return await self.dao.delete_by_id(uid)
