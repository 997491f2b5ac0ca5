"""
Tuiter Backend — User DAO
==========================

What:  Persistence for user accounts.
Who:   UserController.

Same shape as the owned-resource DAOs minus find_by_owner; users are the
owners. Usernames are unique: create/update check first and raise
ValidationError. Two concurrent writers can both pass that check; the
unique index then rejects the second, and that is reported the same way.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from tuiter.daos.base import BaseDao
from tuiter.exceptions import ValidationError
from tuiter.models.user import User
from tuiter.schemas.common import DeleteStatus, UpdateStatus
from tuiter.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)


class UserDao(BaseDao):
    """CRUD operations on the `users` table."""

    model = User
    resource = "user"

    async def find_all(self) -> List[UserResponse]:
        async with self._session("find_all") as session:
            rows = await self._select_all(session)
            return [UserResponse.model_validate(row) for row in rows]

    async def find_by_id(self, record_id: str) -> Optional[UserResponse]:
        async with self._session("find_by_id") as session:
            row = await session.get(User, record_id)
            return UserResponse.model_validate(row) if row is not None else None

    async def create(self, payload: UserCreate) -> UserResponse:
        async with self._session("create") as session:
            if await self._select_first(session, User.username == payload.username):
                raise _username_taken(payload.username)
            user = User(**payload.model_dump())
            session.add(user)
            await self._flush_checking_username(session, payload.username)
            logger.info("User %s created (%s)", user.id, user.username)
            return UserResponse.model_validate(user)

    async def update_by_id(self, record_id: str, payload: UserUpdate) -> UpdateStatus:
        changes = self._changes(payload)
        async with self._session("update_by_id") as session:
            username = changes.get("username")
            if username is not None:
                clash = await self._select_first(
                    session, User.username == username, User.id != record_id
                )
                if clash is not None:
                    raise _username_taken(username)
            try:
                status = await self._apply_update(session, record_id, changes)
            except IntegrityError as e:
                if not _is_username_clash(e):
                    raise
                raise _username_taken(username) from e
        logger.info(
            "User %s updated: matched=%d modified=%d",
            record_id, status.matched_count, status.modified_count,
        )
        return status

    async def delete_by_id(self, record_id: str) -> DeleteStatus:
        async with self._session("delete_by_id") as session:
            status = await self._delete_where(session, User.id == record_id)
        logger.info("User %s deleted: count=%d", record_id, status.deleted_count)
        return status

    @staticmethod
    async def _flush_checking_username(session, username: str) -> None:
        # A concurrent insert can pass the SELECT above; the unique index decides
        try:
            await session.flush()
        except IntegrityError as e:
            if not _is_username_clash(e):
                raise
            raise _username_taken(username) from e


def _is_username_clash(error: IntegrityError) -> bool:
    # SQLite names the column, PostgreSQL names the uq_users_username index
    return "username" in str(error.orig)


def _username_taken(username: Optional[str]) -> ValidationError:
    return ValidationError(
        message=f"Username '{username}' is already taken",
        field="username",
    )
