"""
Tuiter Backend — User DAO Tests
=================================

What we test:
    ✅ create returns the user without its password
    ✅ duplicate usernames are rejected on create and update
    ✅ a duplicate caught only by the unique index is still a ValidationError
    ✅ partial update leaves other fields alone
    ✅ delete reports counts
"""

from unittest.mock import AsyncMock

import pytest

from tuiter.daos.user_dao import UserDao
from tuiter.exceptions import ValidationError
from tuiter.schemas.user import UserCreate, UserUpdate


@pytest.fixture
def dao(context):
    return context.dao(UserDao)


def make_user(username="alice", **extra):
    return UserCreate(username=username, password="secret", **extra)


class TestUserDao:

    @pytest.mark.asyncio
    async def test_create_and_find(self, dao):
        created = await dao.create(make_user(first_name="Alice", email="alice@example.com"))

        assert created.username == "alice"
        assert created.first_name == "Alice"
        assert created.account_type == "PERSONAL"
        assert created.joined is not None
        assert not hasattr(created, "password")

        assert await dao.find_by_id(created.id) == created

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, dao):
        await dao.create(make_user())

        with pytest.raises(ValidationError) as exc_info:
            await dao.create(make_user())

        assert exc_info.value.field == "username"
        assert len(await dao.find_all()) == 1

    @pytest.mark.asyncio
    async def test_update_is_partial(self, dao):
        created = await dao.create(make_user(first_name="Alice", last_name="Liddell"))

        status = await dao.update_by_id(created.id, UserUpdate(biography="Down the rabbit hole"))

        assert (status.matched_count, status.modified_count) == (1, 1)
        found = await dao.find_by_id(created.id)
        assert found.biography == "Down the rabbit hole"
        assert found.first_name == "Alice"
        assert found.last_name == "Liddell"

    @pytest.mark.asyncio
    async def test_update_to_taken_username_rejected(self, dao):
        await dao.create(make_user("alice"))
        bob = await dao.create(make_user("bob"))

        with pytest.raises(ValidationError):
            await dao.update_by_id(bob.id, UserUpdate(username="alice"))

        assert (await dao.find_by_id(bob.id)).username == "bob"

    @pytest.mark.asyncio
    async def test_update_keeping_own_username_is_allowed(self, dao):
        alice = await dao.create(make_user("alice"))
        status = await dao.update_by_id(alice.id, UserUpdate(username="alice"))
        assert (status.matched_count, status.modified_count) == (1, 0)

    @pytest.mark.asyncio
    async def test_delete(self, dao):
        created = await dao.create(make_user())

        assert (await dao.delete_by_id(created.id)).deleted_count == 1
        assert (await dao.delete_by_id(created.id)).deleted_count == 0
        assert await dao.find_by_id(created.id) is None


class TestUsernameRace:
    """The unique index rejects a username that slipped past the pre-check."""

    @pytest.mark.asyncio
    async def test_concurrent_create_reports_taken_username(self, dao, monkeypatch):
        await dao.create(make_user("alice"))
        # The second writer's SELECT ran before the first writer committed
        monkeypatch.setattr(dao, "_select_first", AsyncMock(return_value=None))

        with pytest.raises(ValidationError) as exc_info:
            await dao.create(make_user("alice"))

        assert exc_info.value.field == "username"

    @pytest.mark.asyncio
    async def test_concurrent_rename_reports_taken_username(self, dao, monkeypatch):
        await dao.create(make_user("alice"))
        bob = await dao.create(make_user("bob"))
        monkeypatch.setattr(dao, "_select_first", AsyncMock(return_value=None))

        with pytest.raises(ValidationError):
            await dao.update_by_id(bob.id, UserUpdate(username="alice"))

        assert (await dao.find_by_id(bob.id)).username == "bob"

    @pytest.mark.asyncio
    async def test_race_over_http_is_400(self, context, test_client, monkeypatch):
        await test_client.post("/users", json={"username": "alice", "password": "secret"})
        monkeypatch.setattr(
            context.dao(UserDao), "_select_first", AsyncMock(return_value=None),
        )

        response = await test_client.post("/users", json={"username": "alice", "password": "x"})

        assert response.status_code == 400
        assert response.json()["details"]["field"] == "username"
