"""
Tuiter Backend — Relationship DAO Tests
=========================================

What we test:
    ✅ likes, follows and bookmarks are idempotent per pair
    ✅ reverse lookups (who liked / who follows / who bookmarked)
    ✅ un-* operations report how many rows were removed
    ✅ self-follow is rejected
    ✅ messages: sent/received lists in send order, delete
"""

from datetime import timedelta

import pytest

from tuiter.daos import BookmarkDao, FollowDao, LikeDao, MessageDao
from tuiter.exceptions import ValidationError
from tuiter.schemas.message import MessageCreate


class TestLikeDao:

    @pytest.mark.asyncio
    async def test_like_is_idempotent(self, context):
        dao = context.dao(LikeDao)

        first = await dao.user_likes_tuit("u1", "t1")
        second = await dao.user_likes_tuit("u1", "t1")

        assert first.id == second.id
        assert first.liked_by == "u1"
        assert first.tuit_id == "t1"
        assert len(await dao.find_tuits_liked_by_user("u1")) == 1

    @pytest.mark.asyncio
    async def test_reverse_lookup(self, context):
        dao = context.dao(LikeDao)
        await dao.user_likes_tuit("u1", "t1")
        await dao.user_likes_tuit("u2", "t1")
        await dao.user_likes_tuit("u2", "t2")

        likers = await dao.find_users_that_liked_tuit("t1")

        assert sorted(like.liked_by for like in likers) == ["u1", "u2"]
        assert sorted(like.tuit_id for like in await dao.find_tuits_liked_by_user("u2")) == ["t1", "t2"]

    @pytest.mark.asyncio
    async def test_unlike(self, context):
        dao = context.dao(LikeDao)
        await dao.user_likes_tuit("u1", "t1")

        assert (await dao.user_unlikes_tuit("u1", "t1")).deleted_count == 1
        assert (await dao.user_unlikes_tuit("u1", "t1")).deleted_count == 0
        assert await dao.find_users_that_liked_tuit("t1") == []


class TestFollowDao:

    @pytest.mark.asyncio
    async def test_follow_and_lookups(self, context):
        dao = context.dao(FollowDao)
        await dao.user_follows_user("alice", "bob")
        await dao.user_follows_user("carol", "bob")

        following = await dao.find_users_followed_by_user("alice")
        followers = await dao.find_users_following_user("bob")

        assert [f.user_followed for f in following] == ["bob"]
        assert sorted(f.user_following for f in followers) == ["alice", "carol"]

    @pytest.mark.asyncio
    async def test_follow_is_idempotent(self, context):
        dao = context.dao(FollowDao)
        first = await dao.user_follows_user("alice", "bob")
        second = await dao.user_follows_user("alice", "bob")
        assert first.id == second.id
        assert len(await dao.find_users_following_user("bob")) == 1

    @pytest.mark.asyncio
    async def test_self_follow_rejected(self, context):
        dao = context.dao(FollowDao)

        with pytest.raises(ValidationError) as exc_info:
            await dao.user_follows_user("alice", "alice")

        assert exc_info.value.field == "uid2"
        assert await dao.find_users_followed_by_user("alice") == []

    @pytest.mark.asyncio
    async def test_unfollow(self, context):
        dao = context.dao(FollowDao)
        await dao.user_follows_user("alice", "bob")

        status = await dao.user_unfollows_user("alice", "bob")

        assert status.deleted_count == 1
        assert await dao.find_users_followed_by_user("alice") == []


class TestBookmarkDao:

    @pytest.mark.asyncio
    async def test_bookmark_cycle(self, context):
        dao = context.dao(BookmarkDao)

        first = await dao.user_bookmarks_tuit("u1", "t1")
        again = await dao.user_bookmarks_tuit("u1", "t1")
        assert first.id == again.id
        assert first.bookmarked_by == "u1"
        assert first.bookmarked_tuit == "t1"

        assert len(await dao.find_tuits_bookmarked_by_user("u1")) == 1
        assert len(await dao.find_users_that_bookmarked_tuit("t1")) == 1

        assert (await dao.user_unbookmarks_tuit("u1", "t1")).deleted_count == 1
        assert await dao.find_tuits_bookmarked_by_user("u1") == []


class TestMessageDao:

    @pytest.mark.asyncio
    async def test_send_and_list(self, context):
        dao = context.dao(MessageDao)

        first = await dao.user_messages_user("alice", "bob", MessageCreate(message="hi bob"))
        await dao.user_messages_user("alice", "carol", MessageCreate(message="hi carol"))
        await dao.user_messages_user("bob", "alice", MessageCreate(message="hi alice"))

        assert first.from_user == "alice"
        assert first.to_user == "bob"
        assert first.sent_on is not None

        sent = await dao.find_sent_messages("alice")
        received = await dao.find_received_messages("alice")

        assert sorted(m.message for m in sent) == ["hi bob", "hi carol"]
        assert [m.message for m in received] == ["hi alice"]

    @pytest.mark.asyncio
    async def test_delete_message(self, context):
        dao = context.dao(MessageDao)
        message = await dao.user_messages_user("alice", "bob", MessageCreate(message="oops"))

        assert (await dao.delete_message(message.id)).deleted_count == 1
        assert (await dao.delete_message(message.id)).deleted_count == 0
        assert await dao.find_received_messages("bob") == []

    @pytest.mark.asyncio
    async def test_sent_on_is_utc_aware_after_read(self, context):
        dao = context.dao(MessageDao)
        created = await dao.user_messages_user("alice", "bob", MessageCreate(message="hi"))

        (read,) = await dao.find_sent_messages("alice")

        assert read.sent_on.tzinfo is not None
        assert read.sent_on.utcoffset() == timedelta(0)
        assert read == created
