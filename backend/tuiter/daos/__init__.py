# DAO package init
"""
Tuiter Backend — Data Access Layer
===================================

One DAO class per resource. Instances are created and owned by
tuiter.context.AppContext (one per resource type).

DAO Inventory:
    - UserDao:      users CRUD
    - TuitDao:      tuits CRUD (OwnedResourceDao)
    - LikeDao:      like / unlike, likes by user or tuit
    - FollowDao:    follow / unfollow, following and followers
    - BookmarkDao:  bookmark / unbookmark, bookmarks by user or tuit
    - MessageDao:   send, sent, received, delete
"""

from tuiter.daos.base import BaseDao, OwnedResourceDao
from tuiter.daos.bookmark_dao import BookmarkDao
from tuiter.daos.follow_dao import FollowDao
from tuiter.daos.like_dao import LikeDao
from tuiter.daos.message_dao import MessageDao
from tuiter.daos.tuit_dao import TuitDao
from tuiter.daos.user_dao import UserDao

__all__ = [
    "BaseDao",
    "BookmarkDao",
    "FollowDao",
    "LikeDao",
    "MessageDao",
    "OwnedResourceDao",
    "TuitDao",
    "UserDao",
]
