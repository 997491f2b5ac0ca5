# Models package init
"""
Tuiter Backend — ORM Models
============================

Importing this package registers every table on Base.metadata, which
create_tables() and Alembic's env.py rely on.
"""

from tuiter.models.bookmark import Bookmark
from tuiter.models.follow import Follow
from tuiter.models.like import Like
from tuiter.models.message import Message
from tuiter.models.tuit import Tuit
from tuiter.models.user import User

__all__ = ["Bookmark", "Follow", "Like", "Message", "Tuit", "User"]
