# Controllers package init
"""
Tuiter Backend — Resource Controllers
======================================

One controller per resource. CONTROLLERS lists them in the order their
routes are mounted on the application.
"""

from tuiter.controllers.base import ResourceController
from tuiter.controllers.bookmark_controller import BookmarkController
from tuiter.controllers.follow_controller import FollowController
from tuiter.controllers.like_controller import LikeController
from tuiter.controllers.message_controller import MessageController
from tuiter.controllers.tuit_controller import TuitController
from tuiter.controllers.user_controller import UserController

CONTROLLERS = (
    UserController,
    TuitController,
    LikeController,
    FollowController,
    BookmarkController,
    MessageController,
)

__all__ = [
    "BookmarkController",
    "CONTROLLERS",
    "FollowController",
    "LikeController",
    "MessageController",
    "ResourceController",
    "TuitController",
    "UserController",
]
