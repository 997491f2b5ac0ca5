# Schemas package init
from tuiter.schemas.bookmark import BookmarkResponse
from tuiter.schemas.common import DeleteStatus, ErrorResponse, HealthResponse, UpdateStatus
from tuiter.schemas.follow import FollowResponse
from tuiter.schemas.like import LikeResponse
from tuiter.schemas.message import MessageCreate, MessageResponse
from tuiter.schemas.tuit import TuitCreate, TuitResponse, TuitUpdate
from tuiter.schemas.user import UserCreate, UserResponse, UserUpdate

__all__ = [
    "BookmarkResponse",
    "DeleteStatus",
    "ErrorResponse",
    "FollowResponse",
    "HealthResponse",
    "LikeResponse",
    "MessageCreate",
    "MessageResponse",
    "TuitCreate",
    "TuitResponse",
    "TuitUpdate",
    "UpdateStatus",
    "UserCreate",
    "UserResponse",
    "UserUpdate",
]
