"""Tuiter Backend — Follow Schemas."""

from pydantic import Field

from tuiter.schemas.common import ApiModel


class FollowResponse(ApiModel):
    id: str
    user_following: str = Field(description="The follower")
    user_followed: str = Field(description="The user being followed")
