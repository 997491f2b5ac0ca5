"""Tuiter Backend — Like Schemas."""

from pydantic import Field

from tuiter.schemas.common import ApiModel


class LikeResponse(ApiModel):
    id: str
    tuit_id: str = Field(description="Liked tuit")
    liked_by: str = Field(description="User who liked it")
