"""Tuiter Backend — Bookmark Schemas."""

from pydantic import Field

from tuiter.schemas.common import ApiModel


class BookmarkResponse(ApiModel):
    id: str
    bookmarked_tuit: str = Field(description="Saved tuit")
    bookmarked_by: str = Field(description="User who saved it")
