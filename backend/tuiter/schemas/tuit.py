"""
Tuiter Backend — Tuit Schemas
==============================

What:  Request/response contract for the tuits resource.

    POST /users/{uid}/tuits   body TuitCreate   → TuitResponse
    PUT  /tuits/{tid}         body TuitUpdate   → UpdateStatus
    GET  /tuits, /tuits/{tid}, /users/{uid}/tuits → TuitResponse(s)
"""

from typing import Optional

from pydantic import Field, field_validator

from tuiter.schemas.common import ApiModel, PayloadModel, reject_null


class TuitCreate(PayloadModel):
    text: str = Field(min_length=1, max_length=280, description="Tuit body")


class TuitUpdate(PayloadModel):
    """Partial update: only fields present in the body are applied."""
    text: Optional[str] = Field(default=None, min_length=1, max_length=280)

    @field_validator("text")
    @classmethod
    def text_not_null(cls, v: Optional[str]) -> Optional[str]:
        return reject_null(v)


class TuitResponse(ApiModel):
    id: str = Field(description="Tuit identifier")
    owner_id: str = Field(description="Id of the authoring user")
    text: str
