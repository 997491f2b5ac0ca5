"""
Tuiter Backend — User Schemas
==============================

What:  Request/response contract for the users resource.

The password is write-only: accepted by UserCreate/UserUpdate, absent from
UserResponse.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from tuiter.schemas.common import ApiModel, PayloadModel, reject_null

AccountType = Literal["PERSONAL", "ACADEMIC", "PROFESSIONAL"]


class UserCreate(PayloadModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    biography: Optional[str] = None
    account_type: AccountType = "PERSONAL"


class UserUpdate(PayloadModel):
    """Partial update; username, password and accountType may not be null."""
    username: Optional[str] = Field(default=None, min_length=1, max_length=64)
    password: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    biography: Optional[str] = None
    account_type: Optional[AccountType] = None

    @field_validator("username", "password", "account_type")
    @classmethod
    def required_not_null(cls, v: Optional[str]) -> Optional[str]:
        return reject_null(v)


class UserResponse(ApiModel):
    id: str
    username: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    biography: Optional[str] = None
    account_type: str
    joined: datetime
