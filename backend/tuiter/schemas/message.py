"""
Tuiter Backend — Message Schemas
=================================

    POST /users/{uid}/messages/{uid2}  body MessageCreate → MessageResponse
"""

from datetime import datetime

from pydantic import Field

from tuiter.schemas.common import ApiModel, PayloadModel


class MessageCreate(PayloadModel):
    message: str = Field(min_length=1, max_length=2000)


class MessageResponse(ApiModel):
    id: str
    message: str
    from_user: str = Field(description="Sender id")
    to_user: str = Field(description="Recipient id")
    sent_on: datetime
