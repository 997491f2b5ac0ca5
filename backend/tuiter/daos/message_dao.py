"""
Tuiter Backend — Message DAO
=============================

What:  Persistence for direct messages.
Who:   MessageController.

Sent and received lists are ordered by sent_on, oldest first.
"""

import logging
from typing import List

from sqlalchemy import select

from tuiter.daos.base import BaseDao
from tuiter.models.message import Message
from tuiter.schemas.common import DeleteStatus
from tuiter.schemas.message import MessageCreate, MessageResponse

logger = logging.getLogger(__name__)


class MessageDao(BaseDao):
    model = Message
    resource = "message"

    async def user_messages_user(
        self, uid: str, uid2: str, payload: MessageCreate
    ) -> MessageResponse:
        async with self._session("user_messages_user") as session:
            message = Message(from_user=uid, to_user=uid2, message=payload.message)
            session.add(message)
            await session.flush()
            logger.info("Message %s sent from %s to %s", message.id, uid, uid2)
            return MessageResponse.model_validate(message)

    async def find_sent_messages(self, uid: str) -> List[MessageResponse]:
        async with self._session("find_sent_messages") as session:
            result = await session.execute(
                select(Message)
                .where(Message.from_user == uid)
                .order_by(Message.sent_on, Message.id)
            )
            return [MessageResponse.model_validate(row) for row in result.scalars().all()]

    async def find_received_messages(self, uid: str) -> List[MessageResponse]:
        async with self._session("find_received_messages") as session:
            result = await session.execute(
                select(Message)
                .where(Message.to_user == uid)
                .order_by(Message.sent_on, Message.id)
            )
            return [MessageResponse.model_validate(row) for row in result.scalars().all()]

    async def delete_message(self, mid: str) -> DeleteStatus:
        async with self._session("delete_message") as session:
            status = await self._delete_where(session, Message.id == mid)
        logger.info("Message %s deleted: count=%d", mid, status.deleted_count)
        return status
