"""
Tuiter Backend — Message Controller
=====================================

Endpoints:
    POST   /users/{uid}/messages/{uid2}     uid sends a message to uid2
    GET    /users/{uid}/messages/sent       messages sent by uid
    GET    /users/{uid}/messages/received   messages received by uid
    DELETE /messages/{mid}                  remove a message
"""

from typing import List

from fastapi import APIRouter

from tuiter.controllers.base import ResourceController
from tuiter.daos.message_dao import MessageDao
from tuiter.schemas.common import DeleteStatus
from tuiter.schemas.message import MessageCreate, MessageResponse


class MessageController(ResourceController):
    dao_class = MessageDao
    tag = "Messages"

    def _register_routes(self, router: APIRouter) -> None:
        router.add_api_route(
            "/users/{uid}/messages/{uid2}", self.user_messages_user,
            methods=["POST"], response_model=MessageResponse,
        )
        router.add_api_route(
            "/users/{uid}/messages/sent", self.find_sent_messages,
            methods=["GET"], response_model=List[MessageResponse],
        )
        router.add_api_route(
            "/users/{uid}/messages/received", self.find_received_messages,
            methods=["GET"], response_model=List[MessageResponse],
        )
        router.add_api_route(
            "/messages/{mid}", self.delete_message,
            methods=["DELETE"], response_model=DeleteStatus,
        )

    async def user_messages_user(
        self, uid: str, uid2: str, message: MessageCreate
    ) -> MessageResponse:
        return await self.dao.user_messages_user(uid, uid2, message)

    async def find_sent_messages(self, uid: str) -> List[MessageResponse]:
        return await self.dao.find_sent_messages(uid)

    async def find_received_messages(self, uid: str) -> List[MessageResponse]:
        return await self.dao.find_received_messages(uid)

    async def delete_message(self, mid: str) -> DeleteStatus:
        return await self.dao.delete_message(mid)
